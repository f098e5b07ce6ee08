from .digest import digest_of, verify_digest
from .cipher import Cipher, AESGCMHKDFCipher, default_cipher

__all__ = [
    "digest_of",
    "verify_digest",
    "Cipher",
    "AESGCMHKDFCipher",
    "default_cipher",
]
