from enum import Enum


class ErrorCode(str, Enum):
    FETCH_ERROR = "fetch_error"
    INTEGRITY_ERROR = "integrity_error"
    ENVELOPE_ERROR = "envelope_error"
    DECRYPTION_ERROR = "decryption_error"
    CODEC_NOT_FOUND = "codec_not_found"
    SCHEME_ERROR = "scheme_error"
    KEY_MATERIAL_ERROR = "key_material_error"
    INTERNAL_ERROR = "internal_error"
