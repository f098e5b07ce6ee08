from __future__ import annotations

import logging
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Attach a stream handler to the root logger (CLI use only).
    Library modules only ever call logging.getLogger(__name__).
    """
    from remote_attachment.core.settings import get_settings

    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=_FORMAT)
