# ============================================================================
# FILE: openmusic/core/logging.py
# ============================================================================
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("multipart", "httpx", "sqlalchemy.engine")

def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once for the whole process"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
