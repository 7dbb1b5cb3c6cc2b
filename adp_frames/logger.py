import logging
from typing import Optional

PACKAGE_LOGGER = "adp_frames"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(level="WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """
    For debugging and informational purposes. Replaces any handler a previous
    call installed, so the CLI can be invoked repeatedly in one process.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    log.addHandler(handler)
    log.setLevel(level.upper() if isinstance(level, str) else level)
    return log
