import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def install_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``status_api`` logger.

    - Always logs to stderr.
    - Adds a rotating file handler when ``log_file`` is given.
    - Safe to call more than once; handlers are not duplicated.
    """
    logger = logging.getLogger("status_api")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    fmt = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    if log_file:
        try:
            path = Path(log_file).resolve()
            path.parent.mkdir(parents=True, exist_ok=True)
            if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
                fh = RotatingFileHandler(str(path), maxBytes=2_000_000, backupCount=3, encoding="utf-8")
                fh.setFormatter(fmt)
                logger.addHandler(fh)
        except OSError:
            logger.warning("Cannot open log file %s, logging to console only", log_file, exc_info=True)

    return logger
