import logging
import os

LOGGER_NAME = "pos_firestoredb"


def _build_logger() -> logging.Logger:
    pos_logger = logging.getLogger(LOGGER_NAME)
    if not pos_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        pos_logger.addHandler(handler)
    pos_logger.setLevel(os.getenv("POS_FIRESTOREDB_LOG_LEVEL", "INFO").upper())
    return pos_logger


logger = _build_logger()
