import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the ``docsim`` logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("docsim")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
