import logging
import os


def get_logger(name: str) -> logging.Logger:
    """
    Logger shared by the library, the CLI and the API.

    - Attaches a stream handler only once per logger
    - Level comes from FIXER_LOG_LEVEL (default INFO)
    - Does not propagate, so uvicorn's root config is left alone
    """

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s"
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        logger.propagate = False

        level_name = os.environ.get("FIXER_LOG_LEVEL", "INFO").upper()
        level = logging.getLevelName(level_name)
        if isinstance(level, int):
            logger.setLevel(level)
        else:
            # getLevelName returns "Level X" for names it does not know
            logger.setLevel(logging.INFO)
            logger.warning("Unknown FIXER_LOG_LEVEL %r, using INFO", level_name)

    return logger
