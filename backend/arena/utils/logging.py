import logging


def create_logger(level: int) -> logging.Logger:
    formatter = logging.Formatter(fmt="%(asctime)s - %(levelname)s - %(module)s - %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logger = logging.getLogger("arena")
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(handler)

    return logger


logger = create_logger(logging.INFO)
