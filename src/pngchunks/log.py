import sys

from loguru import logger


def set_logging(is_logging: bool) -> None:
    logger.enable("pngchunks")
    logger.remove()
    logger.add(sys.stdout, level="DEBUG", filter=lambda _: is_logging)

    # If a message higher than ERROR is logged while is_logging is False, log it to stderr regardless of the logging flag
    logger.add(sys.stderr, level="ERROR", filter=lambda _: not is_logging)
