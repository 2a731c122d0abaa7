import sys

from loguru import logger

LOG_FORMAT = (
    '<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level}</level> | '
    '<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | {message}'
)


def setup_logging(level: str = 'INFO') -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
