import sys
from loguru import logger
from .config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_configured_level = None

def configure_logging(level: str = None) -> None:
    """(Re)install the single stderr sink at the given level.

    Falls back to get_config().log_level. Calling again with the same level is a no-op.
    """
    global _configured_level
    level = (level or get_config().log_level).upper()
    if level == _configured_level:
        return
    logger.remove()
    logger.configure(extra={"name": "order_api"})
    logger.add(sink=sys.stderr, level=level, format=LOG_FORMAT)
    _configured_level = level

def get_logger(name: str = None):
    """Get the configured logger, bound to `name` when given."""
    configure_logging()
    if name:
        return logger.bind(name=name)
    return logger
