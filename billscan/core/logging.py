import sys

from loguru import logger

from .config import settings

# Keyword context passed to logger calls (vendor=..., rule=...) lands in {extra}
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> | {extra}"
)


def setup_logging(level: str | None = None, serialize: bool | None = None, sink=None):
    """
    Configure the process-wide loguru logger.

    Replaces loguru's default stderr sink with one honouring LOG_LEVEL and
    LOG_JSON. Safe to call more than once; each call resets the sinks.

    Returns:
        The configured loguru logger
    """
    logger.remove()
    logger.add(
        sink or sys.stderr,
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        serialize=settings.log_json if serialize is None else serialize,
        backtrace=False,
        diagnose=settings.app_env == "dev",
    )
    return logger
