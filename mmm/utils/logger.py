import os
import sys

from loguru import logger

from config.settings import settings

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(
    *,
    json_logs: bool | None = None,
    level: str | None = None,
    log_file: str | None = None,
) -> None:
    """Configure loguru sinks. Unset arguments fall back to `settings`.

    LOG_LEVEL env overrides the console level. The optional file sink always
    records DEBUG, which includes every rejected curve/allowlist/fee check.
    """
    json_logs = settings.json_logs if json_logs is None else json_logs
    console_level = os.getenv("LOG_LEVEL", level or settings.log_level).upper()
    log_file = settings.log_file if log_file is None else log_file

    logger.remove()
    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(sys.stdout, format=_CONSOLE_FORMAT, level=console_level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            rotation="50 MB",
            retention="3 days",
            compression="gz",
            level="DEBUG",
            serialize=json_logs,
        )
