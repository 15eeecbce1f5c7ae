"""
Logging configuration for StudyAI

Console (and optional file) sinks for loguru, plus a bridge that routes the
standard-library loggers of uvicorn and the Supabase HTTP stack into the
same sinks.
"""
import logging
import sys
from loguru import logger
from studyai.config import settings

# Standard-library loggers used by the server and the store client
BRIDGED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx", "postgrest", "supabase")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"


class InterceptHandler(logging.Handler):
    """Forward standard-library log records to loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(name=record.name).opt(exception=record.exc_info).log(level, record.getMessage())


# Remove default logger
logger.remove()
logger.configure(extra={"name": "studyai"})

# Add console handler
logger.add(
    sys.stdout,
    format=CONSOLE_FORMAT,
    level=settings.LOG_LEVEL,
    colorize=True
)

# Add file handler when a log file is configured
if settings.LOG_FILE:
    logger.add(
        settings.LOG_FILE,
        rotation="10 MB",
        retention="7 days",
        level=settings.LOG_LEVEL,
        format=FILE_FORMAT
    )

for _name in BRIDGED_LOGGERS:
    _std_logger = logging.getLogger(_name)
    _std_logger.handlers = [InterceptHandler()]
    _std_logger.propagate = False


def get_logger(name: str):
    """Get a logger instance with a specific name"""
    return logger.bind(name=name)
