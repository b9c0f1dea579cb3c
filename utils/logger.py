"""
Logging setup for the Tech-Hub Activity Dashboard.

Every record carries the application name (``extra[app]``) so API and
batch logs can share one directory. File output is either plain text or
one JSON object per line (LOG_JSON) for log shippers.

Usage:
    from utils import logger, init_logging

    init_logging(app_name="api")
    logger.info("Aggregated 12 clusters into 3 active hubs")
"""
import sys
from pathlib import Path
from typing import List

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[app]}</magenta> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[app]} | {name}:{function} - {message}"

# Sink ids added by setup_logging, empty until configured
_handler_ids: List[int] = []


def setup_logging(
    log_dir: Path = None,
    log_level: str = "INFO",
    app_name: str = "app",
    json_logs: bool = False,
    retention: str = "30 days",
    force: bool = False,
) -> List[int]:
    """
    Configure console and (optionally) file logging.

    Args:
        log_dir: Directory for daily log files. None disables file logging.
        log_level: Minimum level for both sinks
        app_name: Bound into every record and used as the log file prefix
        json_logs: Write the file sink as serialized JSON lines
        retention: How long rotated files are kept
        force: Reconfigure even if logging was already set up

    Returns:
        Ids of the sinks that were added
    """
    if _handler_ids and not force:
        return list(_handler_ids)

    reset_logging()
    logger.remove()
    logger.configure(extra={"app": app_name})

    _handler_ids.append(logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT))

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(logger.add(
            log_dir / f"{app_name}_{{time:YYYY-MM-DD}}.log",
            level=log_level,
            format=FILE_FORMAT,
            serialize=json_logs,
            rotation="00:00",
            retention=retention,
            compression="gz",
            encoding="utf-8"
        ))
        logger.info(f"Logging to {log_dir} (json={json_logs})")

    return list(_handler_ids)


def reset_logging():
    """Remove the sinks added by setup_logging."""
    while _handler_ids:
        handler_id = _handler_ids.pop()
        try:
            logger.remove(handler_id)
        except ValueError:
            # already removed elsewhere
            pass


def init_logging(app_name: str = "app") -> List[int]:
    """
    Configure logging from Settings. Call once at application startup.

    Args:
        app_name: Name bound into records and used for log files (e.g. "api")
    """
    from config import settings, ensure_directories
    ensure_directories()
    return setup_logging(
        log_dir=settings.LOG_DIR,
        log_level=settings.LOG_LEVEL,
        app_name=app_name,
        json_logs=settings.LOG_JSON,
        retention=settings.LOG_RETENTION,
    )


__all__ = ["logger", "setup_logging", "reset_logging", "init_logging"]
