import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from iseefortune_verifier.config.settings import LoggingSettings

ROOT_LOGGER_NAME = "iseefortune"
LOG_FILENAME = "verifier.log"
DEFAULT_LOG_BACKUP_COUNT = 10

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_MARKER = "_iseefortune_handler"


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line.

    Dict messages are merged into the object; anything else lands under "message".
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }
        if isinstance(record.msg, dict) and not record.args:
            payload.update(record.msg)
        else:
            payload["message"] = record.getMessage()
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, sort_keys=False)


def _build_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return JsonFormatter()
    return logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT)


def get_logger(name: str = "") -> logging.Logger:
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    settings = settings or LoggingSettings()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.level)
    logger.propagate = False

    # Re-running setup replaces our handlers instead of stacking them.
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = _build_formatter(settings.json_logs)

    # stdout carries CLI output
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, _HANDLER_MARKER, True)
    logger.addHandler(stream_handler)

    if settings.log_dir is not None:
        os.makedirs(settings.log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(settings.log_dir, LOG_FILENAME),
            maxBytes=settings.retention_bytes,
            backupCount=DEFAULT_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        logger.addHandler(file_handler)

    return logger
