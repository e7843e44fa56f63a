"""
Logging setup for the school administration backend.

Two front ends share one configuration:

* `get_logger(name)` wraps a stdlib logger; keyword context goes through
  `extra=` and ends up as top-level keys in the JSON output.
* `get_structured_logger(name)` returns a structlog logger for event style
  records (payment audit trail).

Every record carries the request id and, when the request names one, the
school id. Both live in context variables set by the request middleware.
"""

import logging
import logging.handlers
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
from pythonjsonlogger import jsonlogger

from school_admin.config.settings import settings

SERVICE_NAME = "school-admin"
ROOT_LOGGER_NAME = "school_admin"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
school_id: ContextVar[Optional[str]] = ContextVar("school_id", default=None)


def current_log_context() -> Dict[str, Optional[str]]:
    return {"request_id": request_id.get(), "school_id": school_id.get()}


# --- stdlib ----------------------------------------------------------------------

class LogContextFilter(logging.Filter):
    """Copy the request and school ids onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in current_log_context().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class SchoolJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = SERVICE_NAME
        log_record["environment"] = settings.ENVIRONMENT
        log_record["location"] = f"{record.module}.{record.funcName}:{record.lineno}"
        if record.exc_info and "exception" not in log_record:
            log_record["exception"] = self.formatException(record.exc_info)


def _build_formatter() -> logging.Formatter:
    if settings.LOG_FORMAT == "json":
        return SchoolJsonFormatter("%(asctime)s %(levelname)s %(name)s %(request_id)s %(school_id)s %(message)s")
    return logging.Formatter(
        "%(asctime)s %(levelname)-8s %(name)s [req=%(request_id)s school=%(school_id)s] %(message)s"
    )


def _build_handlers(level: int) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
            )
        )

    formatter = _build_formatter()
    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(LogContextFilter())
        handler.setFormatter(formatter)
    return handlers


def _quiet_library_loggers() -> None:
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.LOG_SQL_QUERIES else logging.WARNING
    )


def _configure_stdlib() -> None:
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    # Reconfiguring (app factory called again, tests) must not stack handlers
    root.handlers.clear()
    for handler in _build_handlers(level):
        root.addHandler(handler)

    _quiet_library_loggers()


# --- structlog -------------------------------------------------------------------

def add_school_context(logger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """structlog processor: request/school ids and service metadata."""
    for key, value in current_log_context().items():
        if value is not None:
            event_dict.setdefault(key, value)
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    event_dict["service"] = SERVICE_NAME
    event_dict["environment"] = settings.ENVIRONMENT
    return event_dict


def _configure_structlog() -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == "json"
        else structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"])
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            add_school_context,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


# --- public API ------------------------------------------------------------------

class LoggerAdapter:
    """
    Thin wrapper over a stdlib logger with bound context.

    `bind()` returns a new adapter so context never leaks between services
    sharing a logger name.
    """

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, Any]] = None):
        self.logger = logger
        self._context: Dict[str, Any] = dict(context or {})

    def bind(self, **context: Any) -> "LoggerAdapter":
        return LoggerAdapter(self.logger, {**self._context, **context})

    def _log(self, level: int, message: str, *args, **kwargs) -> None:
        if not self.logger.isEnabledFor(level):
            return
        extra = {**self._context, **(kwargs.get("extra") or {})}
        kwargs["extra"] = extra
        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, *args, **kwargs)


def configure_logging() -> None:
    """Configure stdlib and structlog logging from settings."""
    _configure_stdlib()
    _configure_structlog()


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    return LoggerAdapter(logging.getLogger(name or ROOT_LOGGER_NAME))


def get_structured_logger(name: Optional[str] = None):
    return structlog.get_logger(name or ROOT_LOGGER_NAME)
