"""
PeerHaven Logging Configuration

structlog setup shared by every module. Console output in
development, one JSON object per line elsewhere.

PRIVACY: User messages are never logged verbatim. Log lengths,
intent kinds and categories only. Credential-bearing keys are
redacted before rendering.
"""

import logging
import sys
from typing import Any

import structlog

from peerhaven import __version__
from peerhaven.config.settings import Settings

REDACTED = "[REDACTED]"

# Substrings of event keys whose values never reach the output
SENSITIVE_KEY_PARTS: tuple[str, ...] = (
    "api_key",
    "apikey",
    "authorization",
    "credential",
    "password",
    "secret",
    "token",
    "utterance",
)

QUIET_LOGGERS: tuple[str, ...] = ("uvicorn.access", "httpx", "httpcore", "sqlalchemy.engine")


def _is_sensitive(key: str) -> bool:
    lowered = key.lower().replace("-", "_")
    return any(part in lowered for part in SENSITIVE_KEY_PARTS)


def _scrub(key: str, value: Any) -> Any:
    if _is_sensitive(key):
        return REDACTED
    if isinstance(value, dict):
        return {k: _scrub(k, v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_scrub(key, item) for item in value]
    return value


def redact_sensitive_fields(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor replacing credential values, nested ones included."""
    return {key: _scrub(key, value) for key, value in event_dict.items()}


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog and the stdlib root logger.
    
    Called once by the application factory.
    """
    def add_service(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", "peerhaven-backend")
        event_dict.setdefault("version", __version__)
        event_dict.setdefault("env", settings.env)
        return event_dict
    
    if settings.env == "development":
        renderer: list[Any] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_sensitive_fields,
            add_service,
            *renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=settings.log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_correlation_id(correlation_id: str) -> None:
    """Attach the request's correlation id to every entry logged in this context."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
