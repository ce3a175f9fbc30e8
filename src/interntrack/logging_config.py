"""structlog setup: stdlib loggers rendered as JSON in deployments, console locally."""

import logging
import sys

import structlog

# Event dict keys whose values never reach the log stream
SENSITIVE_KEYS = frozenset({"verification_code", "code", "password", "smtp_password", "authorization", "token"})

_QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "aiosmtplib": logging.WARNING,
    "httpx": logging.WARNING,
}


def redact_sensitive(logger, method_name: str, event_dict: dict) -> dict:
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "[redacted]"
    return event_dict


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Route stdlib logging through structlog's ProcessorFormatter on stdout."""
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_sensitive,
    ]
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=shared_processors,
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def bind_request_context(trace_id: str, user_id: str | None = None, role: str | None = None) -> None:
    """Attach the trace id, and the caller once authenticated, to every log line of this request."""
    structlog.contextvars.bind_contextvars(
        trace_id=trace_id,
        **{key: value for key, value in (("user_id", user_id), ("role", role)) if value},
    )


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
