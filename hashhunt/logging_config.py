"""
structlog setup for the API process.

JSON lines by default, a coloured console renderer when running at DEBUG.
Records emitted through ``logging.getLogger(__name__)`` are rendered by the
same pipeline, with their ``extra={...}`` fields lifted into the event.
"""

import logging
import sys
from typing import Any, Iterable, Optional

import structlog

from .config import settings

# LogRecord attributes that are not caller-supplied ``extra`` fields.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

_SECRET_KEYS = ("authorization", "api_key", "apikey", "bearer_token", "token")
_REDACTED = "***"


def _lift_record_extras(_: Any, __: str, event_dict: dict) -> dict:
    record = event_dict.get("_record")
    if record is None:
        return event_dict
    for key, value in vars(record).items():
        if key in _RECORD_ATTRS or key.startswith("_"):
            continue
        # ``event`` is structlog's message slot; keep the caller's tag beside it.
        event_dict["event_name" if key == "event" else key] = value
    return event_dict


def _secret_redactor(secrets: Iterable[str]):
    known = [secret for secret in secrets if secret]

    def _redact(_: Any, __: str, event_dict: dict) -> dict:
        for key, value in list(event_dict.items()):
            if key.lower() in _SECRET_KEYS and value:
                event_dict[key] = _REDACTED
            elif isinstance(value, str) and known:
                for secret in known:
                    if secret in value:
                        value = value.replace(secret, _REDACTED)
                event_dict[key] = value
        return event_dict

    return _redact


def setup_logging(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: Override log level (default: ``settings.log_level``)
        json_logs: Force JSON (True) or console (False) output; by default
            console output is used only at DEBUG.
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    use_json = json_logs if json_logs is not None else level != logging.DEBUG

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _secret_redactor([settings.inch_api_key, settings.twitter_bearer_token]),
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[_lift_record_extras, *shared_processors],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # httpx logs every upstream URL at INFO, including wallet addresses.
    for name in ("uvicorn.access", "httpcore", "httpx"):
        logging.getLogger(name).setLevel(logging.WARNING)
