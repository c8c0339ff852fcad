"""
Structured JSON logging for the metrics backend.

Every module logs through ``get_logger(name)`` under the
``metrics_kernel`` namespace; event names are the log message
(``csv_ingest_started``, ``kpi_created`` ...) and everything else goes in
``extra``. One upload is tagged by the fields bound in ``LogContext``:

    with LogContext.bind(correlation_id=cid, producer="ingestion", batch_kind="kpi"):
        ...

Output is one JSON object per line.
"""

__all__ = [
    "CONTEXT_FIELDS",
    "StructuredFormatter",
    "LogContext",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import sys
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping

_LOGGER_PREFIX = "metrics_kernel"

# correlation_id: one ingest call; producer: calling layer; batch_kind: kpi | staff
CONTEXT_FIELDS: tuple[str, ...] = ("correlation_id", "producer", "batch_kind")

_EMPTY: Mapping[str, str] = MappingProxyType({})
_context: ContextVar[Mapping[str, str]] = ContextVar("metrics_log_context", default=_EMPTY)


def _check_fields(fields: Mapping[str, Any]) -> dict[str, str]:
    unknown = sorted(set(fields) - set(CONTEXT_FIELDS))
    if unknown:
        raise TypeError(f"Unknown log context field(s): {', '.join(unknown)}")
    return {k: str(v) for k, v in fields.items() if v is not None}


class LogContext:
    """Per-task log fields, carried in a single ContextVar."""

    @staticmethod
    def set(**fields: str | None) -> None:
        """Merge non-None fields into the current context."""
        _context.set(MappingProxyType({**_context.get(), **_check_fields(fields)}))

    @staticmethod
    def get_all() -> dict[str, str]:
        return dict(_context.get())

    @staticmethod
    def clear() -> None:
        _context.set(_EMPTY)

    @staticmethod
    @contextmanager
    def bind(**fields: str | None) -> Iterator[type["LogContext"]]:
        """Merge fields for the duration of the block, then restore."""
        token = _context.set(MappingProxyType({**_context.get(), **_check_fields(fields)}))
        try:
            yield LogContext
        finally:
            _context.reset(token)


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------

_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    return str(obj)


def _exception_fields(exc: BaseException) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "exc_type": type(exc).__name__,
        "exc_message": str(exc),
    }
    code = getattr(exc, "code", None)
    if code is not None:
        fields["exc_code"] = code
    # Kernel exceptions keep their context as public attributes
    for key, value in vars(exc).items():
        if not key.startswith("_") and key != "code":
            fields[f"exc_{key}"] = value
    return fields


class StructuredFormatter(logging.Formatter):
    """One JSON object per record: envelope, context, extras, exception."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context.get(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in payload
        )
        if record.exc_info and record.exc_info[1] is not None:
            payload.update(_exception_fields(record.exc_info[1]))
            payload["traceback"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=_json_default)


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def get_logger(name: str) -> logging.Logger:
    """Logger ``metrics_kernel.<name>``."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


_installed_handler: logging.Handler | None = None
_lock = threading.Lock()


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: Any = None,
    handler: logging.Handler | None = None,
) -> None:
    """
    Install the JSON handler on the ``metrics_kernel`` logger.

    Only the first call takes effect; the CLI and engine setup may both call
    it. ``level`` accepts a name such as ``"DEBUG"`` (as loaded from YAML).
    """
    global _installed_handler
    with _lock:
        if _installed_handler is not None:
            return
        _installed_handler = handler or logging.StreamHandler(stream or sys.stderr)
        _installed_handler.setFormatter(StructuredFormatter())

        root = logging.getLogger(_LOGGER_PREFIX)
        root.setLevel(level)
        root.propagate = False
        root.addHandler(_installed_handler)


def reset_logging() -> None:
    """Remove the installed handler so configure_logging can run again. Tests only."""
    global _installed_handler
    with _lock:
        root = logging.getLogger(_LOGGER_PREFIX)
        if _installed_handler is not None:
            root.removeHandler(_installed_handler)
            _installed_handler = None
        root.setLevel(logging.NOTSET)
