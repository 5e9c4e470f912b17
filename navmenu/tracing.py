"""Structured logging helpers for menu building, matching and rendering.

Every record is a single JSON object with an ``event`` key, e.g.::

    {"event": "menu.render.finish", "item": "root", "length": 412, "renderer": "list"}
"""

from __future__ import annotations

import json
import logging
import math
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

__all__ = ["TraceSpan", "item_summary", "log_event", "safe_json", "trace"]

_TRACE_LOGGER = "navmenu.trace"


def item_summary(item: Any) -> Dict[str, Any]:
    """Describe a menu item without walking its subtree."""

    return {"name": item.name, "uri": item.uri, "children": len(item.children)}


def _is_item_like(value: Any) -> bool:
    return all(hasattr(value, attr) for attr in ("name", "uri", "children"))


def safe_json(value: Any) -> Any:
    """Return ``value`` converted into a JSON-serialisable structure."""

    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [safe_json(entry) for entry in value]
    if isinstance(value, dict):
        return {str(key): safe_json(entry) for key, entry in value.items()}
    if _is_item_like(value):
        return item_summary(value)
    if callable(getattr(value, "as_dict", None)):
        return safe_json(value.as_dict())
    if hasattr(value, "__dict__"):
        return {key: safe_json(entry) for key, entry in vars(value).items() if not key.startswith("_")}
    return repr(value)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    exc_info: bool | BaseException | tuple[Any, Any, Any] | None = None,
    **fields: Any,
) -> None:
    """Emit ``event`` with ``fields`` as one JSON line; ``None`` fields are dropped."""

    if not logger.isEnabledFor(level):
        return

    payload: Dict[str, Any] = {"event": event}
    payload.update({key: safe_json(value) for key, value in fields.items() if value is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, sort_keys=True), exc_info=exc_info)


@dataclass
class TraceSpan:
    """An open trace; ``fields`` are repeated on every record of the span."""

    name: str
    logger: logging.Logger
    fields: Dict[str, Any] = field(default_factory=dict)
    start_time: float = field(default_factory=time.perf_counter)

    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self.start_time) * 1000, 2)

    def emit(self, level: int, event: str, **extra: Any) -> None:
        log_event(self.logger, level, event, trace=self.name, **{**self.fields, **extra})

    def note(self, **fields: Any) -> None:
        """Emit an in-span debug record."""

        self.emit(logging.DEBUG, "trace.note", **fields)


@contextmanager
def trace(name: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[TraceSpan]:
    """Log ``trace.start`` and ``trace.end`` (or ``trace.error``) around a block.

    Exceptions are logged with their traceback and re-raised.
    """

    span = TraceSpan(name=name, logger=logger or logging.getLogger(_TRACE_LOGGER), fields=dict(fields))
    span.emit(logging.INFO, "trace.start")
    try:
        yield span
    except Exception as exc:
        span.emit(logging.ERROR, "trace.error", exc_info=True, duration_ms=span.elapsed_ms(), error=repr(exc))
        raise
    span.emit(logging.INFO, "trace.end", duration_ms=span.elapsed_ms())
