"""Logging setup shared by the demo CLI and applications embedding navmenu."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Turn ``"debug"``/``"INFO"``/``10`` into a logging level, WARNING if unknown."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(
    level: Union[int, str] = logging.INFO, stream: Optional[logging.Handler] = None
) -> None:
    """Route every ``navmenu`` record through one root handler.

    Parameters
    ----------
    level:
        Level for the root logger, as a number or a level name.
    stream:
        Optional handler. When omitted records go to ``sys.stderr`` so
        rendered markup on ``stdout`` stays clean.
    """

    handler: logging.Handler = stream if stream is not None else logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root_logger = logging.getLogger()
    # Repeated calls must not stack handlers.
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.setLevel(resolve_level(level))
    root_logger.addHandler(handler)


__all__ = ["configure_logging", "resolve_level"]
