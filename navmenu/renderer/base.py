"""Base class shared by the menu renderers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Optional

from ..item import Item
from ..matcher import Matcher
from .options import RenderOptions


class Renderer(ABC):
    """Render a menu item tree to markup for a request context."""

    def __init__(
        self,
        matcher: Matcher,
        *,
        logger: Optional[logging.Logger] = None,
        **defaults: Any,
    ) -> None:
        self._matcher = matcher
        self._options = RenderOptions().apply(**defaults)
        self._logger = logger or logging.getLogger(f"navmenu.renderer.{type(self).__name__}")

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    @property
    def options(self) -> RenderOptions:
        """Return a copy of the renderer defaults."""

        return self._options.copy()

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def resolve_options(self, **overrides: Any) -> RenderOptions:
        """Return a private copy of the defaults with ``overrides`` applied."""

        return self._options.copy().apply(**overrides)

    @abstractmethod
    def render(self, context: Mapping[str, Any], item: Item, **overrides: Any) -> str:
        """Render the children of ``item`` and return the markup."""

        raise NotImplementedError


__all__ = ["Renderer"]
