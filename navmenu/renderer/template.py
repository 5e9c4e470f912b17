"""Render menus through a theme, e.g. Jinja2 templates."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..item import Item
from ..matcher import Matcher
from ..tracing import log_event
from .base import Renderer
from .html import html_classes, markup_attributes
from .options import TEMPLATE_EXTRA

MENU_TEMPLATE = "menu/menu.html.jinja"

_TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"


class Theme(ABC):
    """Turn a template name and a data payload into markup."""

    @abstractmethod
    def html(self, context: Mapping[str, Any], template: str, data: Dict[str, Any]) -> str:
        raise NotImplementedError


class JinjaTheme(Theme):
    """Theme backed by a Jinja2 environment with HTML autoescaping."""

    def __init__(
        self,
        template_dir: Optional[Path] = None,
        *,
        environment: Optional[Environment] = None,
    ) -> None:
        self._env = environment or Environment(
            loader=FileSystemLoader(str(template_dir or _TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @property
    def environment(self) -> Environment:
        return self._env

    def html(self, context: Mapping[str, Any], template: str, data: Dict[str, Any]) -> str:
        return self._env.get_template(template).render(**data)


class TemplateRenderer(Renderer):
    """Delegate rendering to a :class:`Theme`.

    The theme receives the request context as ``ctx``, the root ``item``, the
    resolved ``options``, the ``matcher`` and two helpers: ``classes`` joins
    class names and ``attributes`` formats an attribute mapping. The
    template name comes from the ``template`` extra and defaults to
    :data:`MENU_TEMPLATE`, which indents (or compresses) like
    :class:`~navmenu.renderer.list.ListRenderer`.
    """

    def __init__(
        self,
        theme: Theme,
        matcher: Matcher,
        *,
        logger: Optional[logging.Logger] = None,
        **defaults: Any,
    ) -> None:
        super().__init__(matcher, logger=logger, **defaults)
        self._theme = theme

    @property
    def theme(self) -> Theme:
        return self._theme

    def render(self, context: Mapping[str, Any], item: Item, **overrides: Any) -> str:
        options = self.resolve_options(**overrides)
        template = options.extra(TEMPLATE_EXTRA, MENU_TEMPLATE)
        data = {
            "ctx": context,
            "item": item,
            "options": options,
            "matcher": self.matcher,
            "classes": html_classes,
            "attributes": markup_attributes,
        }
        try:
            content = self._theme.html(context, template, data)
        finally:
            if options.clear_matcher:
                self.matcher.clear()

        log_event(
            self.logger,
            logging.DEBUG,
            "menu.render.finish",
            renderer="template",
            template=template,
            item=item.name,
            length=len(content),
        )
        return content


__all__ = ["JinjaTheme", "MENU_TEMPLATE", "TemplateRenderer", "Theme"]
