"""Render menu trees as nested ``<ul>``/``<li>`` lists."""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from ..item import Item
from ..tracing import log_event
from .base import Renderer
from .html import html_attributes, html_classes
from .options import RenderOptions


class ListRenderer(Renderer):
    """Render the children of an item as nested HTML lists.

    Every ``<li>`` gets classes for the current item, its ancestors, the
    first and last displayed siblings and branch/leaf state. Output is
    indented four spaces per level unless the ``compressed`` extra is set.
    """

    def render(self, context: Mapping[str, Any], item: Item, **overrides: Any) -> str:
        options = self.resolve_options(**overrides)
        try:
            content = self._render_list(context, item, item.children_attributes, options)
        finally:
            if options.clear_matcher:
                self.matcher.clear()

        log_event(
            self.logger,
            logging.DEBUG,
            "menu.render.finish",
            renderer="list",
            item=item.name,
            depth=options.depth,
            matching_depth=options.matching_depth,
            length=len(content),
        )
        return content

    def _render_list(
        self,
        context: Mapping[str, Any],
        item: Item,
        attributes: Mapping[str, Any],
        options: RenderOptions,
    ) -> str:
        if options.is_stop() or not item.has_children or not item.display_children:
            return ""

        level = item.level
        return "".join(
            [
                self._format(f"<ul{html_attributes(attributes)}>", "ul", level, options),
                self._render_children(context, item, options),
                self._format("</ul>", "ul", level, options),
            ]
        )

    def _render_children(
        self, context: Mapping[str, Any], item: Item, options: RenderOptions
    ) -> str:
        child_options = options.copy().sub_depth().sub_matching_depth()
        return "".join(
            self._render_item(context, child, child_options.copy()) for child in item.children
        )

    def _render_item(self, context: Mapping[str, Any], item: Item, options: RenderOptions) -> str:
        if not item.display:
            return ""

        classes: List[Any] = [item.attribute("class", "")]
        if self.matcher.is_current(context, item):
            classes.append(options.current_class)
        elif self.matcher.is_ancestor(context, item, options.matching_depth):
            classes.append(options.ancestor_class)

        if item.acts_like_first():
            classes.append(options.first_class)
        if item.acts_like_last():
            classes.append(options.last_class)

        if not options.is_stop() and item.has_children and item.display_children:
            classes.append(options.branch_class)
        else:
            classes.append(options.leaf_class)

        attributes: Dict[str, Any] = dict(item.attributes)
        attributes["class"] = html_classes(classes)

        children_attributes: Dict[str, Any] = dict(item.children_attributes)
        children_attributes["class"] = html_classes(
            [item.children_attribute("class", ""), f"menu-level-{item.level}"]
        )

        level = item.level
        return "".join(
            [
                self._format(f"<li{html_attributes(attributes)}>", "li", level, options),
                self._render_link(context, item, options),
                self._render_list(context, item, children_attributes, options),
                self._format("</li>", "li", level, options),
            ]
        )

    def _render_link(self, context: Mapping[str, Any], item: Item, options: RenderOptions) -> str:
        if item.uri and (options.current_as_link or not self.matcher.is_current(context, item)):
            text = self._render_link_element(item, options)
        else:
            text = self._render_span_element(item, options)
        return self._format(text, "link", item.level, options)

    def _render_link_element(self, item: Item, options: RenderOptions) -> str:
        return '<a href="{}"{}>{}</a>'.format(
            html.escape(item.uri, quote=True),
            html_attributes(item.link_attributes),
            self._render_label(item, options),
        )

    def _render_span_element(self, item: Item, options: RenderOptions) -> str:
        return "<span{}>{}</span>".format(
            html_attributes(item.label_attributes),
            self._render_label(item, options),
        )

    def _render_label(self, item: Item, options: RenderOptions) -> str:
        if options.allow_safe_labels and item.extra("safe_label", False):
            return item.label
        return html.escape(item.label, quote=True)

    def _format(self, content: str, kind: str, level: int, options: RenderOptions) -> str:
        if options.compressed:
            return content

        if kind == "li":
            spacing = level * 4 - 2
        else:
            spacing = level * 4
        return " " * max(spacing, 0) + content + "\n"


__all__ = ["ListRenderer"]
