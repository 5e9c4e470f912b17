"""Menu renderers.

``ListRenderer`` writes nested lists directly; ``TemplateRenderer`` hands the
tree to a :class:`Theme` such as :class:`JinjaTheme`.
"""

from .base import Renderer
from .html import html_attribute, html_attributes, html_classes, markup_attributes
from .list import ListRenderer
from .options import COMPRESSED_EXTRA, TEMPLATE_EXTRA, RenderOptions
from .template import MENU_TEMPLATE, JinjaTheme, TemplateRenderer, Theme

__all__ = [
    "COMPRESSED_EXTRA",
    "JinjaTheme",
    "ListRenderer",
    "MENU_TEMPLATE",
    "RenderOptions",
    "Renderer",
    "TEMPLATE_EXTRA",
    "TemplateRenderer",
    "Theme",
    "html_attribute",
    "html_attributes",
    "html_classes",
    "markup_attributes",
]
