"""HTML attribute and class formatting used by the renderers."""

from __future__ import annotations

import html
from typing import Any, Dict, Iterable, Mapping

from markupsafe import Markup


def html_attribute(name: str, value: Any) -> str:
    """Format a single ``name="value"`` pair.

    ``True`` renders the bare attribute name, ``False``/``None`` and an empty
    ``class`` render nothing.
    """

    if value is None or value is False:
        return ""
    if value is True:
        return name
    if name == "class" and value == "":
        return ""
    return f'{name}="{html.escape(str(value), quote=True)}"'


def html_attributes(attributes: Mapping[str, Any]) -> str:
    """Join formatted attributes, each prefixed with a space."""

    parts = [html_attribute(name, value) for name, value in attributes.items()]
    return "".join(f" {part}" for part in parts if part)


def html_classes(classes: Iterable[Any]) -> str:
    """Join the non-empty class names with single spaces."""

    return " ".join(str(name).strip() for name in classes if name and str(name).strip())


def markup_attributes(*mappings: Mapping[str, Any]) -> Markup:
    """Merge ``mappings`` left to right and format them as safe markup.

    Templates use it to override the ``class`` of an attribute bag:
    ``attributes(item.attributes, {"class": css})``.
    """

    merged: Dict[str, Any] = {}
    for mapping in mappings:
        merged.update(mapping)
    return Markup(html_attributes(merged))


__all__ = ["html_attribute", "html_attributes", "html_classes", "markup_attributes"]
