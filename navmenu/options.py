"""Item options: small callables that configure an :class:`~navmenu.item.Item`.

Options are applied in order by :func:`~navmenu.item.new_item` and
:meth:`~navmenu.item.Item.add_child`; an option that raises aborts the
construction.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from .item import Item, ItemOption


def with_uri(uri: str) -> ItemOption:
    def _apply(item: Item) -> None:
        item.uri = uri

    return _apply


def with_label(label: str) -> ItemOption:
    def _apply(item: Item) -> None:
        item.label = label

    return _apply


def with_position(position: int) -> ItemOption:
    """Set the sort key used by :meth:`Item.reorder_children`."""

    def _apply(item: Item) -> None:
        item.position = position

    return _apply


def with_display(display: bool) -> ItemOption:
    def _apply(item: Item) -> None:
        item.display = display

    return _apply


def with_display_children(display_children: bool) -> ItemOption:
    def _apply(item: Item) -> None:
        item.display_children = display_children

    return _apply


def with_current(current: Optional[bool]) -> ItemOption:
    """Force the item current (``True``), not current (``False``) or unset it (``None``)."""

    def _apply(item: Item) -> None:
        item.current = current

    return _apply


def with_attributes(attributes: Mapping[str, Any]) -> ItemOption:
    def _apply(item: Item) -> None:
        item.attributes = dict(attributes)

    return _apply


def with_attribute(name: str, value: Any) -> ItemOption:
    def _apply(item: Item) -> None:
        item.attributes[name] = value

    return _apply


def with_link_attributes(attributes: Mapping[str, Any]) -> ItemOption:
    def _apply(item: Item) -> None:
        item.link_attributes = dict(attributes)

    return _apply


def with_link_attribute(name: str, value: Any) -> ItemOption:
    def _apply(item: Item) -> None:
        item.link_attributes[name] = value

    return _apply


def with_children_attributes(attributes: Mapping[str, Any]) -> ItemOption:
    """Attributes for the ``<ul>`` wrapping this item's children."""

    def _apply(item: Item) -> None:
        item.children_attributes = dict(attributes)

    return _apply


def with_children_attribute(name: str, value: Any) -> ItemOption:
    def _apply(item: Item) -> None:
        item.children_attributes[name] = value

    return _apply


def with_label_attributes(attributes: Mapping[str, Any]) -> ItemOption:
    """Attributes for the ``<span>`` used when the item renders without a link."""

    def _apply(item: Item) -> None:
        item.label_attributes = dict(attributes)

    return _apply


def with_label_attribute(name: str, value: Any) -> ItemOption:
    def _apply(item: Item) -> None:
        item.label_attributes[name] = value

    return _apply


def with_extras(extras: Mapping[str, Any]) -> ItemOption:
    def _apply(item: Item) -> None:
        item.extras = dict(extras)

    return _apply


def with_extra(name: str, value: Any) -> ItemOption:
    def _apply(item: Item) -> None:
        item.extras[name] = value

    return _apply


def with_safe_label(safe_label: bool = True) -> ItemOption:
    """Mark the label as pre-sanitised markup.

    Renderers only honour the flag when ``allow_safe_labels`` is enabled.
    """

    return with_extra("safe_label", safe_label)


def with_children(children: Iterable[Any], *options: ItemOption) -> ItemOption:
    """Replace the children with ``children``, attached one by one.

    Non-item values are turned into new items with ``options``. The first
    attach failure stops the option.
    """

    def _apply(item: Item) -> None:
        for previous in item.children:
            previous._parent = None
        item.children = []
        for child in children:
            item.add_child(child, *options)

    return _apply


def with_child(child: Any, *options: ItemOption) -> ItemOption:
    def _apply(item: Item) -> None:
        item.add_child(child, *options)

    return _apply


__all__ = [
    "with_attribute",
    "with_attributes",
    "with_child",
    "with_children",
    "with_children_attribute",
    "with_children_attributes",
    "with_current",
    "with_display",
    "with_display_children",
    "with_extra",
    "with_extras",
    "with_label",
    "with_label_attribute",
    "with_label_attributes",
    "with_link_attribute",
    "with_link_attributes",
    "with_position",
    "with_safe_label",
    "with_uri",
]
