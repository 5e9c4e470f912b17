"""Hierarchical navigation menus: item trees, current-item matching and rendering."""

from .errors import ItemBelongsToAnotherMenuError, MenuError, UnsupportedDataError
from .item import Item, ItemOption, new_item
from .loader import HTMLLoader, Loader, Node, NodeLoader, SimpleNode
from .logging_config import configure_logging
from .matcher import CoreMatcher, Matcher
from .options import (
    with_attribute,
    with_attributes,
    with_child,
    with_children,
    with_children_attribute,
    with_children_attributes,
    with_current,
    with_display,
    with_display_children,
    with_extra,
    with_extras,
    with_label,
    with_label_attribute,
    with_label_attributes,
    with_link_attribute,
    with_link_attributes,
    with_position,
    with_safe_label,
    with_uri,
)
from .voters import URL_CONTEXT_KEY, URLVoter, Vote, Voter

__all__ = [
    "CoreMatcher",
    "HTMLLoader",
    "Item",
    "ItemBelongsToAnotherMenuError",
    "ItemOption",
    "Loader",
    "Matcher",
    "MenuError",
    "Node",
    "NodeLoader",
    "SimpleNode",
    "URLVoter",
    "URL_CONTEXT_KEY",
    "UnsupportedDataError",
    "Vote",
    "Voter",
    "configure_logging",
    "new_item",
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
