"""Build item trees from external representations."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import UnsupportedDataError
from .item import Item, ItemOption, new_item
from .options import (
    with_label,
    with_label_attributes,
    with_link_attributes,
    with_position,
    with_uri,
)
from .tracing import log_event

_LOGGER = logging.getLogger("navmenu.loader")

_NODE_ATTRIBUTES = ("name", "options", "children")
_LEVEL_CLASS = re.compile(r"^menu-level-\d+$")


class Loader(ABC):
    """Turn some external data into a menu :class:`Item` tree."""

    @abstractmethod
    def load(self, data: Any) -> Item:
        raise NotImplementedError

    @abstractmethod
    def supports(self, data: Any) -> bool:
        raise NotImplementedError


class Node(ABC):
    """A node of an externally supplied menu graph."""

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def options(self) -> Sequence[ItemOption]:
        raise NotImplementedError

    @property
    @abstractmethod
    def children(self) -> Sequence[Any]:
        raise NotImplementedError


class SimpleNode(Node):
    def __init__(
        self,
        name: str,
        options: Optional[Iterable[ItemOption]] = None,
        children: Optional[Iterable[Any]] = None,
    ) -> None:
        self._name = name
        self._options = list(options or [])
        self._children = list(children or [])

    @property
    def name(self) -> str:
        return self._name

    @property
    def options(self) -> List[ItemOption]:
        return self._options

    @property
    def children(self) -> List[Any]:
        return self._children

    def __repr__(self) -> str:
        return f"SimpleNode(name={self._name!r}, children={len(self._children)})"


class NodeLoader(Loader):
    """Load a tree from :class:`Node` objects.

    Any object exposing ``name``, ``options`` and ``children`` is accepted.
    Errors raised by the node options propagate unchanged.
    """

    def supports(self, data: Any) -> bool:
        if isinstance(data, Node):
            return True
        return not isinstance(data, Item) and all(hasattr(data, attr) for attr in _NODE_ATTRIBUTES)

    def load(self, data: Any) -> Item:
        if not self.supports(data):
            log_event(_LOGGER, logging.WARNING, "menu.loader.unsupported", loader="node", data_type=type(data).__name__)
            raise UnsupportedDataError(f"unsupported data: expected Node, got {type(data).__name__}")

        item = new_item(data.name, *data.options)
        for child_node in data.children:
            item.add_child(self.load(child_node))
        return item


class HTMLLoader(Loader):
    """Rebuild a menu from existing ``<ul>``/``<li>`` navigation markup.

    Each ``<li>`` becomes an item named and labelled after its link text.
    An ``<a href>`` provides the URI; a ``<span>`` (or bare text) yields a
    label-only item. Nested lists become children and positions follow
    document order. When the markup contains several top-level lists their
    items are merged under the same root.
    """

    def __init__(self, root_name: str = "root", parser: str = "lxml") -> None:
        self._root_name = root_name
        self._parser = parser

    def supports(self, data: Any) -> bool:
        if isinstance(data, Tag):
            return data.name in ("ul", "ol") or data.find(["ul", "ol"]) is not None
        if isinstance(data, str):
            return re.search(r"<\s*(ul|ol)\b", data, re.IGNORECASE) is not None
        return False

    def load(self, data: Any) -> Item:
        if not self.supports(data):
            log_event(_LOGGER, logging.WARNING, "menu.loader.unsupported", loader="html", data_type=type(data).__name__)
            raise UnsupportedDataError(
                f"unsupported data: expected markup containing a list, got {type(data).__name__}"
            )

        container = BeautifulSoup(data, self._parser) if isinstance(data, str) else data
        if container.name in ("ul", "ol"):
            top_level_lists = [container]
        else:
            top_level_lists = [
                lst
                for lst in container.find_all(["ul", "ol"])
                if lst.find_parent(["ul", "ol"]) is None
            ]
        if not top_level_lists:
            raise UnsupportedDataError("unsupported data: markup does not contain a list")

        root = new_item(self._root_name)
        root.children_attributes = self._list_attributes(top_level_lists[0])
        for lst in top_level_lists:
            self._parse_list(root, lst)
        return root

    def _parse_list(self, parent: Item, list_node: Tag) -> None:
        for entry in list_node.find_all("li", recursive=False):
            anchor = entry.find("a", href=True)
            if anchor is not None and anchor.find_parent("li") is not entry:
                anchor = None

            options: List[ItemOption] = [with_position(len(parent.children))]
            if anchor is not None:
                label = anchor.get_text(" ", strip=True)
                options.append(with_uri(anchor["href"].strip()))
                options.append(with_link_attributes(self._attributes(anchor, exclude=("href",))))
            else:
                span = entry.find("span")
                if span is not None and span.find_parent("li") is entry:
                    label = span.get_text(" ", strip=True)
                    options.append(with_label_attributes(self._attributes(span)))
                else:
                    label = self._own_text(entry)
            if not label:
                continue
            options.append(with_label(label))

            item = parent.add_child(label, *options)
            item.attributes = self._attributes(entry, exclude=("class",))

            child_lists = [
                child
                for child in entry.find_all(["ul", "ol"])
                if child.find_parent("li") is entry
            ]
            for child_list in child_lists:
                if not item.children_attributes:
                    item.children_attributes = self._list_attributes(child_list)
                self._parse_list(item, child_list)

    def _list_attributes(self, list_node: Tag) -> dict:
        attributes = self._attributes(list_node)
        classes = [name for name in attributes.pop("class", "").split() if not _LEVEL_CLASS.match(name)]
        if classes:
            attributes["class"] = " ".join(classes)
        return attributes

    def _attributes(self, node: Tag, exclude: Sequence[str] = ()) -> dict:
        attributes = {}
        for name, value in node.attrs.items():
            if name in exclude:
                continue
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            attributes[name] = value
        return attributes

    def _own_text(self, entry: Tag) -> str:
        parts = [
            text.strip()
            for text in entry.find_all(string=True, recursive=False)
            if text.strip()
        ]
        return " ".join(parts)


__all__ = ["HTMLLoader", "Loader", "Node", "NodeLoader", "SimpleNode"]
