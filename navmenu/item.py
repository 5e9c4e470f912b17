"""The menu item tree: node data, parent/child ownership and ordering."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .errors import ItemBelongsToAnotherMenuError
from .tracing import log_event

_LOGGER = logging.getLogger("navmenu.item")

ItemOption = Callable[["Item"], None]


@dataclass(eq=False)
class Item:
    """A node in a menu tree.

    Items compare and hash by identity. A parent owns its children; the
    parent reference kept on each child is weak and only used to walk
    upwards (level, root, siblings). Keep the root alive while using a
    subtree: once the root is garbage collected its children report no
    parent and a level of 0.

    Children are only attached through :meth:`add_child` (or the
    ``with_child``/``with_children`` options), never passed to the
    constructor.
    """

    name: str
    uri: str = ""
    label: str = ""
    position: int = 0
    display: bool = True
    display_children: bool = True
    current: Optional[bool] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    link_attributes: Dict[str, Any] = field(default_factory=dict)
    children_attributes: Dict[str, Any] = field(default_factory=dict)
    label_attributes: Dict[str, Any] = field(default_factory=dict)
    extras: Dict[str, Any] = field(default_factory=dict)
    children: List["Item"] = field(default_factory=list, init=False)
    _parent: Optional["weakref.ReferenceType[Item]"] = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return self.name or "n/a"

    # ------------------------------------------------------------------
    # Forced current flag
    # ------------------------------------------------------------------
    def set_current(self) -> None:
        self.current = True

    def set_not_current(self) -> None:
        self.current = False

    def is_marked_current(self) -> bool:
        """Return ``True`` only when the item is explicitly forced current."""

        return self.current is True

    # ------------------------------------------------------------------
    # Attribute bags
    # ------------------------------------------------------------------
    def attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def link_attribute(self, name: str, default: Any = None) -> Any:
        return self.link_attributes.get(name, default)

    def children_attribute(self, name: str, default: Any = None) -> Any:
        return self.children_attributes.get(name, default)

    def label_attribute(self, name: str, default: Any = None) -> Any:
        return self.label_attributes.get(name, default)

    def extra(self, name: str, default: Any = None) -> Any:
        return self.extras.get(name, default)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    @property
    def parent(self) -> Optional["Item"]:
        """Return the parent item, or ``None`` for a root (or orphaned) item."""

        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def root(self) -> "Item":
        item = self
        while item.parent is not None:
            item = item.parent
        return item

    @property
    def level(self) -> int:
        """Depth in the tree: a root is level 0, its children level 1."""

        parent = self.parent
        if parent is None:
            return 0
        return parent.level + 1

    def add_child(self, child: Any, *options: ItemOption) -> "Item":
        """Attach ``child`` and return it.

        ``child`` may be an :class:`Item`, which is attached as is, or any
        other value, in which case a new item named ``str(child)`` is built
        with ``options``. Attaching an item that already has a parent, or the
        root of this item's own tree (which would close a cycle), raises
        :class:`ItemBelongsToAnotherMenuError`.
        """

        if isinstance(child, Item):
            # A parentless ancestor of self can only be its root.
            if child.parent is not None or child is self.root:
                log_event(
                    _LOGGER,
                    logging.WARNING,
                    "menu.item.attach_rejected",
                    parent=self.name,
                    child=child.name,
                )
                raise ItemBelongsToAnotherMenuError(child.name)
            child_item = child
        else:
            child_item = new_item(str(child), *options)

        child_item._parent = weakref.ref(self)
        self.children.append(child_item)
        return child_item

    def child(self, name: str) -> Optional["Item"]:
        """Return the first child called ``name`` or ``None``."""

        for candidate in self.children:
            if candidate.name == name:
                return candidate
        return None

    def copy(self) -> "Item":
        """Return a deep copy of this item and its subtree as a new root."""

        duplicate = Item(
            name=self.name,
            uri=self.uri,
            label=self.label,
            position=self.position,
            display=self.display,
            display_children=self.display_children,
            current=self.current,
            attributes=dict(self.attributes),
            link_attributes=dict(self.link_attributes),
            children_attributes=dict(self.children_attributes),
            label_attributes=dict(self.label_attributes),
            extras=dict(self.extras),
        )
        for child in self.children:
            duplicate.add_child(child.copy())
        return duplicate

    def reorder_children(self) -> None:
        """Sort children by ascending ``position``; equal positions keep their order."""

        self.children.sort(key=lambda child: child.position)

    @property
    def has_children(self) -> bool:
        """``True`` when at least one child is displayed."""

        return any(child.display for child in self.children)

    @property
    def first_child(self) -> "Item":
        if not self.children:
            raise IndexError(f"menu item {self.name!r} has no children")
        return self.children[0]

    @property
    def last_child(self) -> "Item":
        if not self.children:
            raise IndexError(f"menu item {self.name!r} has no children")
        return self.children[-1]

    @property
    def is_first(self) -> bool:
        parent = self.parent
        return parent is not None and parent.first_child is self

    @property
    def is_last(self) -> bool:
        parent = self.parent
        return parent is not None and parent.last_child is self

    def acts_like_first(self) -> bool:
        """Whether this item is the first *displayed* child of its parent.

        Siblings are compared by name, so two displayed siblings sharing a
        name both act like first when the earlier one does.
        """

        parent = self.parent
        if parent is None or not self.display:
            return False
        if self.is_first:
            return True
        for sibling in parent.children:
            if sibling.display:
                return sibling.name == self.name
        return False

    def acts_like_last(self) -> bool:
        """Whether this item is the last *displayed* child of its parent."""

        parent = self.parent
        if parent is None or not self.display:
            return False
        if self.is_last:
            return True
        for sibling in reversed(parent.children):
            if sibling.display:
                return sibling.name == self.name
        return False


def new_item(name: str, *options: ItemOption) -> Item:
    """Build an item called ``name`` and apply ``options`` in order.

    The first option that raises aborts construction; the exception
    propagates and no item is returned.
    """

    item = Item(name=name)
    for option in options:
        option(item)
    return item


__all__ = ["Item", "ItemOption", "new_item"]
