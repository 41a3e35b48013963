"""
Adapters for item specifications supplied as data rather than declared with
``ItemContainer.item()``.

Two representations are accepted:

* a mapping with ``key``, ``name`` and optionally ``url``, ``options`` and
  ``items`` keys;
* any object exposing the same names as attributes, such as ``NavItem``.

Nested ``items`` become the item's sub-navigation.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from .conditions import should_add_item
from .items import Item


@dataclass(frozen=True)
class NavItem:
    """A navigation entry declared as data, optionally with nested items."""
    key: Any
    name: Any
    url: Any = None
    options: dict = field(default_factory=dict)
    items: tuple = field(default_factory=tuple)


class ItemSpec(NamedTuple):
    key: Any
    name: Any
    url: Any
    options: dict
    items: tuple


def _spec_from_mapping(raw):
    return ItemSpec(
        key=raw["key"],
        name=raw["name"],
        url=raw.get("url"),
        options=dict(raw.get("options") or {}),
        items=tuple(raw.get("items") or ()),
    )


def _spec_from_object(raw):
    return ItemSpec(
        key=raw.key,
        name=raw.name,
        url=getattr(raw, "url", None),
        options=dict(getattr(raw, "options", None) or {}),
        items=tuple(getattr(raw, "items", None) or ()),
    )


class ItemAdapter:
    """Normalizes one raw item specification for an ``ItemContainer``."""

    def __init__(self, raw):
        self.raw = raw
        if isinstance(raw, Mapping):
            self.spec = _spec_from_mapping(raw)
        else:
            self.spec = _spec_from_object(raw)

    @property
    def key(self):
        return self.spec.key

    @property
    def options(self):
        return self.spec.options

    def should_add(self, container) -> bool:
        """Evaluate (and strip) the ``if`` / ``unless`` options of this entry."""
        return should_add_item(self.spec.options)

    def to_item(self, container) -> Item:
        """Build an ``Item`` owned by *container*, with any nested items as its sub-navigation."""
        sub_navigation = None
        if self.spec.items:
            sub_navigation = container.child_container()
            sub_navigation.set_items(self.spec.items)
        return Item(container, self.spec.key, self.spec.name, self.spec.url, self.spec.options, sub_navigation)
