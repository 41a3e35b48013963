"""
Renderers turn an ``ItemContainer`` into an output artifact.

A renderer is constructed with the options passed to
``ItemContainer.render()`` and exposes ``render(container)``. Options read by
the base class:

``selection``
    ``SelectionContext`` used to mark selected items (empty by default).
``expand_all``
    Descend into every sub-navigation, not only the selected one.
``level``
    ``"all"`` (the default) descends into selected sub-navigations at any
    depth. A ``range`` descends down to its highest level. An int (or
    ``"leaves"``) renders that single level only.

Any other key is kept in ``self.options`` for subclasses. Unknown keys,
including ``renderer`` itself, are ignored.
"""

import json

from django.core.serializers.json import DjangoJSONEncoder
from django.template.loader import render_to_string
from django.utils.safestring import mark_safe

from .exceptions import InvalidLevelError
from .selection import SelectionContext


class Renderer:
    """Base class for navigation renderers."""

    def __init__(self, options=None):
        self.options = dict(options or {})
        self.selection = self.options.get("selection") or SelectionContext()
        self.expand_all = bool(self.options.get("expand_all", False))

    @property
    def max_level(self):
        level = self.options.get("level")
        if isinstance(level, range):
            if not level:
                raise InvalidLevelError(f"Empty navigation level range: {level!r}")
            return max(level)
        return None

    def consider_sub_navigation(self, item) -> bool:
        """Whether the ``level`` option reaches *item*'s sub-navigation at all."""
        level = self.options.get("level", "all")
        if level is None or level == "all":
            return True
        if isinstance(level, range):
            return item.sub_navigation.level <= self.max_level
        return False

    def include_sub_navigation(self, item) -> bool:
        """Whether rendering should descend into *item*'s sub-navigation."""
        if not item.has_sub_navigation() or not self.consider_sub_navigation(item):
            return False
        return self.expand_all or item.is_selected(self.selection)

    def item_data(self, item) -> dict:
        """Plain-data view of *item*, with its rendered children under ``items``."""
        sub_items = ()
        if self.include_sub_navigation(item):
            sub_items = self.items_data(item.sub_navigation)
        options = {k: v for k, v in item.options.items() if k != "highlights_on"}
        return {
            "key": item.key,
            "name": item.resolved_name(),
            "url": item.resolved_url(),
            "level": item.level,
            "selected": item.is_selected(self.selection),
            "options": options,
            "items": sub_items,
        }

    def items_data(self, container) -> tuple:
        return tuple(self.item_data(item) for item in container)

    def render(self, container):
        raise NotImplementedError(f"{type(self).__name__} must implement render(container).")


class DataRenderer(Renderer):
    """Return the (sub)tree as a tuple of plain dictionaries."""

    def render(self, container):
        return self.items_data(container)


class JsonRenderer(DataRenderer):
    """Serialize the plain-data tree to JSON."""

    def render(self, container):
        return json.dumps(super().render(container), cls=DjangoJSONEncoder)


class TemplateRenderer(Renderer):
    """Render a Django template; subclasses set ``template_name``."""
    template_name = None

    def get_template_name(self):
        return self.options.get("template_name") or self.template_name

    def get_context_data(self, container) -> dict:
        return {
            "container": container,
            "level": container.level,
            "items": self.items_data(container),
        }

    def render(self, container):
        return mark_safe(render_to_string(self.get_template_name(), self.get_context_data(container)))


class ListRenderer(TemplateRenderer):
    """Nested ``<ul>`` list of the (sub)tree."""
    template_name = "simple_navigation/list.html"


class BreadcrumbsRenderer(TemplateRenderer):
    """The active path, from *container* down to the deepest selected item."""
    template_name = "simple_navigation/breadcrumbs.html"

    def active_path(self, container):
        path = []
        while container is not None:
            item = container.selected_item(self.selection)
            if item is None:
                break
            path.append(item)
            container = item.sub_navigation if item.has_sub_navigation() else None
        return path

    def get_context_data(self, container) -> dict:
        crumbs = [
            {"key": item.key, "name": item.resolved_name(), "url": item.resolved_url()}
            for item in self.active_path(container)
        ]
        return {
            "container": container,
            "level": container.level,
            "crumbs": crumbs,
            "separator": self.options.get("join_with", " &gt; "),
        }
