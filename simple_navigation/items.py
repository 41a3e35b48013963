"""
The navigation tree: ``ItemContainer`` holds an ordered list of ``Item``s and
each ``Item`` may own a nested ``ItemContainer`` (its sub-navigation).

Menus are declared with ``ItemContainer.item()``::

    def build_primary(primary, request):
        primary.item("home", "Home", "/")

        def projects(sub):
            sub.item("active", "Active", "/projects/active/")
            sub.item("archived", "Archived", "/projects/archived/")

        primary.item("projects", "Projects", "/projects/", sub_menu=projects)
        primary.item("admin", "Admin", "/admin/", {"if": lambda: request.user.is_staff})

Selection is never stored on the tree. Every query takes a
``SelectionContext`` and walks the tree against it.
"""

import logging
import re
from collections import deque
from collections.abc import Mapping, MutableMapping

from .conditions import should_add_item
from .conf import get_config
from .exceptions import InvalidHighlightError
from .selection import SelectionContext, is_subpath, path_matches

logger = logging.getLogger(__name__)


def resolve_value(value):
    """Evaluate a deferred value: call zero-argument callables, force lazy strings."""
    if callable(value):
        value = value()
    if value is None:
        return None
    return str(value)


class Item:
    """A single navigation entry."""

    def __init__(self, container, key, name, url=None, options=None, sub_navigation=None):
        self.container = container
        self.key = key
        self.name = name
        self.url = url
        self.options = dict(options or {})
        self.sub_navigation = sub_navigation

    def __repr__(self):
        return f"<Item {self.key!r} level={self.level}>"

    @property
    def level(self):
        return self.container.level

    @property
    def highlights_on(self):
        return self.options.get("highlights_on")

    def resolved_name(self):
        """The display label, evaluated now."""
        return resolve_value(self.name)

    def resolved_url(self):
        return resolve_value(self.url)

    def has_sub_navigation(self):
        return self.sub_navigation is not None and not self.sub_navigation.is_empty()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def is_selected(self, selection: SelectionContext) -> bool:
        """
        Return True when this item is selected for *selection*.

        An explicit key for this item's level decides on its own. Otherwise
        the item is selected through its sub-navigation, its
        ``highlights_on`` option, or (when auto-highlighting is enabled) a
        URL equal to the current path.
        """
        explicit_key = selection.explicit_key_for(self.level)
        if explicit_key is not None:
            return explicit_key == self.key
        return self._selected_by_sub_navigation(selection) or self._selected_by_condition(selection)

    def _selected_by_sub_navigation(self, selection):
        return self.sub_navigation is not None and self.sub_navigation.has_selected_item(selection)

    def _selected_by_condition(self, selection):
        if self.highlights_on is not None:
            return self._selected_by_highlights_on(selection)
        if self._auto_highlight():
            return self._selected_by_url(selection)
        return False

    def _selected_by_highlights_on(self, selection):
        highlights_on = self.highlights_on
        if isinstance(highlights_on, re.Pattern):
            return highlights_on.search(selection.path) is not None
        if highlights_on == "subpath":
            return is_subpath(selection.full_path or selection.path, self._url_without_anchor())
        if isinstance(highlights_on, str):
            return path_matches(selection.path, highlights_on)
        if isinstance(highlights_on, (list, tuple)):
            return any(path_matches(selection.path, base) for base in highlights_on)
        if callable(highlights_on):
            return bool(highlights_on(selection))
        raise InvalidHighlightError(
            f"'highlights_on' of item {self.key!r} must be a regex, a callable, "
            f"'subpath', or one or more path patterns; got {highlights_on!r}."
        )

    def _auto_highlight(self):
        return self.container.config.auto_highlight and self.container.auto_highlight

    def _url_without_anchor(self):
        url = self.resolved_url()
        if not url:
            return url
        return url.split("#", 1)[0]

    def _selected_by_url(self, selection):
        url = self._url_without_anchor()
        if not url:
            return False
        if "?" in url:
            return url == selection.full_path
        return url == selection.path


class ItemContainer:
    """An ordered collection of ``Item``s at one level of the tree."""

    def __init__(self, level=1, config=None, auto_highlight=True):
        self.level = level
        self.config = config or get_config()
        self.renderer = self.config.renderer
        self.auto_highlight = auto_highlight
        self._items = []

    def __repr__(self):
        return f"<ItemContainer level={self.level} items={len(self._items)}>"

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    @property
    def items(self):
        return tuple(self._items)

    def child_container(self):
        return ItemContainer(level=self.level + 1, config=self.config, auto_highlight=self.auto_highlight)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def item(self, key, name, url=None, options=None, sub_menu=None):
        """
        Declare an item and append it when its conditions allow it.

        A mapping passed as *url* is taken as *options*. Mutable options
        lose their ``if`` / ``unless`` keys in place; read-only mappings are
        copied first. When *sub_menu* is given it is called once with a new
        child container, which becomes the item's sub-navigation. An ``"items"`` option populates the
        sub-navigation from raw item specifications instead.

        Excluded items build nothing: *sub_menu* is not called.
        """
        if isinstance(url, Mapping) and options is None:
            url, options = None, url
        if options is None:
            options = {}
        elif not isinstance(options, MutableMapping):
            options = dict(options)

        if not should_add_item(options):
            logger.debug("Skipping navigation item %r: excluded by its conditions", key)
            return

        raw_items = options.pop("items", None)
        sub_navigation = None
        if sub_menu is not None or raw_items:
            sub_navigation = self.child_container()
            if raw_items:
                sub_navigation.set_items(raw_items)
            if sub_menu is not None:
                sub_menu(sub_navigation)

        self._items.append(Item(self, key, name, url, options, sub_navigation))

    def set_items(self, raw_items):
        """Replace the contents with adapted *raw_items* (mappings or objects)."""
        from .adapters import ItemAdapter

        self._items = []
        for raw in raw_items:
            adapter = ItemAdapter(raw)
            if not adapter.should_add(self):
                logger.debug("Skipping navigation item %r: excluded by its conditions", adapter.key)
                continue
            self._items.append(adapter.to_item(self))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, key):
        """Return the first item with *key* at this level, or None."""
        for item in self._items:
            if item.key == key:
                return item
        return None

    def is_empty(self) -> bool:
        return not self._items

    def level_for(self, key):
        """
        Return the level of the shallowest item with *key* in this subtree.

        Searches breadth-first so a match at level L always wins over one
        deeper down, whichever branch it sits in.
        """
        queue = deque([self])
        while queue:
            container = queue.popleft()
            if container.lookup(key) is not None:
                return container.level
            for item in container:
                if item.sub_navigation is not None:
                    queue.append(item.sub_navigation)
        return None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def has_selected_item(self, selection: SelectionContext) -> bool:
        return any(item.is_selected(selection) for item in self._items)

    def selected_item(self, selection: SelectionContext):
        """The first selected item in declaration order, or None."""
        for item in self._items:
            if item.is_selected(selection):
                return item
        return None

    def has_selected_sub_navigation(self, selection: SelectionContext) -> bool:
        item = self.selected_item(selection)
        return item is not None and item.has_sub_navigation()

    def active_item_container_for(self, level, selection: SelectionContext):
        """
        Return the container on the active path at *level*, or None.

        Only the selected branch is followed.
        """
        if level == self.level:
            return self
        if not self.has_selected_sub_navigation(selection):
            return None
        return self.selected_item(selection).sub_navigation.active_item_container_for(level, selection)

    def active_leaf_container(self, selection: SelectionContext):
        """Return the deepest container on the active path."""
        if self.has_selected_sub_navigation(selection):
            return self.selected_item(selection).sub_navigation.active_leaf_container(selection)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, options=None):
        """
        Render this container with a renderer built from *options*.

        ``options["renderer"]`` may be a renderer class or a registered name;
        without it the container's own renderer is used. *options* is passed
        to the renderer unchanged.
        """
        if options is None:
            options = {}
        renderer = options.get("renderer")
        renderer_class = self.config.resolve_renderer(renderer) if renderer else self.renderer
        return renderer_class(options).render(self)
