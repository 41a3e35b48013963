"""
Helpers used by views and template tags to query and render a navigation.

``level`` arguments accept:

* an int: the container on the active path at that level;
* ``"all"``: the root container;
* ``"leaves"``: the deepest container on the active path;
* a ``range``: the container at the range's lowest level.
"""

from .conf import get_config
from .exceptions import InvalidLevelError
from .selection import SelectionContext

REQUEST_CACHE_ATTR = "_simple_navigation_cache"


def active_item_container(root, selection: SelectionContext, level=1):
    """Return the container on the active path for *level*, or None."""
    if level == "all":
        return root
    if level == "leaves":
        return root.active_leaf_container(selection)
    if isinstance(level, range):
        if not level:
            raise InvalidLevelError(f"Empty navigation level range: {level!r}")
        return root.active_item_container_for(min(level), selection)
    if isinstance(level, int) and not isinstance(level, bool):
        return root.active_item_container_for(level, selection)
    raise InvalidLevelError(f"Invalid navigation level: {level!r}")


def render_navigation(root, selection: SelectionContext, level=1, renderer=None, expand_all=False, **options):
    """
    Render the container active at *level*; ``""`` when none is active.

    Extra keyword arguments are passed through to the renderer options.
    """
    container = active_item_container(root, selection, level)
    if container is None:
        return ""
    options.update(selection=selection, level=level, expand_all=expand_all)
    if renderer is not None:
        options["renderer"] = renderer
    return container.render(options)


def active_navigation_item(root, selection: SelectionContext, level="leaves", default=None):
    """Return the selected item in the container at *level*, or *default*."""
    if level is None:
        level = "leaves"
    elif level == "all":
        level = "leaves"
    container = active_item_container(root, selection, level)
    if container is None:
        return default
    item = container.selected_item(selection)
    return item if item is not None else default


def active_navigation_item_name(root, selection: SelectionContext, level="leaves"):
    item = active_navigation_item(root, selection, level)
    return item.resolved_name() if item is not None else ""


def active_navigation_item_key(root, selection: SelectionContext, level="leaves"):
    item = active_navigation_item(root, selection, level)
    return item.key if item is not None else None


# ---------------------------------------------------------------------------
# Request integration
# ---------------------------------------------------------------------------

def get_selection(request) -> SelectionContext:
    """The request's selection context (set by ``SelectionContextMiddleware``)."""
    selection = getattr(request, "navigation_selection", None)
    if selection is None:
        selection = SelectionContext.from_request(request)
        request.navigation_selection = selection
    return selection


def select_navigation(request, *keys):
    """Explicitly select *keys* (level 1 first) for the rest of this request."""
    request.navigation_selection = get_selection(request).select(*keys)
    return request.navigation_selection


def get_navigation(request, name="default", config=None):
    """Build the *name* navigation for *request*, once per request."""
    cache = getattr(request, REQUEST_CACHE_ATTR, None)
    if cache is None:
        cache = {}
        setattr(request, REQUEST_CACHE_ATTR, cache)
    if name not in cache:
        cache[name] = (config or get_config()).build_navigation(name, request)
    return cache[name]
