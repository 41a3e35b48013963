"""
Context processors for simple_navigation.

Exposes the request's selection context to templates so navigation tags and
custom markup agree on which items are selected.
"""

from .helpers import get_selection


def navigation(request):
    """
    Add ``navigation_selection`` to the template context.

    The value is the ``SelectionContext`` for *request*, including any keys a
    view selected explicitly.
    """
    return {
        "navigation_selection": get_selection(request),
    }
