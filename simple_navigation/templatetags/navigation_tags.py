from django import template

from simple_navigation import helpers

register = template.Library()


def _request_navigation(context, navigation):
    request = context.get("request")
    if request is None:
        return None, None
    return helpers.get_navigation(request, navigation), helpers.get_selection(request)


@register.simple_tag(takes_context=True)
def render_navigation(context, level=1, renderer=None, expand_all=False, navigation="default", **options):
    """
    Render the configured navigation for the current request.

    Usage::

        {% render_navigation %}
        {% render_navigation level=2 %}
        {% render_navigation level="leaves" renderer="breadcrumbs" %}

    Returns "" when there is no request in the context or no container is
    active at *level*.
    """
    root, selection = _request_navigation(context, navigation)
    if root is None:
        return ""
    return helpers.render_navigation(
        root, selection, level=level, renderer=renderer, expand_all=expand_all, **options
    )


@register.simple_tag(takes_context=True)
def active_navigation_item_name(context, level="leaves", navigation="default"):
    root, selection = _request_navigation(context, navigation)
    if root is None:
        return ""
    return helpers.active_navigation_item_name(root, selection, level)


@register.simple_tag(takes_context=True)
def active_navigation_item_key(context, level="leaves", navigation="default"):
    """Return the key of the selected item at *level* ("" when nothing is selected)."""
    root, selection = _request_navigation(context, navigation)
    if root is None:
        return ""
    key = helpers.active_navigation_item_key(root, selection, level)
    return "" if key is None else key
