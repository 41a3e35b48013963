"""Errors raised while building, querying or rendering a navigation tree."""

from django.core.exceptions import ImproperlyConfigured


class InvalidConditionError(ImproperlyConfigured):
    """An ``if`` / ``unless`` option is not callable."""


class InvalidHighlightError(ImproperlyConfigured):
    """A ``highlights_on`` option has an unsupported type."""


class UnknownRendererError(ImproperlyConfigured):
    """A renderer name is not registered or the value cannot build a renderer."""


class UnknownNavigationError(ImproperlyConfigured):
    """No builder is configured under the requested navigation name."""


class InvalidLevelError(ValueError):
    """A navigation level is not an int, a range, ``"all"`` or ``"leaves"``."""
