"""
Navigation configuration: default renderer, renderer registry and builders.

Reads the ``SIMPLE_NAVIGATION`` Django setting::

    SIMPLE_NAVIGATION = {
        "RENDERER": "list",
        "RENDERERS": {"menu": "myapp.renderers.MenuRenderer"},
        "AUTO_HIGHLIGHT": True,
        "NAVIGATIONS": {"default": "myapp.navigation.build_primary"},
    }

``get_config()`` caches a ``NavigationConfig`` built from that setting. Code
that needs a different configuration constructs its own ``NavigationConfig``
and passes it to ``ItemContainer(config=...)``.
"""

import logging

from django.conf import settings as django_settings
from django.core.signals import setting_changed
from django.utils.module_loading import import_string

from .exceptions import UnknownNavigationError, UnknownRendererError

logger = logging.getLogger(__name__)

SETTING_NAME = "SIMPLE_NAVIGATION"

BUILTIN_RENDERERS = {
    "list": "simple_navigation.renderers.ListRenderer",
    "breadcrumbs": "simple_navigation.renderers.BreadcrumbsRenderer",
    "data": "simple_navigation.renderers.DataRenderer",
    "json": "simple_navigation.renderers.JsonRenderer",
}

DEFAULTS = {
    "RENDERER": "list",
    "RENDERERS": {},
    "AUTO_HIGHLIGHT": True,
    "NAVIGATIONS": {},
}


class NavigationConfig:
    """Explicit configuration injected into every ``ItemContainer``."""

    def __init__(self, renderer="list", renderers=None, auto_highlight=True, navigations=None):
        self.registered_renderers = dict(BUILTIN_RENDERERS)
        self.registered_renderers.update(renderers or {})
        self.auto_highlight = auto_highlight
        self.navigations = dict(navigations or {})
        self.renderer = self.resolve_renderer(renderer)

    @classmethod
    def from_settings(cls):
        user_settings = getattr(django_settings, SETTING_NAME, None) or {}
        values = {**DEFAULTS, **user_settings}
        return cls(
            renderer=values["RENDERER"],
            renderers=values["RENDERERS"],
            auto_highlight=values["AUTO_HIGHLIGHT"],
            navigations=values["NAVIGATIONS"],
        )

    # ------------------------------------------------------------------
    # Renderers
    # ------------------------------------------------------------------

    def register_renderer(self, name: str, renderer) -> None:
        """Register *renderer* (a class or dotted path) under *name*."""
        self.registered_renderers[name] = renderer

    def resolve_renderer(self, value):
        """
        Normalize *value* into something callable with an options mapping.

        Accepts a renderer class (or any callable), a registered name or a
        dotted import path. Registered dotted paths are imported on first use.
        """
        if isinstance(value, str):
            if value in self.registered_renderers:
                registered = self.registered_renderers[value]
                if isinstance(registered, str):
                    registered = self._import_renderer(registered, name=value)
                    self.registered_renderers[value] = registered
                logger.debug("Resolved renderer '%s' to %r", value, registered)
                return registered
            if "." in value:
                return self._import_renderer(value)
            raise UnknownRendererError(
                f"No renderer is registered under '{value}'. "
                f"Known renderers: {', '.join(sorted(self.registered_renderers))}."
            )
        if callable(value):
            return value
        raise UnknownRendererError(f"{value!r} is neither a renderer class nor a renderer name.")

    @staticmethod
    def _import_renderer(path, name=None):
        try:
            return import_string(path)
        except ImportError as exc:
            label = f"'{name}' ({path})" if name else f"'{path}'"
            raise UnknownRendererError(f"Could not import renderer {label}: {exc}") from exc

    # ------------------------------------------------------------------
    # Navigation builders
    # ------------------------------------------------------------------

    def navigation_builder(self, name: str):
        """Return the builder callable configured under *name*."""
        try:
            builder = self.navigations[name]
        except KeyError:
            raise UnknownNavigationError(
                f"No navigation named '{name}' is configured in {SETTING_NAME}['NAVIGATIONS']."
            ) from None
        if isinstance(builder, str):
            builder = import_string(builder)
            self.navigations[name] = builder
        return builder

    def build_navigation(self, name="default", request=None):
        """Create a root container and populate it with the *name* builder."""
        from .items import ItemContainer

        builder = self.navigation_builder(name)
        primary = ItemContainer(config=self)
        builder(primary, request)
        return primary


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------
_config_cache: NavigationConfig | None = None


def get_config() -> NavigationConfig:
    """Return the cached configuration built from Django settings."""
    global _config_cache
    if _config_cache is None:
        _config_cache = NavigationConfig.from_settings()
        logger.info("Loaded navigation config from settings.%s", SETTING_NAME)
    return _config_cache


def clear_config_cache() -> None:
    """Reset the cached config. Mainly useful in tests."""
    global _config_cache
    _config_cache = None


def register_renderer(name: str, renderer) -> None:
    """Register *renderer* under *name* on the process-wide configuration."""
    get_config().register_renderer(name, renderer)


def _reset_on_setting_change(setting, **kwargs):
    if setting == SETTING_NAME:
        clear_config_cache()


def connect_signals():
    """Called from ``SimpleNavigationConfig.ready()``."""
    setting_changed.connect(_reset_on_setting_change, dispatch_uid="simple_navigation_reset_config")
