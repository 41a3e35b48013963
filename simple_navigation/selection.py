"""
Per-request selection state consulted by every selection query.

A ``SelectionContext`` carries the current request path and, optionally, keys
that a view selected explicitly (one per level). Items and containers never
read the request themselves; the context is passed to each query instead.
"""

import re
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class SelectionContext:
    """The current request's navigation identity."""
    path: str = ""
    full_path: str = ""
    explicit: tuple = field(default_factory=tuple)

    @classmethod
    def from_request(cls, request):
        path = getattr(request, "path", "") or ""
        get_full_path = getattr(request, "get_full_path", None)
        full_path = get_full_path() if get_full_path else path
        return cls(path=path, full_path=full_path)

    def explicit_key_for(self, level):
        """Return the explicitly selected key for *level* (1-based), or None."""
        if level < 1 or level > len(self.explicit):
            return None
        return self.explicit[level - 1]

    def select(self, *keys):
        """Return a copy with *keys* explicitly selected, first key at level 1."""
        return replace(self, explicit=tuple(keys))


def _pattern_matches(path, pattern):
    if pattern.endswith("/"):
        return path.startswith(pattern)
    return path == pattern or path.startswith(pattern + "/")


def path_matches(path, highlight) -> bool:
    """
    Whether a string ``highlights_on`` value highlights an item at *path*.

    ``"r/<regex>"`` highlights wherever the regex is found in the path; a
    broken regex never highlights. Anything else is a comma list of
    patterns: ``"/projects/"`` covers every page below it, while
    ``"/projects"`` covers only that page and its children, so
    ``"/projects-old/"`` stays dark.
    """
    path = path or ""
    highlight = str(highlight)

    if highlight.startswith("r/"):
        try:
            return re.search(highlight[2:], path) is not None
        except re.error:
            return False

    patterns = [p.strip() for p in highlight.split(",")]
    return any(_pattern_matches(path, pattern) for pattern in patterns if pattern)


def is_subpath(path, url) -> bool:
    """True when *path* is *url* itself or lies below it (``/a`` -> ``/a/b``, ``/a?x``)."""
    if not url:
        return False
    url = url.rstrip("/") or "/"
    if url == "/":
        return (path or "").startswith("/")
    pattern = rf"^{re.escape(url)}(/|$|\?)"
    return re.match(pattern, path or "", re.IGNORECASE) is not None
