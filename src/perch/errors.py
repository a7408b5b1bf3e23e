"""Perch exception hierarchy.

Shared across the engine, cache, loaders, and CLI so every module
raises and catches the same types.
"""

from collections.abc import Sequence


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when engine configuration is invalid.

    Typically raised by ``ViewEngineConfig`` at construction time.
    """


class ViewNameError(PerchError, ValueError):
    """Raised when a view name is ``None`` or empty.

    This is a caller mistake, reported before any lookup happens. It is
    never represented as a not-found result.
    """

    def __init__(self, argument: str = "view_name") -> None:
        self.argument = argument
        super().__init__(f"Value of {argument!r} cannot be null or empty.")


class ViewNotFoundError(PerchError):
    """Raised by ``ViewEngineResult.ensure_success()`` for a missed lookup.

    The message lists every location that was searched, in order.
    """

    def __init__(self, view_name: str, searched_locations: Sequence[str]) -> None:
        self.view_name = view_name
        self.searched_locations = tuple(searched_locations)
        lines = [f"The view {view_name!r} was not found. The following locations were searched:"]
        lines.extend(self.searched_locations)
        super().__init__("\n".join(lines))


class ResolutionAborted(PerchError):  # noqa: N818 — mirrors the host's request abort
    """The request owning a resolution was aborted mid-search.

    No cache write happens once this is raised.
    """
