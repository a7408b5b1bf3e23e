"""View engine result — a found view or the list of places searched."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from perch.errors import ViewNotFoundError
from perch.views.view import View


@dataclass(frozen=True, slots=True)
class ViewEngineResult:
    """The outcome of a view lookup.

    Found results carry the view and the name or path that succeeded.
    Not-found results carry every location searched, in order. The
    result is falsy when not found::

        result = engine.find_view(ctx, "Index")
        if not result:
            log_missing(result.searched_locations)
    """

    view_name: str
    view: View | None = None
    searched_locations: tuple[str, ...] = ()

    @classmethod
    def found(cls, view_name: str, view: View) -> ViewEngineResult:
        return cls(view_name=view_name, view=view)

    @classmethod
    def not_found(cls, view_name: str, searched_locations: Iterable[str]) -> ViewEngineResult:
        return cls(view_name=view_name, searched_locations=tuple(searched_locations))

    @property
    def success(self) -> bool:
        """True if a view was found."""
        return self.view is not None

    def __bool__(self) -> bool:
        return self.success

    def ensure_success(self) -> View:
        """Return the found view or raise ``ViewNotFoundError``."""
        if self.view is None:
            raise ViewNotFoundError(self.view_name, self.searched_locations)
        return self.view
