"""Renderable views.

A single request can render several views (the page, partials,
components), each with its own state, so the factory builds a fresh
``View`` on every call. Views are not cached across requests; the
compiled template they wrap is.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

from perch.views.pages import Page


@dataclass(slots=True)
class View:
    """A found page bound to per-render state.

    ``view_data`` is private to this instance and is merged underneath
    the context passed to ``render``.
    """

    page: Page
    is_partial: bool = False
    view_data: dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return self.page.path

    def _context(self, context: dict[str, Any] | None, kwargs: dict[str, Any]) -> dict[str, Any]:
        return {**self.view_data, **(context or {}), **kwargs}

    def render(self, context: dict[str, Any] | None = None, **kwargs: Any) -> str:
        """Render the whole template to a string."""
        return self.page.template.render(self._context(context, kwargs))

    def render_block(
        self,
        block_name: str,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> str:
        """Render a single named block to a string."""
        return self.page.template.render_block(block_name, self._context(context, kwargs))


class ViewFactory(Protocol):
    """Protocol for view factories."""

    def get_view(self, page: Page, is_partial: bool) -> View: ...


class KidaViewFactory:
    """Build a new ``View`` around a kida page for every call."""

    __slots__ = ()

    def get_view(self, page: Page, is_partial: bool) -> View:
        return View(page=page, is_partial=is_partial)
