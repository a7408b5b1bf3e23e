"""View engine — turns a view name into a renderable view.

Lookup order for a logical name such as ``"Index"``:

1. Pick the location formats: area formats when the request has an
   ``area`` route value, the plain ones otherwise.
2. Let every expander contribute values (registration order).
3. Ask the location cache. A cached path is re-checked with the page
   loader; if the page is still there, return it.
4. On a miss (or a stale entry), let every expander rewrite the format
   list, then try each formatted location in order. The first page
   found wins and its path is cached.
5. Nothing found: return a not-found result listing every location
   tried.

Names starting with ``~`` or ``/`` are paths and skip the search.

Thread safety:
    The engine holds no per-request state. The location cache is the
    only shared mutable component and locks internally, so one engine
    can serve concurrent requests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import anyio
import anyio.to_thread

from perch.config import ViewEngineConfig
from perch.errors import ResolutionAborted, ViewNameError
from perch.views.cache import DefaultViewLocationCache, ViewLocationCache
from perch.views.expanders import ViewLocationExpander, ViewLocationExpanderContext
from perch.views.formats import (
    area_view_location_formats,
    format_location,
    is_specific_path,
    view_location_formats,
)
from perch.views.pages import KidaPageLoader, Page, PageLoader
from perch.views.result import ViewEngineResult
from perch.views.view import KidaViewFactory, ViewFactory

if TYPE_CHECKING:
    from kida import Environment

    from perch.context import ActionContext

logger = logging.getLogger("perch.views")


class ViewEngine:
    """Locate views by name for the current request.

    Usage::

        engine = ViewEngine.from_config(ViewEngineConfig(template_dir="site"))
        result = engine.find_view(ActionContext({"controller": "Home"}), "Index")
        html = result.ensure_success().render(title="Home")

    Subclasses can override ``view_location_formats`` and
    ``area_view_location_formats`` to change where views live.
    """

    def __init__(
        self,
        page_loader: PageLoader,
        view_factory: ViewFactory,
        *,
        expanders: Sequence[ViewLocationExpander] = (),
        cache: ViewLocationCache | None = None,
        config: ViewEngineConfig | None = None,
    ) -> None:
        self.config: ViewEngineConfig = config or ViewEngineConfig()
        self._page_loader = page_loader
        self._view_factory = view_factory
        self._expanders: tuple[ViewLocationExpander, ...] = tuple(expanders)
        self._cache: ViewLocationCache = (
            cache
            if cache is not None
            else DefaultViewLocationCache(self.config.location_cache_max_entries)
        )

        extension = self.config.view_extension
        formats = self.config.view_location_formats
        self._view_location_formats = (
            view_location_formats(extension) if formats is None else formats
        )
        area_formats = self.config.area_view_location_formats
        self._area_view_location_formats = (
            area_view_location_formats(extension) if area_formats is None else area_formats
        )

    @classmethod
    def from_config(
        cls,
        config: ViewEngineConfig | None = None,
        *,
        expanders: Sequence[ViewLocationExpander] = (),
        cache: ViewLocationCache | None = None,
        env: Environment | None = None,
    ) -> ViewEngine:
        """Build an engine backed by kida templates under ``config.template_dir``.

        Pass *env* to reuse an existing kida environment instead of
        creating one from *config*.
        """
        from perch.templating.integration import create_environment

        config = config or ViewEngineConfig()
        return cls(
            KidaPageLoader(env if env is not None else create_environment(config)),
            KidaViewFactory(),
            expanders=expanders,
            cache=cache,
            config=config,
        )

    # -- Configuration --

    @property
    def view_location_formats(self) -> Sequence[str]:
        """Formats searched when the request has no area."""
        return self._view_location_formats

    @property
    def area_view_location_formats(self) -> Sequence[str]:
        """Formats searched when the request has an area."""
        return self._area_view_location_formats

    @property
    def expanders(self) -> tuple[ViewLocationExpander, ...]:
        return self._expanders

    @property
    def cache(self) -> ViewLocationCache:
        return self._cache

    # -- Public API --

    def find_view(self, context: ActionContext, view_name: str) -> ViewEngineResult:
        """Find a full view by name or path."""
        if not view_name:
            raise ViewNameError("view_name")
        return self._create_result(context, view_name, is_partial=False)

    def find_partial_view(self, context: ActionContext, partial_view_name: str) -> ViewEngineResult:
        """Find a partial view by name or path."""
        if not partial_view_name:
            raise ViewNameError("partial_view_name")
        return self._create_result(context, partial_view_name, is_partial=True)

    async def find_view_async(self, context: ActionContext, view_name: str) -> ViewEngineResult:
        """``find_view`` on a worker thread; page loading may block on I/O."""
        if not view_name:
            raise ViewNameError("view_name")
        return await self._run_in_thread(self.find_view, context, view_name)

    async def find_partial_view_async(
        self,
        context: ActionContext,
        partial_view_name: str,
    ) -> ViewEngineResult:
        """``find_partial_view`` on a worker thread."""
        if not partial_view_name:
            raise ViewNameError("partial_view_name")
        return await self._run_in_thread(self.find_partial_view, context, partial_view_name)

    # -- Internals --

    async def _run_in_thread(
        self,
        func: Callable[[ActionContext, str], ViewEngineResult],
        context: ActionContext,
        name: str,
    ) -> ViewEngineResult:
        try:
            return await anyio.to_thread.run_sync(func, context, name, abandon_on_cancel=True)
        except anyio.get_cancelled_exc_class():
            # The abandoned worker sees the flag and skips its cache write
            context.abort()
            raise

    def _create_result(
        self,
        context: ActionContext,
        view_name: str,
        is_partial: bool,
    ) -> ViewEngineResult:
        if not is_specific_path(view_name):
            return self._locate_from_view_locations(context, view_name, is_partial)

        if view_name.lower().endswith(self.config.view_extension.lower()):
            self._check_aborted(context, view_name)
            page = self._page_loader.create_instance(view_name)
            if page is not None:
                return self._found(page, view_name, is_partial)
        logger.debug("View path %s not found", view_name)
        return ViewEngineResult.not_found(view_name, (view_name,))

    def _locate_from_view_locations(
        self,
        context: ActionContext,
        view_name: str,
        is_partial: bool,
    ) -> ViewEngineResult:
        area_name = context.area_name
        view_locations: Sequence[str] = (
            self.area_view_location_formats if area_name else self.view_location_formats
        )

        expander_context = ViewLocationExpanderContext(context, view_name, is_partial)
        if self._expanders:
            expander_context.values = {}
            for expander in self._expanders:
                expander.populate_values(expander_context)

        cached = self._cache.get(expander_context)
        if cached:
            self._check_aborted(context, view_name)
            page = self._page_loader.create_instance(cached)
            if page is not None:
                logger.debug("View %r served from cached location %s", view_name, cached)
                return self._found(page, cached, is_partial)
            logger.debug("Cached location %s for view %r is stale", cached, view_name)

        for expander in self._expanders:
            view_locations = expander.expand_view_locations(expander_context, view_locations)

        controller_name = context.controller_name
        searched_locations: list[str] = []
        for fmt in view_locations:
            path = format_location(fmt, view_name, controller_name, area_name)
            self._check_aborted(context, view_name)
            page = self._page_loader.create_instance(path)
            if page is not None:
                self._check_aborted(context, view_name)
                self._cache.set(expander_context, path)
                logger.debug("View %r found at %s", view_name, path)
                return self._found(page, path, is_partial)
            searched_locations.append(path)

        logger.debug(
            "View %r not found; searched %d locations", view_name, len(searched_locations)
        )
        return ViewEngineResult.not_found(view_name, searched_locations)

    def _found(self, page: Page, view_name: str, is_partial: bool) -> ViewEngineResult:
        view = self._view_factory.get_view(page, is_partial)
        return ViewEngineResult.found(view_name, view)

    @staticmethod
    def _check_aborted(context: ActionContext, view_name: str) -> None:
        """Raise ``ResolutionAborted`` if the request was aborted.

        Called before every page-loader call and right before the cache
        write. The flag is not held across the write itself: an abort that
        lands between this check and ``cache.set`` lets that one write
        through, and the lookup returns its found result.
        """
        if context.is_aborted:
            msg = f"Lookup of view {view_name!r} aborted by the request"
            raise ResolutionAborted(msg)
