"""View location and lookup.

Turns a view name plus the current request's route values into a
compiled template, searching location formats that expanders can
customize and caching where each view was found.

Usage::

    engine = ViewEngine.from_config(ViewEngineConfig(template_dir="site"))
    result = engine.find_view(ActionContext({"controller": "Home"}), "Index")

Conventions (placeholders: ``{0}`` view, ``{1}`` controller, ``{2}`` area):

    /Views/{1}/{0}.cshtml
    /Views/Shared/{0}.cshtml
    /Areas/{2}/Views/{1}/{0}.cshtml
    /Areas/{2}/Views/Shared/{0}.cshtml
"""

from perch.views.cache import DefaultViewLocationCache, ViewLocationCache, ViewLocationCacheKey
from perch.views.engine import ViewEngine
from perch.views.expanders import (
    LanguageViewLocationExpander,
    ViewLocationExpander,
    ViewLocationExpanderContext,
)
from perch.views.formats import AREA_VIEW_LOCATION_FORMATS, VIEW_LOCATION_FORMATS
from perch.views.pages import KidaPageLoader, Page, PageLoader
from perch.views.result import ViewEngineResult
from perch.views.view import KidaViewFactory, View, ViewFactory

__all__ = [
    "AREA_VIEW_LOCATION_FORMATS",
    "VIEW_LOCATION_FORMATS",
    "DefaultViewLocationCache",
    "KidaPageLoader",
    "KidaViewFactory",
    "LanguageViewLocationExpander",
    "Page",
    "PageLoader",
    "View",
    "ViewEngine",
    "ViewEngineResult",
    "ViewFactory",
    "ViewLocationCache",
    "ViewLocationCacheKey",
    "ViewLocationExpander",
    "ViewLocationExpanderContext",
]
