"""Perch — view location and lookup for kida-templated web apps.

Resolves a view name such as ``"Index"`` to a compiled template by
searching controller, area, and shared locations, with pluggable
expanders and a thread-safe location cache.

Basic usage::

    from perch import ActionContext, ViewEngine, ViewEngineConfig

    engine = ViewEngine.from_config(ViewEngineConfig(template_dir="site"))
    result = engine.find_view(ActionContext({"controller": "Home"}), "Index")
    html = result.ensure_success().render(title="Home")
"""

__version__ = "0.1.0"
__all__ = [
    "ActionContext",
    "ConfigurationError",
    "PerchError",
    "ResolutionAborted",
    "ViewEngine",
    "ViewEngineConfig",
    "ViewEngineResult",
    "ViewNameError",
    "ViewNotFoundError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "ActionContext":
        from perch.context import ActionContext

        return ActionContext

    if name == "ViewEngineConfig":
        from perch.config import ViewEngineConfig

        return ViewEngineConfig

    if name == "ViewEngine":
        from perch.views.engine import ViewEngine

        return ViewEngine

    if name == "ViewEngineResult":
        from perch.views.result import ViewEngineResult

        return ViewEngineResult

    if name in (
        "ConfigurationError",
        "PerchError",
        "ResolutionAborted",
        "ViewNameError",
        "ViewNotFoundError",
    ):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
