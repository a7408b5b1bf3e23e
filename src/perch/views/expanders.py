"""View location expanders.

An expander customizes where views are searched for. It has two hooks,
called in registration order by the engine:

1. ``populate_values(context)`` — contribute string values to
   ``context.values``. These values are part of the location cache key,
   so two requests that would search different locations must
   contribute different values.
2. ``expand_view_locations(context, view_locations)`` — return a new
   list of location formats (add, remove, or reorder). The output of one
   expander is the input of the next. Only called on a cache miss.

No base class required. The engine checks the shape, not the lineage.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from perch.context import ActionContext


@dataclass(slots=True)
class ViewLocationExpanderContext:
    """Per-lookup state shared by the expander chain.

    Created fresh for every ``find_view`` / ``find_partial_view`` call and
    discarded afterwards.

    Attributes:
        action_context: The request being served.
        view_name: The logical view name being looked up.
        is_partial: Whether a partial view was requested.
        values: Expander-contributed values. ``None`` when no expanders
            are registered; an empty dict before the first expander runs
            otherwise.
    """

    action_context: ActionContext
    view_name: str
    is_partial: bool = False
    values: dict[str, str] | None = None

    @property
    def controller_name(self) -> str:
        return self.action_context.controller_name

    @property
    def area_name(self) -> str:
        return self.action_context.area_name


class ViewLocationExpander(Protocol):
    """Protocol for view location expanders.

    Example — search a per-theme folder first::

        class ThemeExpander:
            def populate_values(self, context):
                context.values["theme"] = context.action_context.route_value("theme")

            def expand_view_locations(self, context, view_locations):
                theme = context.values["theme"]
                if not theme:
                    return view_locations
                themed = [f"/Themes/{theme}{fmt}" for fmt in view_locations]
                return [*themed, *view_locations]
    """

    def populate_values(self, context: ViewLocationExpanderContext) -> None: ...

    def expand_view_locations(
        self,
        context: ViewLocationExpanderContext,
        view_locations: Sequence[str],
    ) -> Sequence[str]: ...


class LanguageViewLocationExpander:
    """Search language-specific views before the neutral ones.

    Reads the language from a route value (``"language"`` by default).
    With ``language=fr``, ``/Views/{1}/{0}.cshtml`` expands to
    ``/Views/{1}/{0}.fr.cshtml`` followed by the original format.
    """

    __slots__ = ("_fallback", "_route_key")

    VALUE_KEY = "language"

    def __init__(self, route_key: str = "language", *, fallback: bool = True) -> None:
        self._route_key = route_key
        self._fallback = fallback

    def populate_values(self, context: ViewLocationExpanderContext) -> None:
        assert context.values is not None
        context.values[self.VALUE_KEY] = context.action_context.route_value(self._route_key)

    def expand_view_locations(
        self,
        context: ViewLocationExpanderContext,
        view_locations: Sequence[str],
    ) -> Sequence[str]:
        language = (context.values or {}).get(self.VALUE_KEY, "")
        if not language:
            return view_locations

        expanded: list[str] = []
        for fmt in view_locations:
            head, sep, tail = fmt.rpartition("{0}")
            if sep:
                escaped = language.replace("{", "{{").replace("}", "}}")
                expanded.append(f"{head}{{0}}.{escaped}{tail}")
            if self._fallback or not sep:
                expanded.append(fmt)
        return expanded
