"""Ambient request context consumed by view resolution.

An ``ActionContext`` carries the route values of the current request
(``controller``, ``area``, and anything custom expanders read) plus an
abort flag tied to the host request's lifetime.

Thread safety:
    The context is frozen; the only mutable part is the ``aborted``
    event, which is safe to set from any thread.
"""

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

CONTROLLER_KEY = "controller"
AREA_KEY = "area"


@dataclass(frozen=True, slots=True)
class ActionContext:
    """Route values and request handle for one in-flight request.

    Usage::

        ctx = ActionContext({"controller": "Home", "area": "Admin"})
        ctx.route_value("controller")  # "Home"
        ctx.route_value("action")      # ""
    """

    route_values: Mapping[str, Any] = field(default_factory=dict)
    request: Any = None
    aborted: threading.Event = field(default_factory=threading.Event, compare=False)

    def route_value(self, key: str) -> str:
        """Return a route value as a string. Missing or ``None`` is ``""``."""
        value = self.route_values.get(key)
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @property
    def controller_name(self) -> str:
        return self.route_value(CONTROLLER_KEY)

    @property
    def area_name(self) -> str:
        return self.route_value(AREA_KEY)

    def abort(self) -> None:
        """Mark the owning request as aborted."""
        self.aborted.set()

    @property
    def is_aborted(self) -> bool:
        return self.aborted.is_set()
