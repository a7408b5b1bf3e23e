"""Page loading through kida.

The page loader turns a resolved path into a compiled template, or
reports that nothing lives there. It knows nothing about search order;
the engine calls it speculatively for every candidate location.

"Missing" and "broken" are kept apart: a missing template yields
``None``, while syntax or other template errors propagate to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from kida.environment.exceptions import TemplateNotFoundError

from perch.views.formats import template_name_for

if TYPE_CHECKING:
    from kida import Environment, Template

logger = logging.getLogger("perch.views")


@dataclass(frozen=True, slots=True)
class Page:
    """A compiled template found at an application path.

    Attributes:
        path: The path as requested (e.g. ``/Views/Home/Index.cshtml``).
        template: The compiled kida template.
    """

    path: str
    template: Template


class PageLoader(Protocol):
    """Protocol for page loaders.

    ``create_instance`` must be safe to call repeatedly and must return
    ``None`` (never raise) when no page exists at *path*.
    """

    def create_instance(self, path: str) -> Page | None: ...


class KidaPageLoader:
    """Load pages from a kida ``Environment``.

    Application paths are mapped to template names by stripping the
    leading ``~`` and ``/``, so ``/Views/Home/Index.cshtml`` is loaded as
    ``Views/Home/Index.cshtml`` from the environment's loader.
    """

    __slots__ = ("_env",)

    def __init__(self, env: Environment) -> None:
        self._env = env

    @property
    def env(self) -> Environment:
        return self._env

    def create_instance(self, path: str) -> Page | None:
        name = template_name_for(path)
        if not name:
            return None
        try:
            template = self._env.get_template(name)
        except TemplateNotFoundError:
            logger.debug("No page at %s", path)
            return None
        return Page(path=path, template=template)
