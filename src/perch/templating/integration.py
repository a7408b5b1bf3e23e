"""Kida environment setup.

Creates a kida Environment from perch's ViewEngineConfig and binds
user-registered filters and globals. The environment is created once
when the engine is built and shared by every lookup.
"""

from collections.abc import Callable
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader

from perch.config import ViewEngineConfig


def create_environment(
    config: ViewEngineConfig,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment from engine configuration.

    Application paths such as ``/Views/Home/Index.cshtml`` resolve
    relative to ``config.template_dir``; ``config.component_dirs`` are
    searched after it, in order.
    """
    loaders = [
        FileSystemLoader(str(config.template_dir)),
    ]
    loaders.extend(FileSystemLoader(str(d)) for d in config.component_dirs)

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.auto_reload,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )

    if filters:
        env.update_filters(filters)

    for name, value in (globals_ or {}).items():
        env.add_global(name, value)

    return env
