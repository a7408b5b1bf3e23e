"""View engine configuration.

ViewEngineConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from perch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ViewEngineConfig:
    """View engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ViewEngineConfig(template_dir="site", location_cache_max_entries=512)
    """

    # Templates
    template_dir: str | Path = "templates"
    component_dirs: tuple[str | Path, ...] = ()  # Extra roots searched after template_dir
    autoescape: bool = True
    auto_reload: bool = False
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # View locations
    view_extension: str = ".cshtml"
    view_location_formats: tuple[str, ...] | None = None  # None = built-ins for view_extension
    area_view_location_formats: tuple[str, ...] | None = None

    # Location cache (None = unbounded)
    location_cache_max_entries: int | None = None

    def __post_init__(self) -> None:
        if not self.view_extension.startswith("."):
            msg = f"view_extension must start with '.', got {self.view_extension!r}"
            raise ConfigurationError(msg)
        if self.location_cache_max_entries is not None and self.location_cache_max_entries < 1:
            msg = (
                "location_cache_max_entries must be a positive integer or None, "
                f"got {self.location_cache_max_entries!r}"
            )
            raise ConfigurationError(msg)
