"""Tests for perch.config — ViewEngineConfig frozen dataclass."""

from pathlib import Path

import pytest

from perch.config import ViewEngineConfig
from perch.errors import ConfigurationError


class TestViewEngineConfig:
    def test_defaults(self) -> None:
        cfg = ViewEngineConfig()

        assert cfg.template_dir == "templates"
        assert cfg.component_dirs == ()
        assert cfg.view_extension == ".cshtml"
        assert cfg.view_location_formats is None
        assert cfg.area_view_location_formats is None
        assert cfg.location_cache_max_entries is None
        assert cfg.autoescape is True
        assert cfg.auto_reload is False

    def test_override(self) -> None:
        cfg = ViewEngineConfig(template_dir=Path("site"), view_extension=".html", auto_reload=True)

        assert cfg.template_dir == Path("site")
        assert cfg.view_extension == ".html"
        assert cfg.auto_reload is True

    def test_frozen(self) -> None:
        cfg = ViewEngineConfig()

        with pytest.raises(AttributeError):
            cfg.view_extension = ".html"  # type: ignore[misc]

    def test_extension_must_start_with_dot(self) -> None:
        with pytest.raises(ConfigurationError, match="view_extension"):
            ViewEngineConfig(view_extension="cshtml")

    @pytest.mark.parametrize("bound", [0, -5])
    def test_cache_bound_must_be_positive(self, bound: int) -> None:
        with pytest.raises(ConfigurationError, match="location_cache_max_entries"):
            ViewEngineConfig(location_cache_max_entries=bound)
