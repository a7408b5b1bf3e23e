"""Tests for perch.views.formats — built-in formats and path helpers."""

import pytest

from perch.views.formats import (
    AREA_VIEW_LOCATION_FORMATS,
    VIEW_LOCATION_FORMATS,
    area_view_location_formats,
    format_location,
    is_specific_path,
    template_name_for,
    view_location_formats,
)


class TestBuiltinFormats:
    def test_plain_formats(self) -> None:
        assert VIEW_LOCATION_FORMATS == (
            "/Views/{1}/{0}.cshtml",
            "/Views/Shared/{0}.cshtml",
        )

    def test_area_formats(self) -> None:
        assert AREA_VIEW_LOCATION_FORMATS == (
            "/Areas/{2}/Views/{1}/{0}.cshtml",
            "/Areas/{2}/Views/Shared/{0}.cshtml",
            "/Views/Shared/{0}.cshtml",
        )

    def test_custom_extension(self) -> None:
        assert view_location_formats(".html") == ("/Views/{1}/{0}.html", "/Views/Shared/{0}.html")
        assert area_view_location_formats(".html")[-1] == "/Views/Shared/{0}.html"


class TestFormatLocation:
    def test_substitutes_placeholders(self) -> None:
        path = format_location("/Areas/{2}/Views/{1}/{0}.cshtml", "Index", "Home", "Admin")
        assert path == "/Areas/Admin/Views/Home/Index.cshtml"

    def test_unused_placeholders_ignored(self) -> None:
        assert format_location("/Views/Shared/{0}.cshtml", "Index", "Home", "") == (
            "/Views/Shared/Index.cshtml"
        )

    def test_no_case_mangling(self) -> None:
        assert format_location("/Views/{1}/{0}.cshtml", "İndex", "HOME", "") == (
            "/Views/HOME/İndex.cshtml"
        )


class TestIsSpecificPath:
    @pytest.mark.parametrize("name", ["/Views/Home/Index.cshtml", "~/Views/Index.cshtml", "~", "/"])
    def test_paths(self, name: str) -> None:
        assert is_specific_path(name) is True

    @pytest.mark.parametrize("name", ["Index", "Views/Home/Index.cshtml", " /Index", "_Nav"])
    def test_logical_names(self, name: str) -> None:
        assert is_specific_path(name) is False


class TestTemplateNameFor:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/Views/Home/Index.cshtml", "Views/Home/Index.cshtml"),
            ("~/Views/Home/Index.cshtml", "Views/Home/Index.cshtml"),
            ("~Views/Index.cshtml", "Views/Index.cshtml"),
            ("Views/Index.cshtml", "Views/Index.cshtml"),
        ],
    )
    def test_strips_root_markers(self, path: str, expected: str) -> None:
        assert template_name_for(path) == expected
