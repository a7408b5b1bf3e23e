"""Tests for perch.errors — exception hierarchy and error messages."""

from perch.errors import (
    ConfigurationError,
    PerchError,
    ResolutionAborted,
    ViewNameError,
    ViewNotFoundError,
)


class TestHierarchy:
    def test_configuration_error_is_perch_error(self) -> None:
        assert issubclass(ConfigurationError, PerchError)

    def test_view_name_error_is_value_error(self) -> None:
        assert issubclass(ViewNameError, PerchError)
        assert issubclass(ViewNameError, ValueError)

    def test_view_not_found_is_perch_error(self) -> None:
        assert issubclass(ViewNotFoundError, PerchError)

    def test_resolution_aborted_is_perch_error(self) -> None:
        assert issubclass(ResolutionAborted, PerchError)


class TestMessages:
    def test_view_name_error_names_argument(self) -> None:
        err = ViewNameError("partial_view_name")
        assert err.argument == "partial_view_name"
        assert "'partial_view_name' cannot be null or empty" in str(err)

    def test_view_not_found_one_location_per_line(self) -> None:
        err = ViewNotFoundError("Index", ["/a", "/b"])
        assert str(err).splitlines()[1:] == ["/a", "/b"]
