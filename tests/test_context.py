"""Tests for perch.context — ActionContext route values and abort flag."""

import pytest

from perch.context import ActionContext


class TestActionContext:
    def test_route_value_present(self) -> None:
        ctx = ActionContext({"controller": "Home"})
        assert ctx.route_value("controller") == "Home"
        assert ctx.controller_name == "Home"

    def test_missing_route_value_is_empty(self) -> None:
        ctx = ActionContext()
        assert ctx.route_value("controller") == ""
        assert ctx.area_name == ""

    def test_none_route_value_is_empty(self) -> None:
        assert ActionContext({"area": None}).area_name == ""

    def test_non_string_route_value(self) -> None:
        assert ActionContext({"page": 3}).route_value("page") == "3"

    def test_abort(self) -> None:
        ctx = ActionContext()
        assert ctx.is_aborted is False
        ctx.abort()
        assert ctx.is_aborted is True

    def test_contexts_do_not_share_abort_flag(self) -> None:
        a, b = ActionContext(), ActionContext()
        a.abort()
        assert b.is_aborted is False

    def test_frozen(self) -> None:
        ctx = ActionContext()
        with pytest.raises(AttributeError):
            ctx.request = object()  # type: ignore[misc]
