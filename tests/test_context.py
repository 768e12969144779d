import logging

import pytest

from coregeometry.internal.context import DEFAULT_CONTEXT, ContextError, GeometryContext
from coregeometry.internal.enums import LayoutDirection


class TestGeometryContext:

    def test_defaults(self):
        assert DEFAULT_CONTEXT.layout_direction is LayoutDirection.LEFT_TO_RIGHT
        assert DEFAULT_CONTEXT.flipped is False
        assert not DEFAULT_CONTEXT.is_right_to_left

    def test_with_helpers_return_new_contexts(self):
        context = DEFAULT_CONTEXT.with_flipped().with_layout_direction("RTL")
        assert context.flipped
        assert context.is_right_to_left
        assert DEFAULT_CONTEXT == GeometryContext()

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONTEXT.flipped = True

    def test_unknown_direction(self):
        with pytest.raises(ContextError):
            DEFAULT_CONTEXT.with_layout_direction("up")


class TestFromMapping:

    def test_empty_mapping_is_default(self):
        assert GeometryContext.from_mapping({}) == DEFAULT_CONTEXT

    def test_values(self):
        context = GeometryContext.from_mapping({"layout_direction": "rtl", "flipped": True})
        assert context == GeometryContext(LayoutDirection.RIGHT_TO_LEFT, True)

    def test_unknown_key(self):
        with pytest.raises(ContextError, match="origin"):
            GeometryContext.from_mapping({"origin": "top"})

    def test_flipped_must_be_bool(self):
        with pytest.raises(ContextError):
            GeometryContext.from_mapping({"flipped": "yes"})

    def test_context_error_is_value_error(self):
        with pytest.raises(ValueError):
            GeometryContext.from_mapping({"layout_direction": "sideways"})

    def test_logs_resolved_context(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="coregeometry.internal.context"):
            GeometryContext.from_mapping({"flipped": True})
        assert "flipped=True" in caplog.text
