"""Property-based tests for relative path computation."""

from hypothesis import HealthCheck, assume, given, settings, strategies as st

from path_relativizer import (
    diff, dirname, escape_depth, is_normalized, normal, normalize, relative,
    resolve, segment,
)

components = st.sampled_from(["a", "b", "c", ".", "..", ""])
paths = st.lists(components, max_size=8).map("/".join)
segment_lists = st.lists(components, max_size=8)

# conftest autouse fixtures are function scoped
fixture_safe = settings(suppress_health_check=[HealthCheck.function_scoped_fixture])


class TestNormalizeProperties:
    """Invariants of normalize."""

    @fixture_safe
    @given(segment_lists)
    def test_output_is_normalized(self, segments):
        assert is_normalized(normalize(segments))

    @fixture_safe
    @given(segment_lists)
    def test_idempotent(self, segments):
        once = normalize(segments)
        assert normalize(once) == once

    @fixture_safe
    @given(segment_lists, segment_lists)
    def test_prefix_normalization_is_transparent(self, left, right):
        """Test that normalizing a prefix first does not change the result."""
        assert normalize(normalize(left) + right) == normalize(left + right)


class TestRelativeProperties:
    """Invariants of diff and relative."""

    @fixture_safe
    @given(segment_lists, segment_lists)
    def test_up_count_non_negative(self, source_dir, target):
        result = diff(normalize(source_dir), normalize(target))
        assert result.up_count >= 0
        assert ".." not in result.down_segments

    @fixture_safe
    @given(paths, paths)
    def test_output_has_no_interior_parent(self, source, target):
        """Test that output is a run of '../' followed by plain components."""
        result = relative(source, target)
        parts = segment(result)
        assert is_normalized(parts)
        assert "." not in parts

    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture, HealthCheck.filter_too_much])
    @given(paths, paths)
    def test_resolve_inverts_relative(self, source, target):
        """Test the round trip when the source does not escape deeper than the target."""
        source_dir = normalize(dirname(source))
        target_norm = normalize(segment(target))
        assume(escape_depth(source_dir) <= escape_depth(target_norm))

        assert resolve(source, relative(source, target)) == normal(target)

    @fixture_safe
    @given(paths, paths)
    def test_deterministic(self, source, target):
        assert relative(source, target) == relative(source, target)
