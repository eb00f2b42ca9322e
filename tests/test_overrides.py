"""Tests for logproxy.overrides — override entries and spec parsing."""

import re

import pytest

from logproxy import Level, ThresholdOverride, parse_threshold_overrides


# =============================================================================
# ThresholdOverride
# =============================================================================

class TestThresholdOverride:

    def test_exact_string_match(self):
        override = ThresholdOverride('svc', Level.DEBUG)
        assert override.matches('svc') is True
        assert override.matches('svc:payments') is False

    def test_pattern_searches(self):
        override = ThresholdOverride(re.compile('pay'), Level.DEBUG)
        assert override.matches('svc:payments') is True
        assert override.matches('svc:orders') is False

    def test_coerce_pair(self):
        override = ThresholdOverride.coerce(('svc', 'TRACE'))
        assert override == ThresholdOverride('svc', Level.TRACE)

    def test_coerce_instance_passthrough(self):
        override = ThresholdOverride('svc', Level.INFO)
        assert ThresholdOverride.coerce(override) is override

    def test_coerce_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid override level"):
            ThresholdOverride.coerce(('svc', 'chatty'))

    @pytest.mark.parametrize("bad", ['svc', ('svc',), ('a', 'b', 'c'), None])
    def test_coerce_bad_shape(self, bad):
        with pytest.raises(TypeError):
            ThresholdOverride.coerce(bad)

    def test_coerce_bad_matcher(self):
        with pytest.raises(TypeError, match="matcher"):
            ThresholdOverride.coerce((['svc'], 'debug'))


# =============================================================================
# parse_threshold_overrides
# =============================================================================

class TestParseThresholdOverrides:

    def test_default_level(self):
        overrides = parse_threshold_overrides("svc:.*,db")
        assert [o.match.pattern for o in overrides] == ['svc:.*', 'db']
        assert all(o.level is Level.DEBUG for o in overrides)

    def test_explicit_default_level(self):
        overrides = parse_threshold_overrides("svc", level='trace')
        assert overrides[0].level is Level.TRACE

    def test_per_item_level(self):
        overrides = parse_threshold_overrides("svc:.*=trace, db=info")
        assert [(o.match.pattern, o.level) for o in overrides] == [
            ('svc:.*', Level.TRACE), ('db', Level.INFO),
        ]

    def test_non_alpha_suffix_is_pattern(self):
        """'a=1' has no level; the whole item is the pattern."""
        overrides = parse_threshold_overrides("key=1")
        assert overrides[0].match.pattern == 'key=1'
        assert overrides[0].level is Level.DEBUG

    def test_empty_items_skipped(self):
        assert parse_threshold_overrides(" , ,") == []

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            parse_threshold_overrides("svc=verbose")

    def test_malformed_regex_rejected(self):
        with pytest.raises(re.error):
            parse_threshold_overrides("svc(")

    def test_all_patterns(self):
        overrides = parse_threshold_overrides("exact")
        assert isinstance(overrides[0].match, re.Pattern)
        assert overrides[0].matches('not-exactly') is True
