"""Tests for the blacklist and deprecated skip-run rules."""

from __future__ import annotations

from closure_complete.scanning.filters import (
    FilterState,
    admit_namespace,
    is_blacklisted,
    is_deprecated,
)


class TestBlacklist:
    def test_prefix_match(self):
        assert is_blacklisted("goog.i18n.DateTimeSymbols")
        assert is_blacklisted("goog.i18n.DateTimeSymbols.foo")
        assert is_blacklisted("goog.i18n.DateTimeSymbols_en")

    def test_unrelated_namespace(self):
        assert not is_blacklisted("goog.i18n.DateTimeFormat")

    def test_blacklisted_never_arms_skip(self):
        state = FilterState()
        assert not admit_namespace("goog.labs.i18n.ListFormat", state)
        assert state.skip == ""


class TestDeprecatedSkip:
    def test_exact_match_only(self):
        assert is_deprecated("goog.ui.TabPane")
        assert not is_deprecated("goog.ui.TabPane.Events")

    def test_deprecated_arms_skip(self):
        state = FilterState()
        assert not admit_namespace("goog.ui.TabPane", state)
        assert state.skip == "goog.ui.TabPane."

    def test_skip_run_sequence(self):
        state = FilterState()
        results = [
            admit_namespace(ns, state)
            for ns in ["goog.ui.TabPane", "goog.ui.TabPane.Events", "goog.ui.Button"]
        ]
        assert results == [False, False, True]
        assert state.skip == ""

    def test_sibling_with_common_text_prefix_disarms(self):
        state = FilterState()
        admit_namespace("goog.ui.TabPane", state)
        assert admit_namespace("goog.ui.TabPaneRenderer", state)
        assert state.skip == ""

    def test_disarming_namespace_checked_fresh(self):
        state = FilterState()
        admit_namespace("goog.ui.TabPane", state)
        assert not admit_namespace("goog.structs.Map", state)
        assert state.skip == "goog.structs.Map."
        assert not admit_namespace("goog.structs.Map.Iterator", state)

    def test_skip_then_blacklist(self):
        state = FilterState()
        admit_namespace("goog.graphics", state)
        assert not admit_namespace("goog.i18n.NumberFormatSymbols", state)
        assert state.skip == ""
        assert admit_namespace("goog.i18n.NumberFormat", state)
