"""Tests for the deprecation tables and codemod registry."""

import pytest

from deprecation_codemod import (
    ALERT_CLASSES,
    DeprecationEntry,
    DeprecationMap,
    UnknownCodemodError,
    available_codemods,
    get_codemod,
)
from deprecation_codemod.errors import ExitCode


class TestDeprecationEntry:
    def test_from_class_keys_derives_selector_tokens(self):
        entry = DeprecationEntry.from_class_keys("MuiAlert", "standardSuccess", ["standard", "colorSuccess"])
        assert entry.old_class_key == "standardSuccess"
        assert entry.new_class_keys == ("standard", "colorSuccess")
        assert entry.old_selector_token == ".MuiAlert-standardSuccess"
        assert entry.new_selector_token == ".MuiAlert-standard.MuiAlert-colorSuccess"
        assert entry.old_class_name == "MuiAlert-standardSuccess"
        assert entry.new_class_names == ["MuiAlert-standard", "MuiAlert-colorSuccess"]


class TestDeprecationMap:
    def test_alert_table_covers_every_variant_and_color(self):
        deprecations = ALERT_CLASSES.deprecations
        assert len(deprecations) == 12
        assert deprecations.lookup_class_key("outlinedWarning").new_selector_token == (
            ".MuiAlert-outlined.MuiAlert-colorWarning"
        )
        assert deprecations.lookup_class_name("MuiAlert-filledError").old_class_key == "filledError"

    def test_alert_table_is_idempotent(self):
        assert ALERT_CLASSES.deprecations.check_invariants() == []

    def test_unknown_keys(self):
        deprecations = ALERT_CLASSES.deprecations
        assert deprecations.lookup_class_key("root") is None
        assert deprecations.lookup_class_key("standard") is None
        assert deprecations.lookup_class_name("MuiAlert-standardSuccess2") is None

    def test_duplicate_keys_are_rejected(self):
        entry = DeprecationEntry.from_class_keys("Foo", "message", ["content"])
        with pytest.raises(ValueError):
            DeprecationMap([entry, entry])

    def test_cyclic_table_is_reported(self):
        deprecations = DeprecationMap(
            [
                DeprecationEntry.from_class_keys("Foo", "a", ["b"]),
                DeprecationEntry.from_class_keys("Foo", "b", ["c"]),
            ]
        )
        problems = deprecations.check_invariants()
        assert len(problems) == 2
        assert any("'b'" in problem for problem in problems)

    def test_iteration_keeps_order(self):
        keys = [entry.old_class_key for entry in ALERT_CLASSES.deprecations]
        assert keys[:4] == ["standardSuccess", "standardInfo", "standardWarning", "standardError"]


class TestRegistry:
    def test_alert_classes_is_registered(self):
        assert "alert-classes" in available_codemods()
        codemod = get_codemod("alert-classes")
        assert codemod is ALERT_CLASSES
        assert codemod.marker == "&."
        assert codemod.export_name == "alertClasses"

    def test_unknown_codemod(self):
        with pytest.raises(UnknownCodemodError) as excinfo:
            get_codemod("button-classes")
        assert excinfo.value.exit_code == ExitCode.INVALID_ARGS
        assert "alert-classes" in excinfo.value.message
