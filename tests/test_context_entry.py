"""Tests for context entry parsing."""

import pytest

from context.parser import ContextName, parse_context_entry


class TestParseContextEntry:
    """Test <project>.<build-type>+<target-type> parsing."""

    def test_build_then_target(self):
        assert parse_context_entry("App.Debug+Board") == ContextName("App", "Debug", "Board")

    def test_target_then_build(self):
        assert parse_context_entry("App+Board.Debug") == ContextName("App", "Debug", "Board")

    def test_project_only(self):
        assert parse_context_entry("App") == ContextName("App", "", "")

    def test_build_type_only(self):
        assert parse_context_entry("App.Release") == ContextName("App", "Release", "")

    def test_target_type_only(self):
        assert parse_context_entry("App+CM3") == ContextName("App", "", "CM3")

    def test_missing_project(self):
        assert parse_context_entry(".Debug+Board") == ContextName("", "Debug", "Board")
        assert parse_context_entry("+Board") == ContextName("", "", "Board")

    def test_empty_entry(self):
        assert parse_context_entry("") == ContextName("", "", "")

    def test_trailing_separators(self):
        assert parse_context_entry("App.+") == ContextName("App", "", "")

    @pytest.mark.parametrize("entry", ["App.Debug+Board", "App+Board.Debug"])
    def test_str_reencodes_canonical_order(self, entry):
        assert str(parse_context_entry(entry)) == "App.Debug+Board"

    def test_str_skips_empty_parts(self):
        assert str(ContextName("App", "", "Board")) == "App+Board"
