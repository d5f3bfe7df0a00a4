"""Tests for line rules and the rule registry."""

from pathlib import Path

from conventioncheck.application.methods import METHOD_RULE_NAMES
from conventioncheck.application.rules import (
    LineLengthRule,
    TrailingWhitespaceRule,
    builtin_rule_names,
    identifier_rules_from_config,
    line_rules_from_config,
)
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.enums import RuleCategory, Severity

PATH = Path("/src/User.php")


class TestLineLengthRule:
    """Tests for LineLengthRule."""

    def test_at_limit_passes(self) -> None:
        """Exactly max_line_length characters is fine."""
        rule = LineLengthRule(ConventionConfig(max_line_length=10))
        assert rule.check_line(PATH, 1, "x" * 10) is None

    def test_over_limit(self) -> None:
        """One character over is reported at the limit column."""
        rule = LineLengthRule(ConventionConfig(max_line_length=10))
        violation = rule.check_line(PATH, 7, "x" * 11)
        assert violation is not None
        assert violation.category is RuleCategory.FORMATTING
        assert violation.location is not None
        assert (violation.location.line, violation.location.column) == (7, 10)
        assert violation.actual == "11 characters"

    def test_terminator_not_counted(self) -> None:
        """Line terminators do not count."""
        rule = LineLengthRule(ConventionConfig(max_line_length=3))
        assert rule.check_line(PATH, 1, "abc\r\n") is None


class TestTrailingWhitespaceRule:
    """Tests for TrailingWhitespaceRule."""

    def test_clean_line(self) -> None:
        """No trailing blanks, no violation."""
        rule = TrailingWhitespaceRule(ConventionConfig())
        assert rule.check_line(PATH, 1, "return $x;\n") is None

    def test_trailing_blanks_warn(self) -> None:
        """Trailing spaces and tabs are a WARNING."""
        rule = TrailingWhitespaceRule(ConventionConfig())
        violation = rule.check_line(PATH, 2, "return $x; \t\n")
        assert violation is not None
        assert violation.severity is Severity.WARNING
        assert violation.actual == "2 trailing blank(s)"
        assert violation.location is not None
        assert violation.location.column == 10


class TestRegistry:
    """Tests for the rule registry."""

    def test_all_rules_enabled_by_default(self) -> None:
        """Default config enables every built-in rule."""
        config = ConventionConfig()
        names = [r.rule_name for r in identifier_rules_from_config(config)]
        names += [r.rule_name for r in line_rules_from_config(config)]
        assert set(names) == builtin_rule_names()

    def test_empty_identifier_rule_first(self) -> None:
        """Input rule runs before naming rules."""
        rules = identifier_rules_from_config(ConventionConfig())
        assert rules[0].rule_name == "empty-identifier"

    def test_disabled_rules_skipped(self) -> None:
        """disabled_rules removes rules from the registry output."""
        config = ConventionConfig(disabled_rules=frozenset({"line-length", "file-name"}))
        names = {r.rule_name for r in identifier_rules_from_config(config)}
        names |= {r.rule_name for r in line_rules_from_config(config)}
        assert "line-length" not in names
        assert "file-name" not in names

    def test_rule_names_are_unique_across_families(self) -> None:
        """Identifier, line and method rule names do not collide."""
        assert not builtin_rule_names() & METHOD_RULE_NAMES
