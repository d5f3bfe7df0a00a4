"""Tests for identifier rules.

Tests:
- empty-identifier
- folder-name, file-name with exceptions
- type-name, callable-name (override exemption), property-name, constant-name
- enum-prefix, enum-singular
- boolean-property-prefix, lazy-property-name
"""

import pytest

from conventioncheck.application.rules import (
    BooleanPropertyPrefixRule,
    CallableNameRule,
    ConstantNameRule,
    EmptyIdentifierRule,
    EnumPrefixRule,
    EnumSingularRule,
    FileNameRule,
    FolderNameRule,
    LazyPropertyNameRule,
    PropertyNameRule,
    TypeNameRule,
)
from conventioncheck.application.rules._base import BaseIdentifierRule
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.enums import Role, RuleCategory, Severity
from conventioncheck.domain.model.identifier import IdentifierContext
from conventioncheck.domain.model.violation import Violation
from tests.factories import make_context, make_identifier

DEFAULT = IdentifierContext.default()


def run(
    rule: BaseIdentifierRule,
    name: str,
    role: Role,
    context: IdentifierContext = DEFAULT,
) -> tuple[Violation, ...]:
    """Evaluate one rule the way the engine does."""
    identifier = make_identifier(name, role)
    if not rule.applies_to(identifier, context):
        return ()
    return rule.check(identifier, context)


@pytest.fixture
def config() -> ConventionConfig:
    """Default configuration."""
    return ConventionConfig()


class TestEmptyIdentifierRule:
    """Tests for EmptyIdentifierRule."""

    @pytest.mark.parametrize("name", ["", "   ", "__"])
    def test_blank_names_reported(self, config: ConventionConfig, name: str) -> None:
        """Blank names produce one INPUT violation."""
        violations = run(EmptyIdentifierRule(config), name, Role.CLASS)
        assert len(violations) == 1
        assert violations[0].category is RuleCategory.INPUT
        assert violations[0].actual == repr(name)

    def test_applies_to_every_role(self, config: ConventionConfig) -> None:
        """Every role is covered."""
        rule = EmptyIdentifierRule(config)
        for role in Role:
            assert rule.applies_to(make_identifier("", role), DEFAULT) is True

    def test_non_blank_passes(self, config: ConventionConfig) -> None:
        """Real names pass."""
        assert run(EmptyIdentifierRule(config), "user", Role.PARAMETER) == ()


class TestFolderNameRule:
    """Tests for FolderNameRule."""

    def test_capital_camel_passes(self, config: ConventionConfig) -> None:
        """Models is a valid folder name."""
        assert run(FolderNameRule(config), "Models", Role.FOLDER) == ()

    def test_lower_case_fails(self, config: ConventionConfig) -> None:
        """models must be Models."""
        violations = run(FolderNameRule(config), "models", Role.FOLDER)
        assert len(violations) == 1
        assert violations[0].expected == "CapitalCamelCase"
        assert violations[0].suggestion == "Models"

    @pytest.mark.parametrize("name", [".git", "__pycache__", "lost+found"])
    def test_default_exceptions(self, config: ConventionConfig, name: str) -> None:
        """Dotfiles and OS-reserved names are exempt."""
        assert run(FolderNameRule(config), name, Role.FOLDER) == ()

    def test_custom_exception_pattern(self) -> None:
        """fnmatch patterns from config apply."""
        config = ConventionConfig(folder_name_exceptions=("vendor*",))
        assert run(FolderNameRule(config), "vendor_libs", Role.FOLDER) == ()

    def test_underscore_rejected(self, config: ConventionConfig) -> None:
        """Folders cannot be protected."""
        violations = run(FolderNameRule(config), "_Cache", Role.FOLDER)
        assert [v.expected for v in violations] == ["no leading underscore"]


class TestFileNameRule:
    """Tests for FileNameRule."""

    def test_stem_checked(self, config: ConventionConfig) -> None:
        """Only the part before the first dot is checked."""
        assert run(FileNameRule(config), "UserList.test.php", Role.FILE) == ()

    def test_snake_stem_fails(self, config: ConventionConfig) -> None:
        """user_list.php must be UserList.php."""
        violations = run(FileNameRule(config), "user_list.php", Role.FILE)
        assert len(violations) == 1
        assert violations[0].suggestion == "UserList"

    @pytest.mark.parametrize("name", ["__init__.py", "authorized_keys", ".gitignore"])
    def test_default_exceptions(self, config: ConventionConfig, name: str) -> None:
        """Exceptions match the full name or the stem."""
        assert run(FileNameRule(config), name, Role.FILE) == ()


class TestTypeNameRule:
    """Tests for TypeNameRule."""

    @pytest.mark.parametrize("role", [Role.CLASS, Role.ENUM])
    def test_capital_camel_required(self, config: ConventionConfig, role: Role) -> None:
        """Classes and enums are CapitalCamelCase."""
        assert run(TypeNameRule(config), "userAccount", role)
        assert run(TypeNameRule(config), "UserAccount", role) == ()

    def test_single_capital_is_valid(self, config: ConventionConfig) -> None:
        """Role expectation decides: 'X' is a valid class name."""
        assert run(TypeNameRule(config), "X", Role.CLASS) == ()


class TestCallableNameRule:
    """Tests for CallableNameRule."""

    @pytest.mark.parametrize(
        "role", [Role.FUNCTION, Role.METHOD, Role.PARAMETER, Role.LOCAL_VARIABLE]
    )
    def test_camel_case_required(self, config: ConventionConfig, role: Role) -> None:
        """Callables and variables are camelCase."""
        assert run(CallableNameRule(config), "UserName", role)
        assert run(CallableNameRule(config), "userName", role) == ()

    def test_protected_allowed(self, config: ConventionConfig) -> None:
        """Leading underscore marks protected, it is allowed."""
        assert run(CallableNameRule(config), "_doRefresh", Role.METHOD) == ()

    def test_override_exempt(self, config: ConventionConfig) -> None:
        """Overrides keep externally imposed names."""
        context = make_context(is_override=True)
        assert run(CallableNameRule(config), "__construct", Role.METHOD, context) == ()

    def test_strict_acronyms(self) -> None:
        """Acronym policy applies to camelCase roles."""
        config = ConventionConfig.from_mapping({"acronymPolicy": "strict"})
        violations = run(CallableNameRule(config), "userID", Role.PARAMETER)
        assert len(violations) == 1


class TestPropertyNameRule:
    """Tests for PropertyNameRule."""

    def test_my_property_yields_single_violation(self, config: ConventionConfig) -> None:
        """'my_property' reports camelCase required."""
        violations = run(PropertyNameRule(config), "my_property", Role.PROPERTY)
        assert len(violations) == 1
        assert violations[0].expected == "camelCase"
        assert violations[0].suggestion == "myProperty"

    def test_protected_property_passes(self, config: ConventionConfig) -> None:
        """_cache is a valid protected property."""
        assert run(PropertyNameRule(config), "_cache", Role.PROPERTY) == ()


class TestConstantNameRule:
    """Tests for ConstantNameRule."""

    @pytest.mark.parametrize("name", ["MAX_SIZE", "X", "HTTP2_PORT"])
    def test_valid(self, config: ConventionConfig, name: str) -> None:
        """ALL_CAPS_UNDERSCORE constants pass."""
        assert run(ConstantNameRule(config), name, Role.GLOBAL_CONSTANT) == ()

    @pytest.mark.parametrize("name", ["maxSize", "_MAX", "MAX__SIZE", "Max_Size"])
    def test_invalid(self, config: ConventionConfig, name: str) -> None:
        """Anything else fails with one violation."""
        violations = run(ConstantNameRule(config), name, Role.GLOBAL_CONSTANT)
        assert len(violations) == 1
        assert violations[0].expected == "ALL_CAPS_UNDERSCORE"

    def test_suggestion(self, config: ConventionConfig) -> None:
        """Suggestion upper-cases the words."""
        violations = run(ConstantNameRule(config), "maxSize", Role.GLOBAL_CONSTANT)
        assert violations[0].suggestion == "MAX_SIZE"


class TestEnumPrefixRule:
    """Tests for EnumPrefixRule."""

    def test_en_color_passes(self, config: ConventionConfig) -> None:
        """EnColor has the prefix."""
        assert run(EnumPrefixRule(config), "EnColor", Role.ENUM) == ()

    def test_missing_prefix(self, config: ConventionConfig) -> None:
        """Color must be EnColor."""
        violations = run(EnumPrefixRule(config), "Color", Role.ENUM)
        assert violations[0].suggestion == "EnColor"

    def test_prefix_must_end_a_word(self, config: ConventionConfig) -> None:
        """Entity starts with 'En' but has no prefix word."""
        assert run(EnumPrefixRule(config), "Entity", Role.ENUM)

    def test_custom_prefix(self) -> None:
        """Prefix comes from config."""
        config = ConventionConfig(enum_prefix="E")
        assert run(EnumPrefixRule(config), "EColor", Role.ENUM) == ()


class TestEnumSingularRule:
    """Tests for EnumSingularRule."""

    @pytest.mark.parametrize("name", ["EnColor", "EnStatus", "EnAddress", "EnBasis", "EnNews"])
    def test_singular_names_pass(self, config: ConventionConfig, name: str) -> None:
        """Singular endings and exceptions are not flagged."""
        assert run(EnumSingularRule(config), name, Role.ENUM) == ()

    def test_plural_warns(self, config: ConventionConfig) -> None:
        """EnColors is a WARNING, not an error."""
        violations = run(EnumSingularRule(config), "EnColors", Role.ENUM)
        assert len(violations) == 1
        assert violations[0].severity is Severity.WARNING


class TestBooleanPropertyPrefixRule:
    """Tests for BooleanPropertyPrefixRule."""

    def test_only_boolean_properties(self, config: ConventionConfig) -> None:
        """Non-boolean properties are skipped."""
        assert run(BooleanPropertyPrefixRule(config), "visible", Role.PROPERTY) == ()

    def test_is_prefix_required(self, config: ConventionConfig) -> None:
        """Boolean 'visible' must be 'isVisible'."""
        context = make_context(is_boolean=True)
        violations = run(BooleanPropertyPrefixRule(config), "visible", Role.PROPERTY, context)
        assert violations[0].suggestion == "isVisible"

    def test_protected_boolean(self, config: ConventionConfig) -> None:
        """Prefix is checked after the underscore."""
        context = make_context(is_boolean=True)
        assert run(BooleanPropertyPrefixRule(config), "_isReady", Role.PROPERTY, context) == ()

    def test_issue_is_not_prefix(self, config: ConventionConfig) -> None:
        """'issue' does not start with the 'is' word."""
        context = make_context(is_boolean=True)
        assert run(BooleanPropertyPrefixRule(config), "issue", Role.PROPERTY, context)


class TestLazyPropertyNameRule:
    """Tests for LazyPropertyNameRule."""

    def test_valid_lazy(self, config: ConventionConfig) -> None:
        """_totalLazy passes."""
        context = make_context(is_lazy=True)
        assert run(LazyPropertyNameRule(config), "_totalLazy", Role.PROPERTY, context) == ()

    def test_missing_underscore_and_suffix(self, config: ConventionConfig) -> None:
        """Both parts are named in one violation."""
        context = make_context(is_lazy=True)
        violations = run(LazyPropertyNameRule(config), "total", Role.PROPERTY, context)
        assert len(violations) == 1
        assert "leading '_'" in violations[0].message
        assert "'Lazy' suffix" in violations[0].message
        assert violations[0].suggestion == "_totalLazy"

    def test_bare_lazy_is_not_enough(self, config: ConventionConfig) -> None:
        """'_Lazy' has no name before the suffix."""
        context = make_context(is_lazy=True)
        assert run(LazyPropertyNameRule(config), "_Lazy", Role.PROPERTY, context)


class TestFromConfig:
    """Tests for from_config() activation."""

    def test_disabled_rule_returns_none(self) -> None:
        """Disabled rules are not instantiated."""
        config = ConventionConfig(disabled_rules=frozenset({"enum-prefix"}))
        assert EnumPrefixRule.from_config(config) is None
        assert EnumSingularRule.from_config(config) is not None

    def test_none_config_rejected(self) -> None:
        """Rules need a configuration."""
        with pytest.raises(TypeError, match="config must not be None"):
            TypeNameRule(None)  # type: ignore[arg-type]
