"""Convention configuration.

The configuration surface consumed by the rule engine and method checker.
Every field has a default, so ConventionConfig() is a complete setup.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from conventioncheck.domain.exceptions.configuration import ConfigurationError
from conventioncheck.domain.model.enums import AcronymPolicy

DEFAULT_FOLDER_NAME_EXCEPTIONS: tuple[str, ...] = (
    ".*",
    "__pycache__",
    "lost+found",
    "$RECYCLE.BIN",
    "System Volume Information",
)
DEFAULT_FILE_NAME_EXCEPTIONS: tuple[str, ...] = (
    "__init__",
    "authorized_keys",
    "known_hosts",
    ".*",
)
DEFAULT_PREPOSITIONS: frozenset[str] = frozenset(
    {
        "Of",
        "For",
        "From",
        "With",
        "By",
        "In",
        "At",
        "To",
        "Into",
        "As",
        "Between",
        "Per",
        "Without",
        "Within",
    }
)
DEFAULT_SOURCE_SUFFIXES: tuple[str, ...] = (".php", ".py", ".js", ".ts", ".m", ".swift")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _to_snake(key: str) -> str:
    """maxLineLength → max_line_length; snake_case keys pass through."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


@dataclass(frozen=True, slots=True)
class ConventionConfig:
    """Immutable configuration with FAIL-FIRST validation.

    Attributes:
        # Formatting
        max_line_length: Longest allowed source line (characters)

        # Path names
        folder_name_exceptions: fnmatch patterns exempt from folder naming
        file_name_exceptions: fnmatch patterns exempt from file naming
        source_suffixes: File suffixes whose lines discovery reads

        # Casing
        acronym_policy: Treatment of all-caps words in camel identifiers
        acronyms: Acronyms accepted under AcronymPolicy.KNOWN

        # Enums
        enum_prefix: Literal prefix every enum name starts with
        plural_suffixes: Last-word endings that look plural
        singular_suffixes: Last-word endings that override plural_suffixes
        singular_exceptions: Last words that are never plural

        # Methods
        constructor_names: Method names (without underscores) of constructors
        prepositions: Capitalized words that mark a give-method noun phrase

        # Rule selection
        disabled_rules: Rule names not to run

        # User extensions (for custom rules)
        extras: Arbitrary user data, read-only, excluded from hash
    """

    # Formatting
    max_line_length: int = 120

    # Path names
    folder_name_exceptions: tuple[str, ...] = DEFAULT_FOLDER_NAME_EXCEPTIONS
    file_name_exceptions: tuple[str, ...] = DEFAULT_FILE_NAME_EXCEPTIONS
    source_suffixes: tuple[str, ...] = DEFAULT_SOURCE_SUFFIXES

    # Casing
    acronym_policy: AcronymPolicy = AcronymPolicy.PERMISSIVE
    acronyms: frozenset[str] = frozenset()

    # Enums
    enum_prefix: str = "En"
    plural_suffixes: tuple[str, ...] = ("s",)
    singular_suffixes: tuple[str, ...] = ("ss", "us", "is")
    singular_exceptions: frozenset[str] = frozenset({"news", "series", "species", "data"})

    # Methods
    constructor_names: frozenset[str] = frozenset({"constructor", "construct"})
    prepositions: frozenset[str] = DEFAULT_PREPOSITIONS

    # Rule selection
    disabled_rules: frozenset[str] = frozenset()

    # User extensions
    extras: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.max_line_length, int) or isinstance(self.max_line_length, bool):
            raise ConfigurationError("max_line_length", "must be an integer")
        if self.max_line_length < 1:
            raise ConfigurationError(
                "max_line_length", f"must be >= 1, got {self.max_line_length}"
            )

        if not isinstance(self.acronym_policy, AcronymPolicy):
            raise ConfigurationError("acronym_policy", "must be an AcronymPolicy")
        for acronym in self.acronyms:
            if not acronym.isupper() or not acronym.isalnum():
                raise ConfigurationError("acronyms", f"{acronym!r} must be upper-case alphanumeric")

        if not self.enum_prefix or not self.enum_prefix[0].isupper():
            raise ConfigurationError(
                "enum_prefix", f"must start with a capital letter, got {self.enum_prefix!r}"
            )

        for name in ("plural_suffixes", "singular_suffixes"):
            if any(not s or not s.islower() for s in getattr(self, name)):
                raise ConfigurationError(name, "suffixes must be non-empty lower-case strings")

        for word in self.prepositions:
            if not word or not word[0].isupper() or not word.isalpha():
                raise ConfigurationError("prepositions", f"{word!r} must be a capitalized word")

        if any(not n for n in self.constructor_names):
            raise ConfigurationError("constructor_names", "names must not be empty")

        if any(not s.startswith(".") for s in self.source_suffixes):
            raise ConfigurationError("source_suffixes", "suffixes must start with '.'")

        if not isinstance(self.extras, Mapping):
            raise ConfigurationError("extras", "must be a mapping")
        if not isinstance(self.extras, MappingProxyType):
            object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def is_disabled(self, rule_name: str) -> bool:
        """Check if a rule is switched off."""
        return rule_name in self.disabled_rules

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ConventionConfig:
        """Build config from a loosely typed mapping (pyproject table, dict).

        Keys may be snake_case (max_line_length) or camelCase
        (maxLineLength). Lists are converted to the field's container type.

        Args:
            mapping: Raw configuration values

        Returns:
            Validated ConventionConfig

        Raises:
            ConfigurationError: Unknown key or invalid value
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}

        for raw_key, value in mapping.items():
            key = _to_snake(raw_key)
            if key not in known:
                raise ConfigurationError(raw_key, "unknown configuration key")
            kwargs[key] = _coerce(key, value)

        return cls(**kwargs)


_TUPLE_FIELDS = frozenset(
    {
        "folder_name_exceptions",
        "file_name_exceptions",
        "source_suffixes",
        "plural_suffixes",
        "singular_suffixes",
    }
)
_SET_FIELDS = frozenset(
    {
        "acronyms",
        "singular_exceptions",
        "constructor_names",
        "prepositions",
        "disabled_rules",
    }
)


def _coerce(key: str, value: Any) -> Any:
    """Convert a raw value to the type of field `key`."""
    if key in _TUPLE_FIELDS or key in _SET_FIELDS:
        if isinstance(value, str) or not isinstance(value, list | tuple | set | frozenset):
            raise ConfigurationError(key, "must be a list of strings")
        if any(not isinstance(item, str) for item in value):
            raise ConfigurationError(key, "must be a list of strings")
        return tuple(value) if key in _TUPLE_FIELDS else frozenset(value)

    if key == "acronym_policy":
        if isinstance(value, AcronymPolicy):
            return value
        try:
            return AcronymPolicy(str(value).lower())
        except ValueError:
            choices = ", ".join(p.value for p in AcronymPolicy)
            raise ConfigurationError(key, f"must be one of: {choices}") from None

    if key == "enum_prefix" and not isinstance(value, str):
        raise ConfigurationError(key, "must be a string")

    if key == "extras":
        if not isinstance(value, Mapping):
            raise ConfigurationError(key, "must be a table")
        return dict(value)

    return value
