"""Casing classification of identifiers.

Pure functions, no side effects, never raise for any string input.
Unrecognized shapes map to CasingPattern.OTHER.

Classification order (first match wins, classes are disjoint):
    ALL_CAPS_UNDERSCORE  MAX_SIZE, ID, X
    CAPITAL_CAMEL_CASE   UserName, EnColor
    CAMEL_CASE           userName, x
    SNAKE_CASE           user_name
    OTHER                everything else ("", "9", "User_name", "a-b")
"""

from __future__ import annotations

import re
from collections.abc import Set

from conventioncheck.domain.model.enums import AcronymPolicy, CasingPattern
from conventioncheck.domain.model.shape import IdentifierShape

CONSTANT_PATTERN = re.compile(r"[A-Z][A-Z0-9]*(_[A-Z0-9]+)*")

_CAPITAL_CAMEL = re.compile(r"[A-Z][A-Za-z0-9]*")
_CAMEL = re.compile(r"[a-z][A-Za-z0-9]*")
_SNAKE = re.compile(r"[a-z][a-z0-9]*(_[a-z0-9]+)+")

# Acronym run before a capitalized word | capitalized or lower word | acronym | digits
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def strip_protected(identifier: str) -> tuple[str, bool]:
    """Split off leading underscores.

    Args:
        identifier: Raw identifier

    Returns:
        (core, is_protected) where core has no leading underscore
    """
    core = identifier.lstrip("_")
    return core, len(core) != len(identifier)


def is_blank(identifier: str) -> bool:
    """Identifier has nothing but whitespace and underscores."""
    return not identifier.replace("_", "").strip()


def classify(identifier: str) -> CasingPattern:
    """Classify the casing pattern of an identifier.

    The leading underscore (protected marker) is stripped first and does
    not influence the pattern.

    Args:
        identifier: Raw identifier

    Returns:
        Casing pattern of the identifier core
    """
    core, _ = strip_protected(identifier)
    if CONSTANT_PATTERN.fullmatch(core):
        return CasingPattern.ALL_CAPS_UNDERSCORE
    if _CAPITAL_CAMEL.fullmatch(core):
        return CasingPattern.CAPITAL_CAMEL_CASE
    if _CAMEL.fullmatch(core):
        return CasingPattern.CAMEL_CASE
    if _SNAKE.fullmatch(core):
        return CasingPattern.SNAKE_CASE
    return CasingPattern.OTHER


def split_words(core: str) -> tuple[str, ...]:
    """Split an identifier core into word segments.

    A new word starts at an underscore, a lower → upper transition,
    a letter/digit boundary, and before the last capital of an acronym
    run followed by a lowercase letter.

    Examples:
        "squareRootOfIntValue" → ("square", "Root", "Of", "Int", "Value")
        "XMLParser" → ("XML", "Parser")
        "MAX_SIZE" → ("MAX", "SIZE")
    """
    words: list[str] = []
    for piece in core.split("_"):
        words.extend(_WORD.findall(piece))
    return tuple(words)


def acronym_words(core: str) -> tuple[str, ...]:
    """All-caps words of two or more letters (XML, ID, URL)."""
    return tuple(w for w in split_words(core) if len(w) >= 2 and w.isalpha() and w.isupper())


def analyze(identifier: str) -> IdentifierShape:
    """Tokenize and classify an identifier.

    Args:
        identifier: Raw identifier

    Returns:
        Shape with pattern, words and protected flag
    """
    core, is_protected = strip_protected(identifier)
    return IdentifierShape(
        raw=identifier,
        core=core,
        pattern=classify(identifier),
        words=split_words(core),
        is_protected=is_protected,
    )


def conforms(
    identifier: str,
    pattern: CasingPattern,
    *,
    policy: AcronymPolicy = AcronymPolicy.PERMISSIVE,
    acronyms: Set[str] = frozenset(),
) -> bool:
    """Check an identifier against the pattern its role requires.

    Unlike classify(), this answers "does the identifier satisfy the
    expected pattern": a degenerate form such as "X" or "URL" satisfies
    CapitalCamelCase when the role asks for it.

    Args:
        identifier: Raw identifier
        pattern: Pattern required by the identifier's role
        policy: Acronym policy for camel patterns
        acronyms: Acronyms accepted under AcronymPolicy.KNOWN

    Returns:
        True if the identifier conforms
    """
    if pattern is CasingPattern.ALL_CAPS_UNDERSCORE:
        # Constants: no protected marker, no exceptions.
        return CONSTANT_PATTERN.fullmatch(identifier) is not None

    core, _ = strip_protected(identifier)

    if pattern is CasingPattern.CAMEL_CASE:
        matched = _CAMEL.fullmatch(core) is not None
    elif pattern is CasingPattern.CAPITAL_CAMEL_CASE:
        matched = _CAPITAL_CAMEL.fullmatch(core) is not None
    elif pattern is CasingPattern.SNAKE_CASE:
        return _SNAKE.fullmatch(core) is not None or (
            _CAMEL.fullmatch(core) is not None and core.islower()
        )
    else:
        return classify(identifier) is CasingPattern.OTHER

    if not matched:
        return False
    return _acronyms_allowed(core, policy, acronyms)


def _acronyms_allowed(core: str, policy: AcronymPolicy, acronyms: Set[str]) -> bool:
    """Apply acronym policy to a camel-shaped core."""
    if policy is AcronymPolicy.PERMISSIVE:
        return True
    found = acronym_words(core)
    if policy is AcronymPolicy.STRICT:
        return not found
    return all(word in acronyms for word in found)
