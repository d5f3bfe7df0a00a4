"""Identifier tokenizer and casing classifier."""

from conventioncheck.application.casing.classifier import (
    CONSTANT_PATTERN,
    acronym_words,
    analyze,
    classify,
    conforms,
    is_blank,
    split_words,
    strip_protected,
)

__all__ = [
    "CONSTANT_PATTERN",
    "acronym_words",
    "analyze",
    "classify",
    "conforms",
    "is_blank",
    "split_words",
    "strip_protected",
]
