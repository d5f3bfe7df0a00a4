"""Tests for method-type classification."""

import pytest

from conventioncheck.application.methods import callee_types, classify_method, is_init_name
from conventioncheck.domain.model.classification import AmbiguousClassification
from conventioncheck.domain.model.configuration import ConventionConfig
from conventioncheck.domain.model.enums import MethodType
from conventioncheck.domain.model.method_type_rule import MethodTypeRule
from tests.factories import external_call, make_signature, self_call, super_call


def method_type_of(name: str, *params: str, **kwargs: object) -> MethodType | None:
    """Classified type, None when ambiguous."""
    result = classify_method(make_signature(name, *params, **kwargs))  # type: ignore[arg-type]
    return result.method_type if isinstance(result, MethodTypeRule) else None


class TestIsInitName:
    """Tests for is_init_name()."""

    @pytest.mark.parametrize("name", ["init", "_init", "initWithName", "_initWithAge"])
    def test_init_names(self, name: str) -> None:
        """init and initWith<X>, protected or not."""
        assert is_init_name(name) is True

    @pytest.mark.parametrize("name", ["initialize", "initWith", "inits", "doInit"])
    def test_not_init_names(self, name: str) -> None:
        """Words that merely start with 'init' are not inits."""
        assert is_init_name(name) is False


class TestClassifyMethod:
    """Tests for classify_method()."""

    @pytest.mark.parametrize("name", ["constructor", "construct", "__construct"])
    def test_constructor(self, name: str) -> None:
        """Configured constructor names."""
        assert method_type_of(name) is MethodType.CONSTRUCTOR

    def test_init_calling_super_is_designated(self) -> None:
        """Delegating up marks a designated init."""
        calls = (super_call("init"),)
        assert method_type_of("initWithName", "name", calls=calls) is MethodType.DESIGNATED_INIT

    def test_init_calling_self_is_convenience(self) -> None:
        """Delegating across marks a convenience init."""
        calls = (self_call("initWithName"),)
        assert method_type_of("init", calls=calls) is MethodType.CONVENIENCE_INIT

    def test_init_without_init_calls_is_designated(self) -> None:
        """A base-class init calls no other init."""
        calls = (external_call("setUp"),)
        assert method_type_of("init", calls=calls) is MethodType.DESIGNATED_INIT

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("validate", MethodType.VALIDATE),
            ("validateEmail", MethodType.VALIDATE),
            ("doUpdateName", MethodType.DO),
            ("do", MethodType.DO),
            ("_onClick", MethodType.ON),
            ("onClick", MethodType.ON),
            ("squareRootOf", MethodType.GIVE),
            ("valueForKey", MethodType.GIVE),
        ],
    )
    def test_prefixes(self, name: str, expected: MethodType) -> None:
        """Naming prefixes and prepositions decide the type."""
        assert method_type_of(name) is expected

    @pytest.mark.parametrize("name", ["document", "online", "validated", "toString", "process"])
    def test_ambiguous(self, name: str) -> None:
        """Prefix must be a whole word; no marker means ambiguous."""
        result = classify_method(make_signature(name))
        assert isinstance(result, AmbiguousClassification)
        assert result.signature_name == name

    def test_bare_on_is_ambiguous(self) -> None:
        """'on' alone names no event."""
        assert method_type_of("on") is None

    def test_computed_property_is_give(self) -> None:
        """A property substitute without preposition is a give method."""
        assert method_type_of("fullName", is_computed_property=True) is MethodType.GIVE

    def test_empty_name(self) -> None:
        """Empty names are ambiguous with a reason."""
        result = classify_method(make_signature(""))
        assert isinstance(result, AmbiguousClassification)
        assert result.reason == "method name is empty"

    def test_structure_does_not_reclassify(self) -> None:
        """validate with zero parameters stays VALIDATE."""
        assert method_type_of("validate") is MethodType.VALIDATE

    def test_custom_constructor_names(self) -> None:
        """Constructor names come from config."""
        config = ConventionConfig(constructor_names=frozenset({"new"}))
        result = classify_method(make_signature("new"), config)
        assert isinstance(result, MethodTypeRule)
        assert result.method_type is MethodType.CONSTRUCTOR


class TestCalleeTypes:
    """Tests for callee_types()."""

    def test_init_could_be_either_kind(self) -> None:
        """A called init could be designated or convenience."""
        assert callee_types("initWithName") == frozenset(
            {MethodType.DESIGNATED_INIT, MethodType.CONVENIENCE_INIT}
        )

    def test_library_call_unknown(self) -> None:
        """Names without a convention are not judged."""
        assert callee_types("strlen") == frozenset()

    def test_give_callee(self) -> None:
        """Preposition names are give callees."""
        assert callee_types("priceFor") == frozenset({MethodType.GIVE})
