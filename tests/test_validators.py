"""
Tests for hash_schema leaf validators.
"""

import pytest

from hash_schema import (
    CLEAN,
    VOID,
    Boolean,
    Enum,
    Hash,
    Message,
    Number,
    Optional,
    Schema,
    String,
)
from hash_schema.types import CLEAN as TYPES_CLEAN

TESTERS = ["abc123", 123, 1.5, True, False, None, VOID, [], {}]


def others(accepted):
    return [tester for tester in TESTERS if not accepted(tester)]


class TestString:
    def test_passes_for_string(self):
        assert String().validate("abc123!@#$%^&*()_=-+") is CLEAN
        assert String().validate("") is CLEAN

    def test_fails_for_other_types(self):
        for tester in others(lambda x: isinstance(x, str)):
            assert isinstance(String().validate(tester), Message)

    def test_message(self):
        assert String().validate(5) == Message("Expected String but got 5")

    def test_missing_value_message(self):
        assert String().validate(VOID) == Message("Expected String but got Nothing")

    def test_describe(self):
        assert String().describe() == "String"


class TestNumber:
    def test_passes_for_numbers(self):
        assert Number().validate(1234567890) is CLEAN
        assert Number().validate(3.14) is CLEAN
        assert Number().validate(-0) is CLEAN

    def test_fails_for_booleans(self):
        assert Number().validate(True) == Message("Expected Number but got true")
        assert Number().validate(False) == Message("Expected Number but got false")

    def test_fails_for_other_types(self):
        for tester in ["1", None, VOID, [], {}]:
            assert isinstance(Number().validate(tester), Message)

    def test_describe(self):
        assert Number().describe() == "Number"


class TestBoolean:
    def test_passes_for_booleans(self):
        assert Boolean().validate(True) is CLEAN
        assert Boolean().validate(False) is CLEAN

    def test_fails_for_other_types(self):
        for tester in others(lambda x: isinstance(x, bool)):
            assert isinstance(Boolean().validate(tester), Message)

    def test_fails_for_truthy_number(self):
        assert Boolean().validate(1) == Message("Expected Boolean but got 1")


class TestOptional:
    def test_passes_for_void(self):
        assert Optional().validate(VOID) is CLEAN
        assert Optional(1).validate(VOID) is CLEAN
        assert Optional(String()).validate(VOID) is CLEAN

    def test_bare_accepts_none(self):
        assert Optional().validate(None) is CLEAN
        assert Optional().validate(0) == Message("Expected null but got 0")

    def test_literal_exact_value(self):
        assert Optional(1).validate(1) is CLEAN

    def test_literal_different_value(self):
        assert Optional(1).validate(2) == Message("Expected 1 but got 2")

    def test_literal_does_not_match_boolean(self):
        assert isinstance(Optional(1).validate(True), Message)

    def test_delegates_to_inner_schema(self):
        calls = []

        class Recording(Schema):
            def validate(self, data):
                calls.append(data)
                return CLEAN

        assert Optional(Recording()).validate(1) is CLEAN
        assert calls == [1]

    def test_inner_schema_failure(self):
        assert Optional(String()).validate(1) == Message(
            "Expected String but got 1"
        )

    def test_describe_default_label(self):
        assert Optional().describe() == "Optional"


class TestEnum:
    @pytest.fixture
    def enum(self):
        return Enum(1, "a", True)

    @pytest.mark.parametrize("value", [1, "a", True])
    def test_passes_for_members(self, enum, value):
        assert enum.validate(value) is CLEAN

    @pytest.mark.parametrize("value", [2, "b", False, None, VOID])
    def test_fails_for_other_values(self, enum, value):
        assert isinstance(enum.validate(value), Message)

    def test_message(self, enum):
        assert enum.validate(2) == Message('Expected 1, "a" or true but got 2')

    def test_describe_preserves_order(self):
        assert Enum("z", "a").describe() == '"z" or "a"'

    def test_describe_single_value(self):
        assert Enum("only").describe() == '"only"'

    def test_requires_values(self):
        with pytest.raises(ValueError):
            Enum()


class TestImmutability:
    def test_validators_are_frozen(self):
        schema = Optional(1)
        with pytest.raises(AttributeError):
            schema.inner = 2

    def test_hash_fields_read_only(self):
        schema = Hash(x=Number())
        with pytest.raises(TypeError):
            schema.fields["y"] = Number()

    def test_clean_is_shared(self):
        assert CLEAN is TYPES_CLEAN
