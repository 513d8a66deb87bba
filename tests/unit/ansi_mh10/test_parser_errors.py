"""Unit tests for parser errors and resolved data identifier models."""

from __future__ import annotations

from src.ansi_mh10.core import errors
from src.ansi_mh10.core.errors import FATAL_CODES, ErrorCode, ParserError
from src.ansi_mh10.core.models import (
    UNRESOLVED,
    Category,
    ResolvedDataIdentifier,
    category_of,
)


class TestParserError:
    """Tests for ParserError and the error helpers."""

    def test_fatal_codes(self):
        """Only no-data, no-records and timeout errors are fatal."""
        assert FATAL_CODES == {3001, 3004, 3007}
        assert errors.no_data().is_fatal
        assert errors.no_records().is_fatal
        assert errors.validation_timeout("9N").is_fatal
        assert not errors.invalid_data_identifier("1A").is_fatal
        assert not errors.no_data_identifier().is_fatal
        assert not errors.pattern_mismatch("x").is_fatal

    def test_codes(self):
        """Each helper reports its stable code."""
        assert errors.no_data().code == 3001
        assert errors.invalid_data_identifier("1A").code == 3002
        assert errors.empty_data_identifier().code == 3002
        assert errors.invalid_envelope_format("header").code == 3003
        assert errors.no_records().code == 3004
        assert errors.invalid_value("1", "9N").code == 3005
        assert errors.value_evaluation_failed("9N").code == 3006
        assert errors.validation_timeout("9N").code == 3007
        assert errors.no_data_identifier().code == 3008
        assert errors.pattern_mismatch("1").code == 3100

    def test_messages_name_identifier_and_value(self):
        """Messages include the offending identifier and value."""
        assert errors.invalid_data_identifier("1A").message == "Invalid data identifier 1A."
        assert errors.invalid_value("123", "9N").message == (
            "The value 123 is invalid for data identifier 9N."
        )
        assert errors.pattern_mismatch("123").message == (
            "The value 123 does not match the required pattern."
        )
        assert "header" in errors.invalid_envelope_format("header").message

    def test_messages_without_value(self):
        """An empty value leaves no double space in the message."""
        assert errors.pattern_mismatch("").message == "The value does not match the required pattern."
        assert errors.invalid_data_identifier(None).message == "Invalid data identifier <unknown>."

    def test_from_code(self):
        """from_code formats the template and applies the fatal flag."""
        error = ParserError.from_code(ErrorCode.NO_RECORDS)
        assert error == ParserError(code=3004, message="No records were provided.", is_fatal=True)

    def test_to_dict(self):
        """to_dict produces a JSON-ready dictionary."""
        assert errors.no_data_identifier().to_dict() == {
            "code": 3008,
            "message": "Invalid field. No data identifier was found.",
            "is_fatal": False,
        }


class TestCategory:
    """Tests for Category and category_of."""

    def test_category_of_keys(self):
        """The category is the thousands part of the key."""
        assert category_of(4000) is Category.DATE
        assert category_of(14009) is Category.INDUSTRY_ASSIGNED_CODES
        assert category_of(26999) is Category.MUTUALLY_DEFINED

    def test_reserved_keys_are_category_zero(self):
        """Keys below 1000 are the special characters."""
        assert category_of(0) is Category.SPECIAL_CHARACTERS
        assert category_of(7) is Category.SPECIAL_CHARACTERS

    def test_unresolved_has_no_category(self):
        """The unresolved key has no category."""
        assert category_of(UNRESOLVED) is None


class TestResolvedDataIdentifier:
    """Tests for ResolvedDataIdentifier."""

    def test_from_error(self):
        """from_error builds an unresolved result with one error."""
        result = ResolvedDataIdentifier.from_error(errors.no_records(), 12)
        assert result.key == UNRESOLVED
        assert result.identifier == ""
        assert result.value == ""
        assert result.position == 12
        assert result.errors == [errors.no_records()]
        assert result.is_error
        assert result.is_fatal

    def test_wrap_keeps_inner_fields_and_errors(self):
        """wrap copies the inner result and appends the new error last."""
        inner = ResolvedDataIdentifier(
            key=14009,
            identifier="9N",
            value="123",
            position=2,
            title="PPN",
            description="IFA Pharmacy Product Number",
            errors=[errors.pattern_mismatch("123")],
        )
        result = ResolvedDataIdentifier.wrap(errors.invalid_value("123", "9N"), 2, inner)

        assert result.key == 14009
        assert result.title == "PPN"
        assert [e.code for e in result.errors] == [3100, 3005]
        assert [e.code for e in inner.errors] == [3100]

    def test_wrap_without_inner(self):
        """wrap with no inner result behaves like from_error."""
        result = ResolvedDataIdentifier.wrap(errors.no_data(), 3, None)
        assert result == ResolvedDataIdentifier.from_error(errors.no_data(), 3)

    def test_add_error_ignores_none(self):
        """add_error appends errors and ignores None."""
        result = ResolvedDataIdentifier(key=4000, identifier="D", value="1", position=1)
        result.add_error(None)
        assert not result.is_error
        result.add_error(errors.pattern_mismatch("1"))
        assert result.is_error
        assert not result.is_fatal

    def test_category_property(self):
        """The category follows from the key."""
        result = ResolvedDataIdentifier(key=4000, identifier="D", value="", position=1)
        assert result.category is Category.DATE

    def test_to_dict(self):
        """to_dict includes errors and the fatal flag."""
        result = ResolvedDataIdentifier.from_error(errors.no_data_identifier(), 0)
        data = result.to_dict()
        assert data["key"] == UNRESOLVED
        assert data["position"] == 0
        assert data["inverse_exponent"] == -1
        assert data["errors"][0]["code"] == 3008
        assert data["is_fatal"] is False

    def test_hashable(self):
        """Results can be hashed, and equal results hash equal."""
        first = ResolvedDataIdentifier.from_error(errors.no_data_identifier(), 0)
        second = ResolvedDataIdentifier.from_error(errors.no_data_identifier(), 0)

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_hash_stable_across_add_error(self):
        """Appending an error leaves the hash unchanged."""
        result = ResolvedDataIdentifier(key=4000, identifier="D", value="1", position=1)
        before = hash(result)
        result.add_error(errors.pattern_mismatch("1"))
        assert hash(result) == before
