from typing import Any

import pytest

from fieldrules import (
    Checker,
    CheckerConfigurationError,
    CheckerKind,
    custom,
    max_size,
    min_size,
    not_null,
    size,
    size_between,
    valid_values,
)


class TestCheckers:
    @pytest.mark.parametrize(
        ["checker", "value", "expected"],
        [
            pytest.param(not_null("id"), None, False, id="not null: None"),
            pytest.param(not_null("id"), 0, True, id="not null: falsy value"),
            pytest.param(not_null("id"), "", True, id="not null: empty string"),
            pytest.param(size("currency", 3), "AB", False, id="exact size: too short"),
            pytest.param(size("currency", 3), "ABC", True, id="exact size: fits"),
            pytest.param(size("currency", 3), "ABCD", False, id="exact size: too long"),
            pytest.param(size("currency", 3), None, True, id="exact size: None passes"),
            pytest.param(size("id", 3), 123, True, id="exact size: rendered int"),
            pytest.param(size_between("status", 2, 4), "A", False, id="between: below"),
            pytest.param(size_between("status", 2, 4), "AB", True, id="between: lower bound"),
            pytest.param(size_between("status", 2, 4), "ABCD", True, id="between: upper bound"),
            pytest.param(size_between("status", 2, 4), "ABCDE", False, id="between: above"),
            pytest.param(min_size("status", 2), "A", False, id="min: below"),
            pytest.param(min_size("status", 2), "AB", True, id="min: equal"),
            pytest.param(max_size("status", 3), "SBCx", False, id="max: above"),
            pytest.param(max_size("status", 3), "", True, id="max: empty"),
            pytest.param(max_size("status", 3), None, True, id="max: None passes"),
            pytest.param(valid_values("currency", ["CNY", "GBP"]), "CNY", True, id="valid values: allowed"),
            pytest.param(valid_values("currency", ["CNY", "GBP"]), "ABCD", False, id="valid values: not allowed"),
            pytest.param(valid_values("currency", ["CNY", "GBP"]), None, True, id="valid values: None passes"),
            pytest.param(valid_values("id", [1, 2]), 2, True, id="valid values: equality not identity"),
            pytest.param(custom("id", lambda value: value is not None and value > 0), 5, True, id="custom: ok"),
            pytest.param(custom("id", lambda value: value is not None and value > 0), None, False, id="custom: None"),
        ],
    )
    def test_predicate(self, checker: Checker, value: Any, expected: bool):
        assert checker(value) is expected

    @pytest.mark.parametrize(
        ["checker", "expected_message"],
        [
            pytest.param(not_null("id"), "id cannot be null", id="not null"),
            pytest.param(size("currency", 3), "currency size should be 3", id="exact size"),
            pytest.param(size_between("status", 2, 4), "status size should between 2 and 4", id="between"),
            pytest.param(size_between("status", 4, 4), "status size should be 4", id="between with equal bounds"),
            pytest.param(min_size("status", 2), "status size should >= 2", id="min"),
            pytest.param(max_size("status", 3), "status size should <= 3", id="max"),
            pytest.param(
                valid_values("currency", ["CNY", "GBP"]), "currency valid values are [CNY, GBP]", id="valid values"
            ),
            pytest.param(custom("id", bool), "id is invalid", id="custom"),
        ],
    )
    def test_error_message(self, checker: Checker, expected_message: str):
        assert checker.error_message == expected_message

    @pytest.mark.parametrize(
        ["kwargs", "expected_error"],
        [
            pytest.param(
                {"kind": CheckerKind.SIZE, "field_name": "status"},
                "invalid checker for field: status",
                id="size without bounds",
            ),
            pytest.param(
                {"kind": CheckerKind.SIZE, "field_name": "status", "min_size": 5, "max_size": 2},
                "invalid checker for field: status; min size 5 is greater than max size 2",
                id="min greater than max",
            ),
            pytest.param(
                {"kind": CheckerKind.SIZE, "field_name": "status", "max_size": -1},
                "max_size must not be negative but was -1",
                id="negative bound",
            ),
            pytest.param(
                {"kind": CheckerKind.CUSTOM, "field_name": "id"},
                "custom checker for field id needs a predicate",
                id="custom without predicate",
            ),
            pytest.param(
                {"kind": CheckerKind.VALID_VALUES, "field_name": "currency", "allowed_values": "CNY"},
                "allowed values must be a collection of values, not a single 'CNY'",
                id="single string as allowed values",
            ),
            pytest.param(
                {"kind": CheckerKind.NOT_NULL, "field_name": "id", "min_size": 3},
                "NOT_NULL checker for field id doesn't use min_size",
                id="not null with size bound",
            ),
            pytest.param(
                {
                    "kind": CheckerKind.VALID_VALUES,
                    "field_name": "currency",
                    "allowed_values": ["CNY"],
                    "predicate": bool,
                },
                "VALID_VALUES checker for field currency doesn't use predicate",
                id="valid values with predicate",
            ),
            pytest.param(
                {"kind": CheckerKind.SIZE, "field_name": "status", "max_size": 3, "allowed_values": ["A"]},
                "SIZE checker for field status doesn't use allowed_values",
                id="size with allowed values",
            ),
        ],
    )
    def test_illegal_configuration(self, kwargs: dict[str, Any], expected_error: str):
        with pytest.raises(CheckerConfigurationError) as error:
            Checker(**kwargs)
        assert str(error.value) == expected_error

    def test_illegal_configuration_from_factory(self):
        with pytest.raises(CheckerConfigurationError):
            min_size("status", -3)

    def test_allowed_values_are_copied(self):
        allowed = ["CNY", "GBP"]
        checker = valid_values("currency", allowed)
        allowed.append("EUR")
        assert checker("EUR") is False
        assert checker.allowed_values == ("CNY", "GBP")

    def test_checker_is_immutable_and_comparable(self):
        checker = size("currency", 3)
        assert checker == size("currency", 3)
        assert checker != size("currency", 4)
        with pytest.raises(AttributeError):
            checker.max_size = 5  # type:ignore[misc]

    def test_single_string_is_no_collection_of_valid_values(self):
        with pytest.raises(CheckerConfigurationError):
            valid_values("currency", "CNY")
        with pytest.raises(CheckerConfigurationError):
            valid_values("currency", b"CNY")

    def test_set_of_valid_values_has_stable_message(self):
        checker = valid_values("currency", {"GBP", "CNY", "EUR"})
        assert checker.allowed_values == ("CNY", "EUR", "GBP")
        assert checker.error_message == "currency valid values are [CNY, EUR, GBP]"
        assert checker("EUR") is True

    def test_set_of_unorderable_valid_values(self):
        checker = valid_values("code", {1, "A"})
        assert checker.allowed_values == ("A", 1)
        assert checker.allowed_values == valid_values("code", {"A", 1}).allowed_values

    @pytest.mark.parametrize(
        ["allowed", "value", "expected"],
        [
            pytest.param([1, 0], True, False, id="True is not 1"),
            pytest.param([1, 0], False, False, id="False is not 0"),
            pytest.param([1, 0], 1, True, id="1 is 1"),
            pytest.param([True], 1, False, id="1 is not True"),
            pytest.param([True, False], False, True, id="False is False"),
            pytest.param([1, 2], 2.0, True, id="numeric equality"),
        ],
    )
    def test_valid_values_keep_booleans_apart(self, allowed: list[Any], value: Any, expected: bool):
        assert valid_values("flag", allowed)(value) is expected
