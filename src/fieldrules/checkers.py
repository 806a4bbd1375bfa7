"""
Checkers are reusable predicates which know how to describe their own failure.
There is a closed set of checker kinds; use the factory functions of this module to create them.
"""
from enum import StrEnum
from typing import Any, Iterable, Optional

import attrs

from fieldrules.errors import CheckerConfigurationError
from fieldrules.types import AnyPredicate, validation_logger
from fieldrules.utils import render_value


class CheckerKind(StrEnum):
    """
    The kinds of checkers. Every kind but NOT_NULL and CUSTOM lets absent (None) values pass, so that a field can be
    optional and still be constrained in shape if it is present.
    """

    NOT_NULL = "NOT_NULL"
    SIZE = "SIZE"
    VALID_VALUES = "VALID_VALUES"
    CUSTOM = "CUSTOM"


def _optional_non_negative_int(_instance: "Checker", attribute: attrs.Attribute, value: Optional[int]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise CheckerConfigurationError(f"{attribute.name} must be an int but was {value!r}")
    if value < 0:
        raise CheckerConfigurationError(f"{attribute.name} must not be negative but was {value}")


def _allowed_values_tuple(values: Iterable[Any]) -> tuple[Any, ...]:
    """
    Copies the allowed values into a tuple. Sets are sorted so that the default message doesn't depend on hashing.
    """
    if isinstance(values, (str, bytes)):
        raise CheckerConfigurationError(f"allowed values must be a collection of values, not a single {values!r}")
    if isinstance(values, (set, frozenset)):
        try:
            return tuple(sorted(values))
        except TypeError:
            return tuple(sorted(values, key=repr))
    return tuple(values)


def _same_value(allowed: Any, value: Any) -> bool:
    # bool is a subclass of int but True must not be a valid value for an allowed 1
    return allowed == value and isinstance(allowed, bool) == isinstance(value, bool)


@attrs.frozen(kw_only=True)
class Checker:
    """
    A predicate on a single value plus the configuration it was built from. The checker doesn't extract the value
    itself; the field name is only used for the default error message.
    Instances are immutable and can be shared between several rule sets.
    """

    kind: CheckerKind = attrs.field(validator=attrs.validators.instance_of(CheckerKind))
    field_name: str = attrs.field(validator=attrs.validators.instance_of(str))
    min_size: Optional[int] = attrs.field(default=None, validator=_optional_non_negative_int)
    max_size: Optional[int] = attrs.field(default=None, validator=_optional_non_negative_int)
    allowed_values: tuple[Any, ...] = attrs.field(default=(), converter=_allowed_values_tuple)
    predicate: Optional[AnyPredicate] = attrs.field(default=None)

    def _unexpected_settings(self) -> list[str]:
        """
        Names of the settings which are set although the kind of this checker doesn't use them.
        """
        used_settings: dict[CheckerKind, set[str]] = {
            CheckerKind.NOT_NULL: set(),
            CheckerKind.SIZE: {"min_size", "max_size"},
            CheckerKind.VALID_VALUES: {"allowed_values"},
            CheckerKind.CUSTOM: {"predicate"},
        }
        configured = {
            "min_size": self.min_size is not None,
            "max_size": self.max_size is not None,
            "allowed_values": len(self.allowed_values) > 0,
            "predicate": self.predicate is not None,
        }
        return [name for name, is_set in configured.items() if is_set and name not in used_settings[self.kind]]

    def __attrs_post_init__(self):
        unexpected_settings = self._unexpected_settings()
        if unexpected_settings:
            raise CheckerConfigurationError(
                f"{self.kind} checker for field {self.field_name} doesn't use {', '.join(unexpected_settings)}"
            )
        match self.kind:
            case CheckerKind.SIZE:
                if self.min_size is None and self.max_size is None:
                    raise CheckerConfigurationError(f"invalid checker for field: {self.field_name}")
                if self.min_size is not None and self.max_size is not None and self.min_size > self.max_size:
                    raise CheckerConfigurationError(
                        f"invalid checker for field: {self.field_name}; "
                        f"min size {self.min_size} is greater than max size {self.max_size}"
                    )
            case CheckerKind.CUSTOM:
                if not callable(self.predicate):
                    raise CheckerConfigurationError(f"custom checker for field {self.field_name} needs a predicate")
            case CheckerKind.NOT_NULL | CheckerKind.VALID_VALUES:
                pass
        validation_logger.debug("Created checker: %r", self)

    def __call__(self, value: Any) -> bool:
        """
        Returns True iff the value passes this checker.
        """
        match self.kind:
            case CheckerKind.NOT_NULL:
                return value is not None
            case CheckerKind.SIZE:
                if value is None:
                    return True
                size = len(render_value(value))
                if self.min_size is not None and size < self.min_size:
                    return False
                if self.max_size is not None and size > self.max_size:
                    return False
                return True
            case CheckerKind.VALID_VALUES:
                return value is None or any(_same_value(allowed, value) for allowed in self.allowed_values)
            case CheckerKind.CUSTOM:
                assert self.predicate is not None
                return bool(self.predicate(value))
        raise AssertionError(f"Unhandled checker kind {self.kind}")

    @property
    def error_message(self) -> str:
        """
        The default error message of this checker, e.g. "currency size should be 3".
        """
        match self.kind:
            case CheckerKind.NOT_NULL:
                return f"{self.field_name} cannot be null"
            case CheckerKind.SIZE:
                if self.min_size is not None and self.max_size is not None:
                    if self.min_size == self.max_size:
                        return f"{self.field_name} size should be {self.min_size}"
                    return f"{self.field_name} size should between {self.min_size} and {self.max_size}"
                if self.min_size is not None:
                    return f"{self.field_name} size should >= {self.min_size}"
                return f"{self.field_name} size should <= {self.max_size}"
            case CheckerKind.VALID_VALUES:
                return f"{self.field_name} valid values are {render_value(list(self.allowed_values))}"
            case CheckerKind.CUSTOM:
                return f"{self.field_name} is invalid"
        raise AssertionError(f"Unhandled checker kind {self.kind}")


def not_null(field_name: str) -> Checker:
    """the value must not be None"""
    return Checker(kind=CheckerKind.NOT_NULL, field_name=field_name)


def size(field_name: str, exact_size: int) -> Checker:
    """the rendered value must have exactly `exact_size` characters (None passes)"""
    return Checker(kind=CheckerKind.SIZE, field_name=field_name, min_size=exact_size, max_size=exact_size)


def min_size(field_name: str, minimum: int) -> Checker:
    """the rendered value must have at least `minimum` characters (None passes)"""
    return Checker(kind=CheckerKind.SIZE, field_name=field_name, min_size=minimum)


def max_size(field_name: str, maximum: int) -> Checker:
    """the rendered value must have at most `maximum` characters (None passes)"""
    return Checker(kind=CheckerKind.SIZE, field_name=field_name, max_size=maximum)


def size_between(field_name: str, minimum: int, maximum: int) -> Checker:
    """the length of the rendered value must be in [minimum, maximum] (None passes)"""
    return Checker(kind=CheckerKind.SIZE, field_name=field_name, min_size=minimum, max_size=maximum)


def valid_values(field_name: str, allowed_values: Iterable[Any]) -> Checker:
    """
    The value must equal one of `allowed_values` (None passes).
    The allowed values are copied, so changing the iterable afterwards doesn't affect the checker. Pass a collection;
    a single str is rejected instead of being split into characters. Sets are listed sorted in the error message.
    Booleans only match booleans, so `valid_values("flag", [1, 0])` doesn't accept True or False.
    """
    return Checker(kind=CheckerKind.VALID_VALUES, field_name=field_name, allowed_values=allowed_values)


def custom(field_name: str, predicate: AnyPredicate) -> Checker:
    """
    Wraps an arbitrary predicate. The default message is "<field_name> is invalid".
    The predicate has to be a pure function of the value and decides on its own how to treat None.
    """
    return Checker(kind=CheckerKind.CUSTOM, field_name=field_name, predicate=predicate)
