"""
Contains the Rule, the atomic unit of validation: it extracts a value from an object and checks it.
"""
from typing import Any, Callable, Generic, Optional

import attrs

from fieldrules.config import DEFAULT_CONFIG, RuleSetConfig
from fieldrules.types import AnyPredicate, ObjectT, validation_logger
from fieldrules.utils import render_value


def _is_callable(_instance: "Rule", attribute: attrs.Attribute, value: Any) -> None:
    if not callable(value):
        raise TypeError(f"The {attribute.name} of a rule must be callable but was {value!r}")


@attrs.frozen
class Rule(Generic[ObjectT]):
    """
    A rule pairs an accessor, which extracts a value from the validated object, with a predicate on that value and
    an error message which is used if the predicate doesn't hold.
    The value type is hidden inside the rule, so one rule set can hold rules on values of different types.
    """

    accessor: Callable[[ObjectT], Any] = attrs.field(validator=_is_callable)
    predicate: AnyPredicate = attrs.field(validator=_is_callable)
    error_message: str = attrs.field(validator=attrs.validators.instance_of(str))

    def evaluate(self, instance: ObjectT, config: RuleSetConfig = DEFAULT_CONFIG) -> Optional[str]:
        """
        Returns None if the rule holds for the instance. Otherwise the error message followed by the rendered value,
        e.g. "status size should be 3[SBCx]".
        Exceptions raised by the accessor are not caught; they are not considered a failed rule.
        """
        value = self.accessor(instance)
        if self.predicate(value):
            return None
        message = f"{self.error_message}{config.value_prefix}{render_value(value)}{config.value_suffix}"
        validation_logger.debug("Rule failed: %s", message)
        return message
