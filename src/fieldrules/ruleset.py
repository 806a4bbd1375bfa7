"""
Here is the main stuff. The RuleSet bundles several rules and validates objects against all of them.
"""
from typing import Any, Callable, Generic, Iterator, Optional, Self

from fieldrules.checkers import Checker
from fieldrules.config import DEFAULT_CONFIG, RuleSetConfig
from fieldrules.errors import ValidationError
from fieldrules.logging import logger
from fieldrules.rule import Rule
from fieldrules.types import AnyPredicate, ObjectT, validation_logger


class RuleSet(Generic[ObjectT]):
    """
    An ordered collection of rules for objects of one type. Rules can only be added, never removed, and they are
    always evaluated in the order in which they were added.
    E.g.:
    ```
    rule_set = (
        RuleSet[Order]()
        .add_rule(lambda order: order.id, not_null("id"))
        .add_rule(lambda order: order.currency, size("currency", 3))
    )
    rule_set.validate(order)  # raises a ValidationError if any rule fails
    ```
    Once all rules are added, a rule set can be used by several threads at once because validating doesn't change
    it. Adding rules while another thread validates is not supported.
    """

    def __init__(self, config: Optional[RuleSetConfig] = None):
        self.config: RuleSetConfig = config if config is not None else DEFAULT_CONFIG
        self._rules: list[Rule[ObjectT]] = []

    def add_rule(
        self,
        accessor: Callable[[ObjectT], Any],
        checker: Checker | AnyPredicate,
        error_message: Optional[str] = None,
    ) -> Self:
        """
        Register a new rule and return the rule set itself to allow chaining.
        The second argument is either a `Checker`, then its default error message is used unless you provide one,
        or a plain predicate, then you have to provide the error message.
        """
        if error_message is None:
            if not isinstance(checker, Checker):
                raise TypeError("An error message is required if the rule is defined by a plain predicate")
            error_message = checker.error_message
        rule = Rule(accessor, checker, error_message)
        self._rules.append(rule)
        validation_logger.debug("Registered rule #%i: %s", len(self._rules), error_message)
        return self

    def add_rules(self, *rules: tuple[Callable[[ObjectT], Any], Checker]) -> Self:
        """
        Register several (accessor, checker) pairs in the given order.
        """
        for accessor, checker in rules:
            self.add_rule(accessor, checker)
        return self

    def _failures(self, instance: ObjectT) -> list[str]:
        """
        Evaluates every rule (no short circuit) and returns the messages of the failed ones in rule order.
        """
        failures: list[str] = []
        for rule in self._rules:
            failure = rule.evaluate(instance, self.config)
            if failure is not None:
                failures.append(failure)
        return failures

    def validate(self, instance: ObjectT) -> None:
        """
        Checks the instance against all rules. If at least one rule fails, a ValidationError is raised which contains
        the messages of all failed rules. Returns None otherwise.
        Exceptions raised by an accessor propagate unchanged.
        """
        failures = self._failures(instance)
        if len(failures) > 0:
            logger.get().info(
                "%i out of %i rules failed for %s", len(failures), len(self._rules), instance.__class__.__name__
            )
            raise ValidationError(self.config.message_delimiter.join(failures))
        logger.get().debug("All %i rules passed for %s", len(self._rules), instance.__class__.__name__)

    def is_valid(self, instance: ObjectT) -> bool:
        """
        True iff `validate` doesn't raise a ValidationError for this instance.
        """
        try:
            self.validate(instance)
        except ValidationError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule[ObjectT]]:
        return iter(tuple(self._rules))

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rules)"
