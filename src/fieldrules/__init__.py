"""
fieldrules is a small declarative validation library: register rules (an accessor plus a checker) in a `RuleSet`
and validate objects against all of them at once.
"""

from fieldrules.checkers import (
    Checker,
    CheckerKind,
    custom,
    max_size,
    min_size,
    not_null,
    size,
    size_between,
    valid_values,
)
from fieldrules.config import RuleSetConfig
from fieldrules.errors import CheckerConfigurationError, ValidationError
from fieldrules.rule import Rule
from fieldrules.ruleset import RuleSet
from fieldrules.types import Accessor, Predicate
from fieldrules.utils import attribute, non_null_max_len, optional_attribute, render_value
