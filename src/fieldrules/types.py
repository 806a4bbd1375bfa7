"""
Contains the types used in the rule framework
"""
import logging
from typing import Any, Callable, TypeAlias, TypeVar

validation_logger = logging.getLogger(__name__)
ObjectT = TypeVar("ObjectT")  #: the type of the objects a rule set validates
ValueT = TypeVar("ValueT")  #: the type of a single value extracted from such an object
Accessor: TypeAlias = Callable[[ObjectT], ValueT]
Predicate: TypeAlias = Callable[[ValueT], bool]
AnyPredicate: TypeAlias = Callable[[Any], bool]
