"""
Logging of the fieldrules package.
A RuleSet reports the outcome of each `validate` call ("2 out of 5 rules failed for Order") to the logger bound in the
`logger` ContextVar. Bind your own logger per request (or per batch) with `initialize_logger`; unbound, the outcome
goes to the "fieldrules-unbound" logger. Details on single rules and checkers are logged to the module logger
`fieldrules.types.validation_logger` whose level can be set along with binding the logger.
"""
import logging
from contextvars import ContextVar
from typing import Callable, Optional

from fieldrules.types import validation_logger

logger: ContextVar[logging.Logger] = ContextVar("logger", default=logging.getLogger("fieldrules-unbound"))


def initialize_logger(
    context_specific_logger: logging.Logger, detail_level: Optional[int] = None
) -> Callable[[], None]:
    """
    Binds `context_specific_logger` for the outcome logs of the current context. If `detail_level` is given, the level
    of the rule/checker detail logger is set as well (e.g. logging.DEBUG to see every failed rule).
    Returns a teardown function which restores the previously bound logger and the previous detail level.
    """
    token = logger.set(context_specific_logger)
    previous_detail_level = validation_logger.level
    if detail_level is not None:
        validation_logger.setLevel(detail_level)

    def clear_logger():
        """
        Restore the logger (and detail level) which were in place before `initialize_logger` was called.
        """
        logger.reset(token)
        validation_logger.setLevel(previous_detail_level)

    return clear_logger
