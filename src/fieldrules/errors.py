"""
Contains the exceptions raised by the rule framework.
"""


class ValidationError(RuntimeError):
    """
    Raised by `RuleSet.validate` if at least one rule failed.
    The message contains the messages of all failed rules (in the order in which the rules were added) joined by the
    delimiter of the rule set.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CheckerConfigurationError(ValueError):
    """
    Raised when a checker is configured in a way that can't be evaluated, e.g. a size checker without any bound.
    This is a programming error, not a data error, hence it is raised upon construction of the checker.
    """
