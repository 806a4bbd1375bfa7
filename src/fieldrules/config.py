"""
This module provides a class to hold configuration values for a `RuleSet`.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class RuleSetConfig(BaseModel):
    """
    Settings that change how a `RuleSet` renders its failure messages.
    The defaults produce messages like "status size should be 3[SBCx], id cannot be null[null]".
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    message_delimiter: str = ", "
    """
    Joins the messages of all failed rules into the message of the ValidationError.
    """

    value_prefix: str = "["
    """
    Placed between the error message of a failed rule and the rendered value that made the rule fail.
    """

    value_suffix: str = "]"
    """
    Placed after the rendered value that made a rule fail.
    """

    @field_validator("message_delimiter")
    @staticmethod
    def validate_delimiter_not_empty(value: str) -> str:
        """
        Ensure that the messages of several failed rules stay distinguishable.
        """
        if not value:
            raise ValueError("message_delimiter must not be empty")
        return value


DEFAULT_CONFIG = RuleSetConfig()
