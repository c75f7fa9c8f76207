"""
Exceptions raised while parsing cron expressions.

Every failure carries the exact fragment of input that was rejected so
callers can point at it. All of them derive from ValueError.
"""


class CronExpressionError(ValueError):
    """Base class for every cron expression parsing failure."""

    kind = "cron_expression_error"
    prefix = "Invalid cron expression"

    def __init__(self, fragment: str, message: str = None):
        self.fragment = fragment
        if message is None:
            message = f"{self.prefix}: {fragment}"
        super().__init__(message)

    def to_dict(self):
        return {"error": self.kind, "fragment": self.fragment, "message": str(self)}


class MalformedExpression(CronExpressionError):
    """Fewer than five schedule fields plus a command."""

    kind = "malformed_expression"

    def __init__(self, fragment: str):
        super().__init__(
            fragment,
            "Invalid cron expression: must have at least 6 fields "
            "(5 time fields + command)",
        )


class EmptyCommand(CronExpressionError):
    kind = "empty_command"

    def __init__(self, fragment: str):
        super().__init__(fragment, "Invalid cron expression: command cannot be empty")


class InvalidStep(CronExpressionError):
    """Step divisor missing, non-numeric or not positive."""

    kind = "invalid_step"
    prefix = "Invalid step value"


class InvalidRange(CronExpressionError):
    """Range or step base with a bad bound or reversed order."""

    kind = "invalid_range"
    prefix = "Invalid range"


class ValueOutOfBounds(CronExpressionError):
    kind = "value_out_of_bounds"
    prefix = "Value out of bounds"
