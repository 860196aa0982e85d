from __future__ import annotations


class CronParseError(ValueError):
    """Base class for all errors raised while parsing cron text."""


class CronSyntaxError(CronParseError):
    """Raised when the input does not match the shape of the cron grammar."""

    def __init__(self, reason: str, text: str, position: int):
        self.reason = reason
        self.text = text
        self.position = position
        super().__init__(f"{reason} at position {position}: {text!r}")


class CronValidationError(CronParseError):
    """
    Raised when a field is grammatically well formed but violates a bound, the
    ordering of a range, the arity of a list or the stepping rule.
    """


class CrontabLineError(CronParseError):
    """Raised by the crontab parser when one of the lines cannot be parsed."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Error parsing line {line_number} ({line!r}): {reason}")
