"""Error definitions for case conversion."""

from typing import Any


class CaseConversionError(Exception):
    """Base class for all wordcase errors."""


class NotTextError(CaseConversionError, TypeError):
    """Raised when a conversion is given something other than a string."""

    def __init__(self, value: Any) -> None:
        super().__init__("Input must be a string")
        self.value_type = type(value)


class UnknownCaseStyleError(CaseConversionError, ValueError):
    """Raised when a name does not match any known case style."""

    def __init__(
        self, name: str, choices: list[str], message: str | None = None
    ) -> None:
        if message is None:
            message = (
                f"Unknown case style: {name!r} "
                f"(expected one of: {', '.join(choices)})"
            )
        super().__init__(message)
        self.name = name
        self.choices = choices
