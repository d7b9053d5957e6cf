"""Configuration utilities for WORDCASE.

Defaults are read from the environment each time they are needed, so tests
and host applications can change them without reloading the package.
"""

import logging
import os

from wordcase.errors import UnknownCaseStyleError
from wordcase.styles import CaseStyle

DEFAULT_STYLE_ENV = "WORDCASE_DEFAULT_STYLE"
LOG_LEVEL_ENV = "WORDCASE_LOG_LEVEL"

FALLBACK_STYLE = CaseStyle.CAMEL
FALLBACK_LOG_LEVEL = logging.WARNING


class InvalidDefaultStyleError(UnknownCaseStyleError):
    """Raised when WORDCASE_DEFAULT_STYLE does not name a known case style."""

    def __init__(self, name: str) -> None:
        choices = [style.value for style in CaseStyle]
        super().__init__(
            name,
            choices,
            f"{DEFAULT_STYLE_ENV}={name!r} is not a known case style "
            f"(expected one of: {', '.join(choices)})",
        )


class InvalidLogLevelError(ValueError):
    """Raised when WORDCASE_LOG_LEVEL does not name a logging level."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{LOG_LEVEL_ENV}={name!r} is not a valid log level")
        self.name = name


def get_default_style() -> CaseStyle:
    """Get the case style used by `wordcase.convert` when none is given.

    Returns:
        The style named by `WORDCASE_DEFAULT_STYLE`, or `CaseStyle.CAMEL`
        if the variable is unset or empty.

    Raises:
        InvalidDefaultStyleError: If the variable names an unknown style.
    """
    if not (name := os.environ.get(DEFAULT_STYLE_ENV, "").strip()):
        return FALLBACK_STYLE
    try:
        return CaseStyle.parse(name)
    except UnknownCaseStyleError as e:
        raise InvalidDefaultStyleError(name) from e


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The numeric level named by `WORDCASE_LOG_LEVEL` (case-insensitive),
        or `logging.WARNING` if the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable is not a standard level name.
    """
    if not (name := os.environ.get(LOG_LEVEL_ENV, "").strip()):
        return FALLBACK_LOG_LEVEL
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise InvalidLogLevelError(name)
    return level
