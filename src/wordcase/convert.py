"""Case conversion operations.

Each public function validates its input, segments it into words and joins
the words according to one `CaseStyle`. `convert` selects the style at
runtime.
"""

import logging
from collections.abc import Callable
from typing import Any

from wordcase import config
from wordcase.errors import NotTextError
from wordcase.segment import mark_boundaries, split_words
from wordcase.styles import CaseStyle

logger = logging.getLogger(__name__)


def _require_text(value: Any) -> str:
    """Return `value` unchanged if it is a string, else raise NotTextError."""
    if not isinstance(value, str):
        raise NotTextError(value)
    return value


def to_camel_case(text: str) -> str:
    """Convert text to camelCase.

    The first word is lowercased, every following word is capitalized and the
    words are concatenated.

    Examples:
        >>> to_camel_case("  hello world  ")
        'helloWorld'
        >>> to_camel_case("123 numbers first")
        '123NumbersFirst'

    Raises:
        NotTextError: If `text` is not a string.
    """
    words = split_words(_require_text(text))
    result = "".join(
        word.lower() if i == 0 else word.capitalize() for i, word in enumerate(words)
    )
    logger.debug("camel case: %r -> %r", text, result)
    return result


def to_dot_case(text: str) -> str:
    """Convert text to dot.case.

    Examples:
        >>> to_dot_case("This_is a test!")
        'this.is.a.test'

    Raises:
        NotTextError: If `text` is not a string.
    """
    words = split_words(_require_text(text))
    result = CaseStyle.DOT.separator.join(word.lower() for word in words)
    logger.debug("dot case: %r -> %r", text, result)
    return result


def to_kebab_case(text: str) -> str:
    """Convert text to kebab-case.

    Unlike the other styles, word breaks come from case and letter/digit
    transitions and underscores; other punctuation and spaces are removed.
    Hyphens left at either end (e.g. from leading or trailing underscores)
    are stripped, but consecutive interior underscores keep one hyphen each:
    ``"  _Special__Case_  "`` becomes ``"special--case"``.

    Examples:
        >>> to_kebab_case("MyVariable2Name")
        'my-variable-2-name'
        >>> to_kebab_case("thisIs2023Now")
        'this-is-2023-now'

    Raises:
        NotTextError: If `text` is not a string.
    """
    result = mark_boundaries(_require_text(text), CaseStyle.KEBAB.separator)
    logger.debug("kebab case: %r -> %r", text, result)
    return result


CONVERTERS: dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.DOT: to_dot_case,
    CaseStyle.KEBAB: to_kebab_case,
}


def convert(text: str, style: CaseStyle | str | None = None) -> str:
    """Convert text to the given case style.

    Args:
        text: The text to convert.
        style: A `CaseStyle` member or style name ("camel", "dot", "kebab").
            Defaults to the style configured via `WORDCASE_DEFAULT_STYLE`.

    Returns:
        The converted text.

    Raises:
        NotTextError: If `text` is not a string. Checked before `style`.
        UnknownCaseStyleError: If `style` does not name a known style.
    """
    _require_text(text)
    resolved = config.get_default_style() if style is None else CaseStyle.parse(style)
    return CONVERTERS[resolved](text)
