"""Case style enumeration.

Each style is a join policy applied after segmentation. Styles can be given
to `wordcase.convert` as members or by name.
"""

from enum import Enum

from wordcase.errors import UnknownCaseStyleError


class CaseStyle(Enum):
    """Enumeration of supported case styles.

    Styles:
    - CAMEL: first word lowercased, following words capitalized, no separator.
    - DOT: all words lowercased, joined with ".".
    - KEBAB: words found by case/digit boundaries, lowercased, joined with "-".
    """

    CAMEL = "camel"
    DOT = "dot"
    KEBAB = "kebab"

    @property
    def separator(self) -> str:
        """Return the string placed between words for this style."""
        return _SEPARATORS[self]

    @classmethod
    def parse(cls, value: "CaseStyle | str") -> "CaseStyle":
        """Resolve a style member from a member or a style name.

        Names are matched case-insensitively against both member values and
        member names, ignoring surrounding whitespace.

        Args:
            value: A `CaseStyle` member or a style name such as "kebab".

        Returns:
            The matching `CaseStyle` member.

        Raises:
            UnknownCaseStyleError: If `value` does not name a known style.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for style in cls:
                if key in (style.value, style.name.lower()):
                    return style
        raise UnknownCaseStyleError(str(value), [style.value for style in cls])


_SEPARATORS = {
    CaseStyle.CAMEL: "",
    CaseStyle.DOT: ".",
    CaseStyle.KEBAB: "-",
}
