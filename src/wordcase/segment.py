"""Word segmentation for the case converters.

Two segmentation families are provided:

- Whitespace-driven (camel, dot): punctuation becomes a word break and the
  text is split on whitespace.
- Boundary-driven (kebab): punctuation is dropped and word breaks are inserted
  at lower/upper case and letter/digit transitions.

Only ASCII letters and digits count as word characters.
"""

import re

NON_WORD_OR_SPACE_PATTERN = re.compile(r"[^A-Za-z0-9 ]+")
NON_WORD_OR_UNDERSCORE_PATTERN = re.compile(r"[^A-Za-z0-9_]")

# Boundary passes run in this order over the whole string.
LOWER_UPPER_PATTERN = re.compile(r"([a-z0-9])([A-Z])")
LETTER_DIGIT_PATTERN = re.compile(r"([A-Za-z])([0-9])")
DIGIT_LETTER_PATTERN = re.compile(r"([0-9])([A-Za-z])")
BOUNDARY_PATTERNS = (LOWER_UPPER_PATTERN, LETTER_DIGIT_PATTERN, DIGIT_LETTER_PATTERN)


def split_words(text: str) -> list[str]:
    """Split text into words on whitespace and punctuation.

    Every run of characters that is not a letter, digit or space is replaced
    by a single space, so alphanumerics on either side of punctuation end up
    in separate words.

    Args:
        text: The text to segment.

    Returns:
        The words in order of appearance. Empty if the text has no letters
        or digits.
    """
    return NON_WORD_OR_SPACE_PATTERN.sub(" ", text.strip()).split()


def mark_boundaries(text: str, marker: str = "-") -> str:
    """Lowercase text and insert `marker` at word boundaries.

    Characters other than letters, digits and underscores are deleted (not
    turned into breaks). A marker is then inserted between a lowercase letter
    or digit and a following uppercase letter, between a letter and a
    following digit, and between a digit and a following letter. Underscores
    become markers last.

    Markers at either end of the result are stripped. Consecutive markers in
    the interior are kept, e.g. ``"_Special__Case_"`` gives
    ``"special--case"`` with ``"-"`` as marker.

    Args:
        text: The text to segment.
        marker: The separator to insert between words.

    Returns:
        The lowercased, marked text. Empty if the text has no letters or
        digits.
    """
    marked = NON_WORD_OR_UNDERSCORE_PATTERN.sub("", text.strip())
    for pattern in BOUNDARY_PATTERNS:
        marked = pattern.sub(lambda m: f"{m[1]}{marker}{m[2]}", marked)
    return marked.replace("_", marker).lower().strip(marker)
