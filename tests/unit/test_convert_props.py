"""Hypothesis property tests for the case converters.

Properties:

- **Purity**: the same input always gives the same output.
- **Character class**: camelCase output holds only ASCII letters and digits;
  dot.case and kebab-case output holds only lowercase ASCII letters, digits
  and the style separator, never starting or ending with the separator.
- **No doubled dots**: dot.case never emits two separators in a row.
- **Idempotence**: dot.case output is a fixed point of dot.case.
- **Total over text**: no string input raises.
"""

from __future__ import annotations

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wordcase.convert import to_camel_case, to_dot_case, to_kebab_case

pytestmark = [pytest.mark.property]

# pylint: disable=magic-value-comparison

# Mostly ASCII text with separators, plus arbitrary unicode for totality.
ascii_text = st.text(alphabet="abcXYZ019 _-.!@\t\n", max_size=40)
any_text = st.one_of(ascii_text, st.text(max_size=40))

CAMEL_PATTERN = re.compile(r"^[A-Za-z0-9]*$")
DOT_PATTERN = re.compile(r"^(?:[a-z0-9]+(?:\.[a-z0-9]+)*)?$")
KEBAB_PATTERN = re.compile(r"^(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?)?$")


@given(any_text)
def test_deterministic(text):
    """Repeated calls give identical results."""
    for func in (to_camel_case, to_dot_case, to_kebab_case):
        assert func(text) == func(text)


@given(any_text)
def test_camel_case_character_class(text):
    """camelCase output is letters and digits only."""
    assert CAMEL_PATTERN.match(to_camel_case(text))


@given(any_text)
def test_camel_case_starts_lowercase(text):
    """The first character of camelCase output is never uppercase."""
    result = to_camel_case(text)
    assert not result[:1].isupper()


@given(any_text)
def test_dot_case_character_class(text):
    """dot.case output is lowercase words joined by single dots."""
    assert DOT_PATTERN.match(to_dot_case(text))


@given(any_text)
def test_kebab_case_character_class(text):
    """kebab-case output has no uppercase and no outer hyphens."""
    assert KEBAB_PATTERN.match(to_kebab_case(text))


@given(any_text)
def test_dot_case_idempotent(text):
    """Applying dot.case to its own output changes nothing."""
    once = to_dot_case(text)
    assert to_dot_case(once) == once


@given(st.text(alphabet=" \t\n!@#$%^&*()", max_size=20))
def test_no_words_is_empty(text):
    """Text without letters or digits always converts to an empty string."""
    assert to_camel_case(text) == ""
    assert to_dot_case(text) == ""
    assert to_kebab_case(text) == ""
