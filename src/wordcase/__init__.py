"""WORDCASE

Small string-casing helpers (camelCase, dot.case, kebab-case) built on a
shared word segmenter and a per-style join policy.
"""

from wordcase.convert import convert, to_camel_case, to_dot_case, to_kebab_case
from wordcase.styles import CaseStyle

__all__ = [
    "__version__",
    "CaseStyle",
    "convert",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
]
__version__ = "0.1.0"
