"""
Case conversion for module and class names.

    process_specification  -> process-specification  (param case, file names)
    process_specification  -> Process Specification  (capital case, headings)
    processSpecification   -> ProcessSpecification   (pascal case, schema types)
"""

from __future__ import annotations

import re
from typing import List


_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_END = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> List[str]:
    """Split an identifier in any common casing into its words."""
    text = _LOWER_UPPER.sub(r"\1 \2", text)
    text = _ACRONYM_END.sub(r"\1 \2", text)
    return [word for word in _SEPARATORS.split(text) if word]


def param_case(text: str) -> str:
    return "-".join(word.lower() for word in split_words(text))


def capital_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in split_words(text))


def pascal_case(text: str) -> str:
    return "".join(word[:1].upper() + word[1:].lower() for word in split_words(text))
