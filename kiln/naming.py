"""
Kiln Naming - Component name classification and case conversion

A component name is accepted in exactly one of three forms (snake, kebab,
upper camel) and the other representations needed by templates are derived
from it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from kiln.errors import InvalidComponentName


class CaseStyle(str, Enum):
    SNAKE = "snake"
    KEBAB = "kebab"
    UPPER_CAMEL = "upper_camel"


# Checked in this order; the first full match wins.
_PATTERNS: tuple[tuple[CaseStyle, re.Pattern[str]], ...] = (
    (CaseStyle.SNAKE, re.compile(r"[a-z0-9_]+")),
    (CaseStyle.UPPER_CAMEL, re.compile(r"(?:[A-Z][a-z0-9]*)+")),
    (CaseStyle.KEBAB, re.compile(r"[a-z0-9-]+")),
)

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATOR = re.compile(r"[_-]")


# ═══════════════════════════════════════════════════════════════════════════
# CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════════


def classify(value: str) -> CaseStyle | None:
    """
    Detect the naming convention of ``value``.

    A lowercase word without separators (``"widget"``) is reported as snake
    case since the snake pattern is tried before kebab.

    Returns:
        The matching CaseStyle, or None when no pattern matches
    """
    for style, pattern in _PATTERNS:
        if pattern.fullmatch(value):
            return style
    return None


def validate_component_name(value: str) -> str | None:
    """Prompt validator: return an error message, or None if ``value`` is usable."""
    if classify(value) is None:
        return (
            "Use snake_case, kebab-case or UpperCamelCase "
            "(letters, digits and a single kind of separator)"
        )
    if has_empty_segment(value):
        return "Separators must sit between words (no leading, trailing or doubled _ or -)"
    return None


def has_empty_segment(value: str) -> bool:
    """True for names like ``_``, ``a__b`` or ``-a`` whose class name would lose a word."""
    return "" in _SEPARATOR.split(value)


# ═══════════════════════════════════════════════════════════════════════════
# CONVERSIONS
# ═══════════════════════════════════════════════════════════════════════════


def _join_capitalized(parts: list[str]) -> str:
    return "".join(p[:1].upper() + p[1:] for p in parts)


def snake_to_kebab(value: str) -> str:
    return value.replace("_", "-")


def snake_to_upper_camel(value: str) -> str:
    return _join_capitalized(value.split("_"))


def kebab_to_upper_camel(value: str) -> str:
    return _join_capitalized(value.split("-"))


def upper_camel_to_kebab(value: str) -> str:
    """
    Convert UpperCamelCase to kebab-case.

    A hyphen is only inserted at a lowercase/digit to uppercase transition, so
    acronym runs stay together: ``HTTPServer`` becomes ``httpserver``.
    """
    return _CAMEL_BOUNDARY.sub(r"\1-\2", value).lower()


def _require_style(value: str) -> CaseStyle:
    style = classify(value)
    if style is None:
        raise InvalidComponentName(value)
    return style


def to_kebab(value: str) -> str:
    """Convert any accepted component name to kebab-case."""
    style = _require_style(value)
    if style is CaseStyle.SNAKE:
        return snake_to_kebab(value)
    if style is CaseStyle.UPPER_CAMEL:
        return upper_camel_to_kebab(value)
    return value


def to_upper_camel(value: str) -> str:
    """Convert any accepted component name to UpperCamelCase."""
    style = _require_style(value)
    if style is CaseStyle.SNAKE:
        return snake_to_upper_camel(value)
    if style is CaseStyle.KEBAB:
        return kebab_to_upper_camel(value)
    return value


# ═══════════════════════════════════════════════════════════════════════════
# COMPONENT NAME
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ComponentName:
    """An accepted component name and its derived representations."""

    raw: str
    style: CaseStyle
    kebab_case: str
    upper_camel_case: str

    @classmethod
    def parse(cls, raw: str) -> "ComponentName":
        """
        Classify ``raw`` and derive both template casings.

        Raises:
            InvalidComponentName: if ``raw`` matches none of the three forms,
                or has an empty segment between separators
        """
        style = _require_style(raw)
        if has_empty_segment(raw):
            raise InvalidComponentName(raw)
        return cls(
            raw=raw,
            style=style,
            kebab_case=to_kebab(raw),
            upper_camel_case=to_upper_camel(raw),
        )

    def template_content(self) -> dict[str, str]:
        """Variable bindings passed to every rendered template."""
        return {
            "componentName": self.kebab_case,
            "componentClassName": self.upper_camel_case,
        }

    def __str__(self) -> str:
        return self.raw
