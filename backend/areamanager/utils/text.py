"""Text helpers — numeric literal extraction and identifier keys. No engine imports."""

from __future__ import annotations

import re

# Unsigned decimal literal; a leading '-' is treated as a separator ("2-20.0")
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_IDENTIFIER_RE = re.compile(r"^([A-Za-z]*)(\d*)")

# Sorts identifiers without a number after every numbered one
NO_NUMBER = 2**31 - 1


def numbers_in(text: str | None) -> list[str]:
    """All numeric literals in ``text``, in order."""
    if not text or not text.strip():
        return []
    return _NUMBER_RE.findall(text)


def last_number(text: str | None) -> str:
    found = numbers_in(text)
    return found[-1] if found else ""


def all_numbers(text: str | None) -> str:
    """Every numeric literal joined by single spaces."""
    return " ".join(numbers_in(text))


def parse_float(value: str | None, default: float | None = 0.0) -> float | None:
    """Invariant-culture float parse with a fallback instead of an exception."""
    try:
        return float((value or "").strip())
    except ValueError:
        return default


def identifier_prefix(identifier: str | None) -> str:
    """Leading letters, upper-cased ("ld12" → "LD")."""
    match = _IDENTIFIER_RE.match((identifier or "").strip())
    return match.group(1).upper() if match else ""


def identifier_number(identifier: str | None) -> int:
    """Digits directly after the letter prefix, or ``NO_NUMBER``."""
    match = _IDENTIFIER_RE.match((identifier or "").strip())
    if not match or not match.group(2):
        return NO_NUMBER
    return int(match.group(2))


def identifier_sort_key(identifier: str | None) -> tuple[str, int, str]:
    """Prefix, then number, then case-insensitive text: W2 < W10 < WX."""
    text = (identifier or "").strip()
    return (identifier_prefix(text), identifier_number(text), text.upper())


def format_area(value: float) -> str:
    """Fixed-point, three decimals, locale independent."""
    return f"{value:.3f}"


def format_length(value: float) -> str:
    return f"{value:.1f}"
