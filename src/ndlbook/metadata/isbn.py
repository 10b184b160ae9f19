# ABOUTME: ISBN normalization and check-digit validation.
# ABOUTME: Used by scrapers to decide whether an identifier is something they can look up.

import re

_SEPARATORS_RE = re.compile(r"[\s-]")


def normalize_isbn(value: str) -> str:
    """Strip hyphens and whitespace and upper-case a trailing x."""
    return _SEPARATORS_RE.sub("", value).upper()


def _is_valid_isbn10(isbn: str) -> bool:
    if not re.fullmatch(r"\d{9}[\dX]", isbn):
        return False
    total = 0
    for i, char in enumerate(isbn):
        digit = 10 if char == "X" else int(char)
        total += digit * (10 - i)
    return total % 11 == 0


def _is_valid_isbn13(isbn: str) -> bool:
    if not re.fullmatch(r"\d{13}", isbn):
        return False
    total = sum(int(char) * (1 if i % 2 == 0 else 3) for i, char in enumerate(isbn))
    return total % 10 == 0


def is_isbn(value: str) -> bool:
    """Return True if value is a valid ISBN-10 or ISBN-13.

    Hyphens and whitespace are ignored. The check digit must match.
    """
    isbn = normalize_isbn(value)
    if len(isbn) == 10:
        return _is_valid_isbn10(isbn)
    if len(isbn) == 13:
        return _is_valid_isbn13(isbn)
    return False
