"""Numeric text normalization."""

from __future__ import annotations


def normalize_numeric(text: str) -> str:
    """Drop everything from the first decimal point on.

    Tables exported from spreadsheets often spell integers as ``"12.0"``; the
    fractional part is truncated, never rounded (``"3.7"`` -> ``"3"``).
    """
    index = text.find(".")
    if index > -1:
        return text[:index]
    return text
