"""
Text splitting helpers for puzzle-style input.

Everything here is a thin wrapper around str.split; the only rule worth
knowing is that empty items are dropped unless noted otherwise.
"""

from __future__ import annotations

import re

from grid_types import InputError

__all__ = [
    "as_single_lines",
    "as_integers",
    "as_doublespaced_paragraphs",
    "as_doublespaced_integers",
    "as_comma_separated_integers",
    "delimited_by_spaces",
    "delimited_by_colons",
]


def _to_int(item: str, context: str) -> int:
    try:
        return int(item)
    except ValueError as err:
        raise InputError(
            f"Expected an integer, got '{item}'\n"
            f"  While reading: {context}"
        ) from err


def as_single_lines(multiline_text: str) -> list[str]:
    """Split text into lines, dropping empty ones."""
    return [line for line in multiline_text.split("\n") if line]


def as_integers(multiline_text: str) -> list[int]:
    """One integer per non-empty line."""
    return [_to_int(line, "one integer per line") for line in as_single_lines(multiline_text)]


def as_doublespaced_paragraphs(multiline_text: str) -> list[str]:
    """Split on blank lines. Empty paragraphs are kept."""
    return multiline_text.split("\n\n")


def as_doublespaced_integers(multiline_text: str) -> list[list[int]]:
    """Paragraphs of one-integer-per-line blocks."""
    return [
        [_to_int(line, f"paragraph {i}") for line in as_single_lines(paragraph)]
        for i, paragraph in enumerate(as_doublespaced_paragraphs(multiline_text))
    ]


def as_comma_separated_integers(text: str) -> list[int]:
    """Parse "1, 2,3" style lists."""
    return [
        _to_int(digits.strip(), "comma separated integers")
        for digits in text.strip().split(",")
        if digits
    ]


def delimited_by_spaces(text: str) -> list[str]:
    return [item for item in re.split(r"\s+", text) if item]


def delimited_by_colons(text: str) -> list[str]:
    return text.split(":")
