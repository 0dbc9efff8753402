"""Predefined sample network used by ``--sample`` and the shell's load option."""

from __future__ import annotations

SAMPLE_PEOPLE: tuple[str, ...] = ("Alice", "Bob", "Carol", "Dave", "Eve", "Frank")

SAMPLE_FRIENDSHIPS: tuple[tuple[str, str], ...] = (
    ("Alice", "Bob"),
    ("Alice", "Carol"),
    ("Bob", "Dave"),
    ("Carol", "Eve"),
    ("Eve", "Frank"),
    ("Bob", "Carol"),
    ("Dave", "Frank"),
)
