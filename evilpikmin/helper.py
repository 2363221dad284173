"""Formatting helpers for debug output."""

from __future__ import annotations

from typing import Iterable

from evilpikmin.collision_grid import cell_row_col


def format_set(values: Iterable[int]) -> str:
    """List a set of numbers in ascending order, or say it is empty."""
    ordered = sorted(values)
    if not ordered:
        return "Empty Set"
    return "".join(f"{n}, " for n in ordered)


def format_cell_ids(ids: Iterable[int]) -> str:
    """List cell ids as ``(row, col)`` pairs in ascending id order."""
    return "".join("({}, {}), ".format(*cell_row_col(cell)) for cell in sorted(ids))


def format_list(values: Iterable[int]) -> str:
    """Render a sequence as ``[a, b, c]``."""
    return "[" + ", ".join(str(v) for v in values) + "]"