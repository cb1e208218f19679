"""
String rendering for vectors and matrices.

Vectors render as "[x0,x1,...]" with every component fixed to DECIMALS
places; matrices render as "[row0,row1,...]" with each row in vector form.
No whitespace is emitted anywhere.
"""

from __future__ import annotations

from typing import Iterable

DECIMALS = 3


def format_components(values: Iterable[float], decimals: int = DECIMALS) -> str:
    """Render a sequence of floats as "[a,b,...]" with fixed precision."""
    return "[" + ",".join(f"{float(x):.{decimals}f}" for x in values) + "]"


def format_rows(rows: Iterable[Iterable[float]], decimals: int = DECIMALS) -> str:
    """Render rows as "[[...],[...]]"."""
    return "[" + ",".join(format_components(row, decimals) for row in rows) + "]"
