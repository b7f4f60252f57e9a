"""
Coercion rules for scalar values shared by the view, its state and config.
"""

from __future__ import annotations

import numbers
from typing import Any, Optional


def stringify(value: Any) -> str:
    """
    Text form of a value used for filtering.

    Numbers use their shortest decimal form (2010.0 -> "2010"),
    booleans and None map to "true"/"false"/"null".
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Integral):
        as_float = float(value)
        if as_float.is_integer():
            return str(int(as_float))
        return str(as_float)
    return str(value)


def normalise_term(term: Any) -> str:
    if isinstance(term, str):
        return term
    return stringify(term)


def as_whole_number(value: Any) -> Optional[int]:
    """Return value as int if it is a (non-bool) number with an integral value."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    as_float = float(value)
    if not as_float.is_integer():
        return None
    return int(as_float)
