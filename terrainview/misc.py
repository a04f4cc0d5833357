"""Assorted numeric and filesystem helpers."""

from __future__ import annotations

import math
import os
import sys

KB_AMOUNT = 1024.0
MB_AMOUNT = 1024 * 1024.0
GB_AMOUNT = 1024 * 1024 * 1024.0
TB_AMOUNT = 1024 * 1024 * 1024 * 1024.0

_DBL_MIN = sys.float_info.min
_CREATE_MODE = 0o775


def normalize_periodic(min_value: float, max_value: float, value: float) -> float:
    """Bring ``value`` into the range ``[min_value, max_value[``."""
    span = max_value - min_value
    if span < _DBL_MIN:
        return min_value
    normalized = value - span * math.floor((value - min_value) / span)
    # guards against roundoff
    if normalized <= min_value or max_value <= normalized:
        return min_value
    return normalized


def sized_unit_text(amount: int) -> str:
    """Name of the largest unit not exceeding ``amount`` bytes."""
    if amount >= GB_AMOUNT:
        return "GB"
    if amount >= MB_AMOUNT:
        return "MB"
    if amount >= KB_AMOUNT:
        return "KB"
    return "Bytes"


def sized_unit_value(amount: int) -> float:
    """``amount`` bytes expressed in the unit given by :func:`sized_unit_text`."""
    for unit in (GB_AMOUNT, MB_AMOUNT, KB_AMOUNT):
        if amount >= unit:
            return amount / unit
    return float(amount)


def mkdir_p(path: str, mode: int = 0o777) -> None:
    """Create ``path`` and any missing parents, like ``mkdir -p``."""
    os.makedirs(path, mode=mode, exist_ok=True)


def create_path(filename: str) -> bool:
    """Create every directory leading to ``filename``; report whether it exists."""
    dname = os.path.dirname(filename) or "."
    if not os.path.exists(dname):
        try:
            mkdir_p(dname, _CREATE_MODE)
        except OSError:
            pass
    return os.path.exists(dname)