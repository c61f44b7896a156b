"""Opening balance coercion."""
from __future__ import annotations

import math
import re
from typing import Any, Optional

# plain decimal notation only: no digit separators, hex, or words like "inf"
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_decimal(text: str) -> Optional[float]:
    """Float for a plain decimal string (surrounding whitespace allowed), else None."""
    text = text.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        return None
    return float(text)


def coerce_balance(value: Any) -> int | float:
    """Finite number or 0. Integral values come back as int."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        number = parse_decimal(value)
    else:
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            return 0
    if number is None or not math.isfinite(number) or number == 0:
        return 0
    return int(number) if number.is_integer() else number
