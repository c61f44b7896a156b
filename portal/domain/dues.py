"""Dues record normalization."""
from __future__ import annotations

import math
from datetime import date
from typing import Any, Mapping

from portal.core.dates import ym_now
from portal.domain.balance import parse_decimal

DEFAULT_MONTHLY_FEE = 2000


def default_dues(today: date | None = None) -> dict:
    return {"monthlyFee": DEFAULT_MONTHLY_FEE, "startMonth": ym_now(today), "paymentsByUser": {}}


def _fee(value: Any) -> int | float:
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return DEFAULT_MONTHLY_FEE
    if isinstance(value, str):
        number = parse_decimal(value)
    else:
        try:
            number = float(value)
        except OverflowError:
            return DEFAULT_MONTHLY_FEE
    if number is None or not math.isfinite(number):
        return DEFAULT_MONTHLY_FEE
    return int(number) if number.is_integer() else number


def normalize_dues(raw: Any, today: date | None = None) -> dict:
    """Repair each dues field independently.

    ``monthlyFee`` becomes a finite number (2000 when missing or not numeric),
    ``startMonth`` a non-empty string (the current year-month when missing),
    ``paymentsByUser`` a mapping (empty when missing). Anything that is not a
    mapping yields the default record. Other keys are kept. The input is not
    modified.
    """
    if not isinstance(raw, Mapping):
        return default_dues(today)
    dues = dict(raw)
    dues["monthlyFee"] = _fee(dues.get("monthlyFee"))
    dues["startMonth"] = str(dues.get("startMonth") or ym_now(today))
    payments = dues.get("paymentsByUser")
    dues["paymentsByUser"] = dict(payments) if isinstance(payments, Mapping) else {}
    return dues
