"""Pure normalization and calendar helpers."""
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Garante que o pacote portal seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portal.core import dates  # noqa: E402
from portal.domain.balance import coerce_balance  # noqa: E402
from portal.domain.dues import DEFAULT_MONTHLY_FEE, normalize_dues  # noqa: E402

TODAY = date(2026, 1, 5)


def test_normalize_keeps_valid_record_and_extra_fields():
    raw = {"monthlyFee": 1800.5, "startMonth": "2025-06", "paymentsByUser": {"u1": {"2025-06": 1800}}, "note": "x"}
    assert normalize_dues(raw, TODAY) == raw


def test_normalize_does_not_mutate_input():
    raw = {"paymentsByUser": {"u1": 100}}
    normalize_dues(raw, TODAY)
    assert raw == {"paymentsByUser": {"u1": 100}}


@pytest.mark.parametrize(
    "fee, expected",
    [
        (None, DEFAULT_MONTHLY_FEE),
        ("abc", DEFAULT_MONTHLY_FEE),
        ("", DEFAULT_MONTHLY_FEE),
        ([1], DEFAULT_MONTHLY_FEE),
        (True, DEFAULT_MONTHLY_FEE),
        (float("inf"), DEFAULT_MONTHLY_FEE),
        ("2100", 2100),
        ("2_100", DEFAULT_MONTHLY_FEE),
        ("0x10", DEFAULT_MONTHLY_FEE),
        (0, 0),
        (1500.0, 1500),
        (99.9, 99.9),
    ],
)
def test_normalize_fee(fee, expected):
    assert normalize_dues({"monthlyFee": fee}, TODAY)["monthlyFee"] == expected


def test_normalize_fields_independently():
    out = normalize_dues({"monthlyFee": 2500, "startMonth": None, "paymentsByUser": ["bad"]}, TODAY)
    assert out == {"monthlyFee": 2500, "startMonth": "2026-01", "paymentsByUser": {}}


def test_normalize_non_mapping():
    assert normalize_dues(None, TODAY) == {"monthlyFee": 2000, "startMonth": "2026-01", "paymentsByUser": {}}
    assert normalize_dues("junk", TODAY)["paymentsByUser"] == {}


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 0), ("1_000", 0), ("0x10", 0), ("inf", 0), ("1e3", 1000), (".5", 0.5), ("", 0), ("abc", 0), ("150.5", 150.5), (12, 12), (12.0, 12), ("-0", 0), (float("nan"), 0), (True, 0)],
)
def test_coerce_balance(raw, expected):
    assert coerce_balance(raw) == expected


def test_year_month_helpers():
    assert dates.ym_now(date(2026, 9, 30)) == "2026-09"
    assert dates.ym_to_index("2026-01") == 2026 * 12
    assert dates.ym_to_index("garbage") == 0
    assert dates.ym_to_index(None) == 0
    assert dates.months_between_inclusive("2025-11", "2026-02") == 4
    assert dates.months_between_inclusive("2026-03", "2026-02") == 0

