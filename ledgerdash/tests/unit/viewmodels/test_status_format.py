from __future__ import annotations

import json
from datetime import timedelta, timezone

import pytest

from ledgerdash.domain.models import SignatureRecord
from ledgerdash.viewmodels.status_format import (
    UNKNOWN_TIME,
    format_block_time,
    format_sol,
    pretty_json,
    signature_status_label,
)


@pytest.mark.parametrize(
    "value, expected",
    [(0, "0.0000"), (1.23456, "1.2346"), (2, "2.0000"), (0.0001, "0.0001")],
)
def test_format_sol_uses_four_decimals(value, expected) -> None:
    assert format_sol(value) == expected


def test_format_block_time_honours_zone() -> None:
    assert format_block_time(1700000000, timezone.utc) == "2023-11-14 22:13:20"
    assert format_block_time(1700000000, timezone(timedelta(hours=2))) == "2023-11-15 00:13:20"


@pytest.mark.parametrize("value", [None, 0])
def test_missing_block_time_is_unknown(value) -> None:
    assert format_block_time(value) == UNKNOWN_TIME


def test_status_label_reflects_err_field() -> None:
    assert signature_status_label(SignatureRecord("a", 1)) == "Success"
    assert signature_status_label(SignatureRecord("b", 1, err={"code": 1})) == "Failed"


def test_pretty_json_is_indented() -> None:
    text = pretty_json({"slot": 1, "meta": {"fee": 5}})

    assert text.splitlines()[1] == '  "slot": 1,'
    assert json.loads(text) == {"slot": 1, "meta": {"fee": 5}}


@pytest.mark.parametrize("value", [1700000000000, 10**20, -(10**20)])
def test_out_of_range_block_time_is_unknown(value) -> None:
    assert format_block_time(value, timezone.utc) == UNKNOWN_TIME
