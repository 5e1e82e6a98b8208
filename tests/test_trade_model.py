from datetime import datetime

import pytest
from pydantic import ValidationError

from models.trade import Trade


def _raw(**overrides):
    raw = {
        "id": "trade-1",
        "date": "2024-01-02T10:30:00",
        "symbol": "MSFT",
        "side": "buy",
        "quantity": 5,
        "price": 320.5,
        "pnl": 42.0,
        "commission": 0.05,
        "balance": 10_041.95,
    }
    raw.update(overrides)
    return raw


def test_parses_iso_date_and_derived_fields():
    t = Trade(**_raw())

    assert t.date == datetime(2024, 1, 2, 10, 30)
    assert t.net_pnl == pytest.approx(41.95)
    assert t.is_win
    assert not t.is_loss


def test_side_is_case_insensitive():
    assert Trade(**_raw(side=" SELL ")).side == "sell"


def test_unknown_side_rejected():
    with pytest.raises(ValidationError):
        Trade(**_raw(side="hold"))


@pytest.mark.parametrize(
    "field, value",
    [
        ("quantity", 0),
        ("quantity", -1),
        ("price", 0),
        ("commission", -0.01),
        ("symbol", ""),
        ("id", ""),
        ("pnl", float("nan")),
        ("balance", float("inf")),
    ],
)
def test_invalid_fields_rejected(field, value):
    with pytest.raises(ValidationError):
        Trade(**_raw(**{field: value}))


def test_epoch_millis_normalized_to_seconds():
    t = Trade(**_raw(date=1_700_000_000_000))

    assert t.date == datetime(2023, 11, 14, 22, 13, 20)


def test_epoch_seconds_accepted():
    t = Trade(**_raw(date=1_700_000_000))

    assert t.date.year == 2023


def test_non_positive_timestamp_rejected():
    with pytest.raises(ValidationError):
        Trade(**_raw(date=-5))


def test_trade_is_immutable():
    t = Trade(**_raw())

    with pytest.raises(ValidationError):
        t.pnl = 0.0


def test_from_dict_accepts_type_alias_and_numeric_id():
    raw = _raw(id=7)
    raw["type"] = raw.pop("side")

    t = Trade.from_dict(raw)

    assert t.side == "buy"
    assert t.id == "7"


def test_zero_pnl_is_neither_win_nor_loss():
    t = Trade(**_raw(pnl=0.0))

    assert not t.is_win
    assert not t.is_loss


def test_offset_timestamp_converted_to_utc_wall_clock():
    t = Trade(**_raw(date="2024-01-02T01:30:00+02:00"))

    assert t.date == datetime(2024, 1, 1, 23, 30)
    assert t.date.tzinfo is None


def test_epoch_and_iso_dates_compare():
    from utils.ordering import is_chronological, sort_chronologically

    iso = Trade(**_raw(id="a", date="2023-11-15T00:00:00"))
    epoch = Trade(**_raw(id="b", date=1_700_000_000))

    ordered = sort_chronologically([iso, epoch])

    assert [t.id for t in ordered] == ["b", "a"]
    assert is_chronological(ordered)
