# utils/ordering.py
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Iterable, List, Sequence

from models.trade import Trade


def day_key(ts: datetime) -> date:
    """
    Calendar day of a trade timestamp. Trade times are naive UTC wall-clock
    (see Trade.drop_timezone), so this is the UTC day.
    """
    return ts.date()


def group_by_day(trades: Iterable[Trade]) -> Dict[date, List[Trade]]:
    """Group trades per calendar day, keeping the order days are first seen."""
    groups: Dict[date, List[Trade]] = {}
    for trade in trades:
        groups.setdefault(day_key(trade.date), []).append(trade)
    return groups


def sort_chronologically(trades: Iterable[Trade]) -> List[Trade]:
    """Stable sort by execution time; same-time trades keep their input order."""
    return sorted(trades, key=lambda t: t.date)


def is_chronological(trades: Sequence[Trade]) -> bool:
    return all(prev.date <= cur.date for prev, cur in zip(trades, trades[1:]))
