"""
equity_curve.py
---------------
Builds the daily equity curve from a trade list. Trades are bucketed per
calendar day and the balance is re-accumulated from pnl - commission.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import pandas as pd

from analytics.metrics_engine import DEFAULT_INITIAL_BALANCE
from models.equity_point import EquityPoint
from models.trade import Trade
from utils.ordering import group_by_day

logger = logging.getLogger(__name__)

EQUITY_COLUMNS = ["date", "balance", "pnl", "drawdown", "trade_count", "cumulative_win_rate"]


def build_equity_curve(
    trades: Sequence[Trade],
    initial_balance: float = DEFAULT_INITIAL_BALANCE,
) -> List[EquityPoint]:
    """
    Return one EquityPoint per calendar day that has trades.

    Days come out in the order they first appear, so the input must already
    be chronological (see utils.ordering.sort_chronologically). Nothing is
    sorted here.
    """
    points: List[EquityPoint] = []
    running_balance = initial_balance
    peak = initial_balance
    trades_so_far = 0
    wins_so_far = 0

    for day, day_trades in group_by_day(trades).items():
        day_pnl = sum(t.pnl - t.commission for t in day_trades)
        running_balance += day_pnl
        if running_balance > peak:
            peak = running_balance
        drawdown_pct = (peak - running_balance) / peak * 100

        trades_so_far += len(day_trades)
        wins_so_far += sum(1 for t in day_trades if t.pnl > 0)
        win_rate = wins_so_far / trades_so_far * 100 if trades_so_far else 0.0

        points.append(
            EquityPoint(
                date=day,
                balance=running_balance,
                pnl=day_pnl,
                drawdown=drawdown_pct,
                trade_count=len(day_trades),
                cumulative_win_rate=win_rate,
            )
        )

    logger.debug("build_equity_curve(): %d trades -> %d points", len(trades), len(points))
    return points


def equity_curve_frame(points: Sequence[EquityPoint]) -> pd.DataFrame:
    """Tabular view of the curve for charts and reports."""
    if not points:
        return pd.DataFrame(columns=EQUITY_COLUMNS)
    df = pd.DataFrame([p.to_dict() for p in points], columns=EQUITY_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    return df
