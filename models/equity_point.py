# --------------------------------------------------------------------
# models/equity_point.py
# One point of the equity curve: the account state at the close of a
# calendar day that had at least one trade.
# --------------------------------------------------------------------
from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import date
from typing import Any, Dict


@dataclass(frozen=True)
class EquityPoint:
    date: date
    balance: float
    pnl: float                   # sum of (pnl - commission) for the day
    drawdown: float              # percent below the running peak
    trade_count: int
    cumulative_win_rate: float   # percent, over every trade up to this day

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["date"] = self.date.isoformat()
        return out
