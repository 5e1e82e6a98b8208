"""
performance_metrics.py
----------------------
Summary statistics for a whole trade history. Values are raw numbers;
currency and percent formatting is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class PerformanceMetrics:
    total_return: float
    total_return_percent: float
    max_drawdown: float
    max_drawdown_percent: float
    sharpe_ratio: float
    win_rate: float
    total_trades: int
    profit_factor: float
    avg_win: float
    avg_loss: float

    @classmethod
    def empty(cls) -> "PerformanceMetrics":
        """Metrics for a history with no trades: every field at zero."""
        return cls(
            total_return=0.0,
            total_return_percent=0.0,
            max_drawdown=0.0,
            max_drawdown_percent=0.0,
            sharpe_ratio=0.0,
            win_rate=0.0,
            total_trades=0,
            profit_factor=0.0,
            avg_win=0.0,
            avg_loss=0.0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
