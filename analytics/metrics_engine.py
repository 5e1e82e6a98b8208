"""
metrics_engine.py
-----------------
Reduces a chronological list of trades into a PerformanceMetrics summary:
return, drawdown, win/loss statistics and a per-trade Sharpe ratio.

The drawdown pass trusts the precomputed ``Trade.balance`` field. The
equity curve builder re-accumulates balances from pnl and commission
instead; both must agree on well-formed input.
"""

from __future__ import annotations

import logging
import statistics
from typing import Sequence

from models.performance_metrics import PerformanceMetrics
from models.trade import Trade

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_BALANCE = 10_000.0
DEFAULT_RISK_FREE_RATE = 0.02  # per trade, same scale as the return series


def compute_metrics(
    trades: Sequence[Trade],
    initial_balance: float = DEFAULT_INITIAL_BALANCE,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> PerformanceMetrics:
    """Compute performance statistics for the given trades.

    Parameters
    ----------
    trades: Sequence[Trade]
        Trades in chronological order. The order is trusted, not checked.
    initial_balance: float
        Account balance before the first trade. Must be > 0.
    risk_free_rate: float
        Subtracted from the mean per-trade return in the Sharpe ratio.

    Returns
    -------
    PerformanceMetrics
        All-zero metrics for an empty list. Degenerate inputs never raise:
        no losers gives ``profit_factor == 0`` and a zero-variance return
        series gives ``sharpe_ratio == 0``.
    """
    if not trades:
        logger.debug("compute_metrics(): no trades, returning empty metrics")
        return PerformanceMetrics.empty()

    total_trades = len(trades)
    total_return = trades[-1].balance - initial_balance
    total_return_percent = total_return / initial_balance * 100

    max_drawdown, max_drawdown_percent = _max_drawdown(trades, initial_balance)

    wins = [t.pnl for t in trades if t.pnl > 0]
    losses = [t.pnl for t in trades if t.pnl < 0]
    win_rate = len(wins) / total_trades * 100

    total_wins = sum(wins)
    total_losses = abs(sum(losses))
    profit_factor = total_wins / total_losses if total_losses > 0 else 0.0
    avg_win = total_wins / len(wins) if wins else 0.0
    avg_loss = total_losses / len(losses) if losses else 0.0

    sharpe_ratio = _sharpe_ratio(
        [t.pnl / initial_balance for t in trades], risk_free_rate
    )

    logger.debug(
        "compute_metrics(): trades=%d return=%.2f max_dd=%.2f win_rate=%.2f",
        total_trades,
        total_return,
        max_drawdown,
        win_rate,
    )

    return PerformanceMetrics(
        total_return=total_return,
        total_return_percent=total_return_percent,
        max_drawdown=max_drawdown,
        max_drawdown_percent=max_drawdown_percent,
        sharpe_ratio=sharpe_ratio,
        win_rate=win_rate,
        total_trades=total_trades,
        profit_factor=profit_factor,
        avg_win=avg_win,
        avg_loss=avg_loss,
    )


def _max_drawdown(trades: Sequence[Trade], initial_balance: float) -> tuple[float, float]:
    """
    Largest absolute peak-to-trough decline, paired with the percent taken at
    the same trade. The percent is not maximised on its own, so it can be
    smaller than the largest percent seen when the peak moves.
    """
    peak = initial_balance
    max_dd = 0.0
    max_dd_pct = 0.0
    for trade in trades:
        if trade.balance > peak:
            peak = trade.balance
        drawdown = peak - trade.balance
        if drawdown > max_dd:  # strict: ties keep the first occurrence
            max_dd = drawdown
            max_dd_pct = drawdown / peak * 100
    return max_dd, max_dd_pct


def _sharpe_ratio(returns: Sequence[float], risk_free_rate: float) -> float:
    # population stddev, no annualisation
    std = statistics.pstdev(returns)
    if std == 0:
        return 0.0
    return (statistics.fmean(returns) - risk_free_rate) / std
