"""
trade_validator.py
------------------
Optional checks to run before the metrics engine and equity curve builder.
The calculations themselves accept anything and never raise; callers that
need correct numbers put this in front of them.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from analytics.metrics_engine import DEFAULT_INITIAL_BALANCE
from models.trade import Trade

logger = logging.getLogger(__name__)


class TradeValidationError(ValueError):
    """Raised when a trade list cannot be trusted by the calculations."""


def validate_trades(
    trades: Iterable[Trade],
    initial_balance: float = DEFAULT_INITIAL_BALANCE,
    tolerance: float = 1e-6,
    check_balance: bool = True,
) -> List[Trade]:
    """
    Check ordering, ids and the running balance chain.

    Returns the trades as a list when they pass. With ``check_balance`` each
    ``balance`` must equal the previous one (``initial_balance`` before the
    first trade) plus ``pnl - commission``, within ``tolerance``.
    """
    if initial_balance <= 0:
        raise TradeValidationError(f"initial balance must be positive, got {initial_balance}")

    trades = list(trades)
    seen_ids = set()
    previous_balance = initial_balance

    for i, trade in enumerate(trades):
        if trade.id in seen_ids:
            raise TradeValidationError(f"duplicate trade id {trade.id!r} at index {i}")
        seen_ids.add(trade.id)

        if i > 0 and trade.date < trades[i - 1].date:
            raise TradeValidationError(
                f"trade {trade.id!r} at index {i} is dated {trade.date.isoformat()}, "
                f"before the previous trade ({trades[i - 1].date.isoformat()})"
            )

        if check_balance:
            expected = previous_balance + trade.pnl - trade.commission
            if abs(trade.balance - expected) > tolerance:
                raise TradeValidationError(
                    f"trade {trade.id!r} at index {i} has balance {trade.balance:.6f}, "
                    f"expected {expected:.6f}"
                )
            previous_balance = trade.balance

    logger.debug("validate_trades(): %d trades ok", len(trades))
    return trades
