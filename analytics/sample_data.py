# analytics/sample_data.py
"""
Synthetic trade history for demos and fixtures: roughly 60% winners,
one trade every two or three days, balances already chained.
"""
from __future__ import annotations

import logging
import math
import random
from datetime import datetime, timedelta
from typing import List, Optional

from analytics.metrics_engine import DEFAULT_INITIAL_BALANCE
from models.trade import Trade

logger = logging.getLogger(__name__)

SAMPLE_SYMBOLS = ["AAPL", "GOOGL", "MSFT", "TSLA", "AMZN", "META", "NVDA"]
WIN_PROBABILITY = 0.6
COMMISSION_PER_UNIT = 0.01


def generate_sample_trades(
    count: int = 150,
    seed: Optional[int] = None,
    initial_balance: float = DEFAULT_INITIAL_BALANCE,
    start: Optional[datetime] = None,
) -> List[Trade]:
    """
    Return ``count`` trades starting at ``start`` (default: Jan 1st of the
    current year). The same ``seed`` always yields the same trades.
    """
    rng = random.Random(seed)
    if start is None:
        start = datetime(datetime.now().year, 1, 1)

    trades: List[Trade] = []
    balance = initial_balance
    for i in range(count):
        quantity = rng.randint(1, 100)
        if rng.random() < WIN_PROBABILITY:
            pnl = rng.random() * 500 + 50        # win: 50 .. 550
        else:
            pnl = -(rng.random() * 300 + 25)     # loss: -25 .. -325
        commission = quantity * COMMISSION_PER_UNIT
        balance += pnl - commission

        trades.append(
            Trade(
                id=f"trade-{i}",
                date=start + timedelta(days=math.floor(i * 2.5)),
                symbol=rng.choice(SAMPLE_SYMBOLS),
                side="buy" if rng.random() > 0.5 else "sell",
                quantity=quantity,
                price=rng.random() * 200 + 50,
                pnl=pnl,
                commission=commission,
                balance=balance,
            )
        )

    logger.debug("generated %d sample trades (seed=%s)", count, seed)
    return trades
