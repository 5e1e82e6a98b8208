import logging
from datetime import datetime

import pytest

from models.trade import Trade


@pytest.fixture
def make_trade():
    """Factory for trades with sensible defaults; override any field by keyword."""
    counter = {"n": 0}

    def _make(**overrides) -> Trade:
        counter["n"] += 1
        fields = {
            "id": f"t{counter['n']}",
            "date": datetime(2024, 1, 2, 10, 0),
            "symbol": "AAPL",
            "side": "buy",
            "quantity": 10,
            "price": 100.0,
            "pnl": 0.0,
            "commission": 0.0,
            "balance": 10_000.0,
        }
        fields.update(overrides)
        return Trade(**fields)

    return _make


@pytest.fixture
def two_day_trades(make_trade):
    """Two trades on Jan 2nd, one on Jan 3rd; balances chained from 10 000."""
    return [
        make_trade(date=datetime(2024, 1, 2, 9, 30), pnl=100.0, commission=1.0, balance=10_099.0),
        make_trade(date=datetime(2024, 1, 2, 15, 45), side="sell", pnl=-50.0, commission=1.0, balance=10_048.0),
        make_trade(date=datetime(2024, 1, 3, 11, 0), pnl=200.0, commission=2.0, balance=10_246.0),
    ]


@pytest.fixture
def fresh_loggers():
    """Detach and close handlers setup_logger left on the app and package loggers."""
    from utils.logger import APP_PACKAGES

    names = ("TradeStats",) + APP_PACKAGES

    def _reset():
        for name in names:
            log = logging.getLogger(name)
            for handler in list(log.handlers):
                log.removeHandler(handler)
                handler.close()

    _reset()
    yield
    _reset()
