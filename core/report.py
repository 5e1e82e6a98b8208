"""
core/report.py
--------------
Resolves the trade source from configuration, runs the metrics engine and
the equity curve builder, and renders a plain-text summary.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from analytics.equity_curve import build_equity_curve, equity_curve_frame
from analytics.metrics_engine import compute_metrics
from analytics.sample_data import generate_sample_trades
from analytics.trade_validator import validate_trades
from models.trade import Trade
from utils.config_manager import ConfigManager
from utils.formatting import format_currency, format_percent

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["id", "date", "symbol", "side", "quantity", "price", "pnl", "commission", "balance"]


def load_trades_csv(path: str) -> List[Trade]:
    """
    Read a trade log. ``type`` is accepted in place of ``side``; rows keep
    the file order.
    """
    df = pd.read_csv(path, dtype={"id": str})
    if "side" not in df.columns and "type" in df.columns:
        df = df.rename(columns={"type": "side"})

    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing columns {missing}")

    df["date"] = pd.to_datetime(df["date"])
    trades = []
    for row in df[CSV_COLUMNS].to_dict("records"):
        row["date"] = row["date"].to_pydatetime()
        trades.append(Trade.from_dict(row))

    logger.info("Loaded %d trades from %s", len(trades), path)
    return trades


def resolve_trades(config: ConfigManager) -> List[Trade]:
    csv_path = config.get_trades_csv()
    if csv_path:
        return load_trades_csv(csv_path)
    logger.info("No TRADES_CSV configured, generating %d sample trades", config.get_sample_size())
    return generate_sample_trades(
        count=config.get_sample_size(),
        seed=config.get_sample_seed(),
        initial_balance=config.get_initial_balance(),
    )


def build_report(config: Dict[str, Any], trades: Optional[Sequence[Trade]] = None) -> Dict[str, Any]:
    """
    Return ``{"metrics", "equity_curve", "trades"}`` for the configured
    trade source, or for ``trades`` when given.
    """
    cfg = ConfigManager(config)
    initial_balance = cfg.get_initial_balance()

    trades = list(trades) if trades is not None else resolve_trades(cfg)
    if cfg.should_validate():
        trades = validate_trades(trades, initial_balance=initial_balance)

    metrics = compute_metrics(
        trades,
        initial_balance=initial_balance,
        risk_free_rate=cfg.get_risk_free_rate(),
    )
    curve = build_equity_curve(trades, initial_balance=initial_balance)

    logger.info(
        "Report: %d trades, %d equity points, return %.2f",
        metrics.total_trades,
        len(curve),
        metrics.total_return,
    )
    return {"metrics": metrics, "equity_curve": curve, "trades": trades}


def render_report(report: Dict[str, Any], currency_symbol: str = "$", tail: int = 10) -> str:
    m = report["metrics"]
    lines = [
        "Performance summary",
        "-------------------",
        f"Total return      {format_currency(m.total_return, currency_symbol)} ({format_percent(m.total_return_percent)})",
        f"Max drawdown      {format_currency(m.max_drawdown, currency_symbol)} ({format_percent(-m.max_drawdown_percent)})",
        f"Win rate          {m.win_rate:.1f}%",
        f"Total trades      {m.total_trades}",
        f"Profit factor     {m.profit_factor:.2f}",
        f"Avg win / loss    {format_currency(m.avg_win, currency_symbol)} / {format_currency(m.avg_loss, currency_symbol)}",
        f"Sharpe ratio      {m.sharpe_ratio:.2f}",
    ]

    df = equity_curve_frame(report["equity_curve"])
    if not df.empty:
        lines += ["", f"Equity curve (last {min(tail, len(df))} of {len(df)} days)", df.tail(tail).to_string(index=False)]
    return "\n".join(lines)
