from typing import Any, Dict, Optional

from analytics.metrics_engine import DEFAULT_INITIAL_BALANCE, DEFAULT_RISK_FREE_RATE


class ConfigManager:
    def __init__(self, config: Dict[str, Any]):
        self.config = config

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def get_initial_balance(self) -> float:
        return float(self.config.get("INITIAL_BALANCE", DEFAULT_INITIAL_BALANCE))

    def get_risk_free_rate(self) -> float:
        return float(self.config.get("RISK_FREE_RATE", DEFAULT_RISK_FREE_RATE))

    def get_currency_symbol(self) -> str:
        return self.config.get("CURRENCY_SYMBOL") or "$"

    def get_trades_csv(self) -> Optional[str]:
        return self.config.get("TRADES_CSV") or None

    def get_sample_size(self) -> int:
        return int(self.config.get("SAMPLE_SIZE", 150))

    def get_sample_seed(self) -> Optional[int]:
        seed = self.config.get("SAMPLE_SEED")
        return int(seed) if seed is not None else None

    def should_validate(self) -> bool:
        return bool(self.config.get("VALIDATE_TRADES", False))
