from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

Side = Literal["buy", "sell"]


class Trade(BaseModel):
    """One executed order with its realised PnL and the account balance after it."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    date: datetime
    symbol: str = Field(..., min_length=1)
    side: Side
    quantity: float = Field(..., gt=0, allow_inf_nan=False)
    price: float = Field(..., gt=0, allow_inf_nan=False)
    pnl: float = Field(..., allow_inf_nan=False)
    commission: float = Field(0.0, ge=0, allow_inf_nan=False)
    balance: float = Field(..., allow_inf_nan=False)

    @field_validator("side", mode="before")
    @classmethod
    def normalize_side(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v):
        # bare numbers are epoch seconds, or epoch-ms when too large for seconds
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            if v > 10**12:
                v /= 1000
            if v <= 0:
                raise ValueError("timestamp must be positive")
            return datetime.fromtimestamp(v, tz=timezone.utc)
        return v

    @field_validator("date")
    @classmethod
    def drop_timezone(cls, v: datetime) -> datetime:
        # all trade times are naive; aware inputs (epochs included) become UTC wall-clock
        if v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @property
    def net_pnl(self) -> float:
        return self.pnl - self.commission

    @property
    def is_win(self) -> bool:
        return self.pnl > 0

    @property
    def is_loss(self) -> bool:
        return self.pnl < 0

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Trade":
        """Build a trade from a loose mapping (CSV row, JSON blob).

        Accepts ``type`` as an alias of ``side`` and stringifies ``id``.
        """
        data = dict(raw)
        if "side" not in data and "type" in data:
            data["side"] = data.pop("type")
        if data.get("id") is not None:
            data["id"] = str(data["id"])
        return cls.model_validate(data)
