"""Price alerts and their evaluation against current prices"""

import uuid
from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional, Sequence

from ..errors import MalformedDataError
from ..logging.config import get_logger
from ..utils.time import utc_now_iso

logger = get_logger(__name__)

ALERTS_KEY = "quantpilot-alerts"
CONDITIONS = ("above", "below")


@dataclass(frozen=True)
class PriceAlert:
    id: str
    symbol: str
    target_price: float
    condition: str              # 'above' or 'below'
    triggered: bool = False
    created_at: str = ""

    @classmethod
    def create(cls, symbol: str, target_price: float, condition: str) -> "PriceAlert":
        """
        Create a new untriggered alert

        Raises:
            ValueError: If the symbol, price or condition is invalid
        """
        if not symbol or not symbol.strip():
            raise ValueError("Symbol required")
        if target_price <= 0:
            raise ValueError(f"Target price must be positive: {target_price}")
        if condition not in CONDITIONS:
            raise ValueError(f"Condition must be one of {CONDITIONS}: {condition!r}")

        return cls(
            id=uuid.uuid4().hex,
            symbol=symbol.strip().upper(),
            target_price=float(target_price),
            condition=condition,
            created_at=utc_now_iso()
        )

    def should_trigger(self, price: float) -> bool:
        if self.triggered:
            return False
        if self.condition == "above":
            return price >= self.target_price
        return price <= self.target_price

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PriceAlert":
        try:
            return cls(
                id=str(data["id"]),
                symbol=str(data["symbol"]),
                target_price=float(data["target_price"]),
                condition=str(data["condition"]),
                triggered=bool(data.get("triggered", False)),
                created_at=str(data.get("created_at", ""))
            )
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedDataError(
                f"Invalid stored alert: {e}",
                raw_data=str(data)[:200],
                expected_format="PriceAlert dict"
            ) from e


def evaluate_alerts(alerts: Sequence[PriceAlert],
                    prices: Mapping[str, float]) -> tuple[list[PriceAlert], list[PriceAlert]]:
    """
    Check alerts against current prices

    An 'above' alert fires at price >= target, a 'below' alert at
    price <= target. Alerts without a current price are left alone and an
    alert that has already fired never fires again.

    Returns:
        (all alerts with triggered flags updated, alerts that fired now)
    """
    updated: list[PriceAlert] = []
    fired: list[PriceAlert] = []

    for alert in alerts:
        price = prices.get(alert.symbol)
        if price is not None and alert.should_trigger(price):
            alert = replace(alert, triggered=True)
            fired.append(alert)
            logger.info(
                "Price alert triggered",
                symbol=alert.symbol,
                condition=alert.condition,
                target_price=alert.target_price,
                price=price
            )
        updated.append(alert)

    return updated, fired


class AlertBook:
    """Price alerts persisted as a list under one key-value store key."""

    def __init__(self, store, key: str = ALERTS_KEY):
        self.store = store
        self.key = key

    def load(self) -> list[PriceAlert]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        return [PriceAlert.from_dict(item) for item in raw]

    def save(self, alerts: Sequence[PriceAlert]) -> None:
        self.store.set(self.key, [alert.to_dict() for alert in alerts])

    def add(self, symbol: str, target_price: float, condition: str) -> PriceAlert:
        alert = PriceAlert.create(symbol, target_price, condition)
        self.save(self.load() + [alert])
        return alert

    def remove(self, alert_id: str) -> bool:
        alerts = self.load()
        remaining = [alert for alert in alerts if alert.id != alert_id]
        if len(remaining) == len(alerts):
            return False
        self.save(remaining)
        return True

    def check(self, prices: Mapping[str, float]) -> list[PriceAlert]:
        """Evaluate stored alerts, persist the new flags, return the ones that fired."""
        updated, fired = evaluate_alerts(self.load(), prices)
        if fired:
            self.save(updated)
        return fired

    def symbols(self) -> list[str]:
        """Distinct symbols with untriggered alerts, in first-seen order."""
        seen: dict[str, None] = {}
        for alert in self.load():
            if not alert.triggered:
                seen.setdefault(alert.symbol, None)
        return list(seen)

    def get(self, alert_id: str) -> Optional[PriceAlert]:
        return next((alert for alert in self.load() if alert.id == alert_id), None)
