"""Payment domain model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from payment_server.db import models as orm


@dataclass(slots=True)
class Payment:
    id: int
    amount: float | None
    currency: str | None

    @classmethod
    def from_orm(cls, instance: orm.Payment) -> "Payment":
        return cls(
            id=int(instance.id),
            amount=instance.amount,
            currency=instance.currency,
        )

    def to_payload(self) -> dict[str, Any]:
        return {"id": self.id, "amount": self.amount, "currency": self.currency}
