"""Repository protocol for persisting payments."""

from __future__ import annotations

from typing import Protocol, Sequence

from payment_server.db.models import Payment as PaymentModel


class PaymentRepository(Protocol):
    async def list_all(self) -> Sequence[PaymentModel]:
        ...

    async def get_by_id(self, payment_id: int) -> PaymentModel | None:
        ...

    async def add(self, *, amount: float, currency: str) -> PaymentModel:
        ...

    async def update(self, payment_id: int, *, amount: float, currency: str) -> int:
        ...

    async def delete(self, payment_id: int) -> int:
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...
