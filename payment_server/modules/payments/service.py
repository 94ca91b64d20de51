"""Domain service for payment record operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payment_server.db.models import Payment as PaymentModel
from payment_server.infrastructure.database.repositories.payment_repository import SqlPaymentRepository

from .exceptions import StoreUnavailable, StoreWriteError
from .models import Payment
from .repository import PaymentRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PaymentService:
    repository: PaymentRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "PaymentService":
        return cls(SqlPaymentRepository(session))

    async def list_payments(self) -> list[Payment]:
        try:
            models = await self.repository.list_all()
        except SQLAlchemyError as exc:
            logger.exception("Failed to list payments")
            raise StoreUnavailable("payments could not be read") from exc
        return [self._to_domain(model) for model in models]

    async def get_payment(self, payment_id: int) -> Payment | None:
        try:
            model = await self.repository.get_by_id(payment_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to load payment %s", payment_id)
            raise StoreUnavailable(f"payment {payment_id} could not be read") from exc
        return self._to_domain(model) if model else None

    async def create_payment(self, *, amount: float, currency: str) -> Payment:
        try:
            model = await self.repository.add(amount=amount, currency=currency)
            await self.repository.commit()
        except SQLAlchemyError as exc:
            logger.exception("Failed to create payment")
            await self._rollback()
            raise StoreWriteError("payment could not be created") from exc
        return self._to_domain(model)

    async def update_payment(self, payment_id: int, *, amount: float, currency: str) -> int:
        """Overwrite amount and currency; returns the number of affected rows (0 or 1)."""
        try:
            changed = await self.repository.update(payment_id, amount=amount, currency=currency)
            await self.repository.commit()
        except SQLAlchemyError as exc:
            logger.exception("Failed to update payment %s", payment_id)
            await self._rollback()
            raise StoreWriteError(f"payment {payment_id} could not be updated") from exc
        return changed

    async def delete_payment(self, payment_id: int) -> int:
        """Remove the payment; returns the number of affected rows (0 or 1)."""
        try:
            changed = await self.repository.delete(payment_id)
            await self.repository.commit()
        except SQLAlchemyError as exc:
            logger.exception("Failed to delete payment %s", payment_id)
            await self._rollback()
            raise StoreWriteError(f"payment {payment_id} could not be deleted") from exc
        return changed

    async def _rollback(self) -> None:
        try:
            await self.repository.rollback()
        except SQLAlchemyError as exc:
            logger.warning("Rollback failed: %s", exc)

    @staticmethod
    def _to_domain(model: PaymentModel) -> Payment:
        return Payment.from_orm(model)
