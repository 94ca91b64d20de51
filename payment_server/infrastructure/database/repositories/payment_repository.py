"""SQLAlchemy powered repository for payment persistence."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from payment_server.db.models import Payment as PaymentModel


class SqlPaymentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> Sequence[PaymentModel]:
        stmt = (
            select(PaymentModel)
            .order_by(PaymentModel.id.asc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def get_by_id(self, payment_id: int) -> PaymentModel | None:
        stmt = (
            select(PaymentModel)
            .where(PaymentModel.id == payment_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, *, amount: float, currency: str) -> PaymentModel:
        model = PaymentModel(amount=amount, currency=currency)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return model

    async def update(self, payment_id: int, *, amount: float, currency: str) -> int:
        stmt = (
            update(PaymentModel)
            .where(PaymentModel.id == payment_id)
            .values(amount=amount, currency=currency)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return int(result.rowcount or 0)

    async def delete(self, payment_id: int) -> int:
        stmt = (
            delete(PaymentModel)
            .where(PaymentModel.id == payment_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return int(result.rowcount or 0)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
