"""Reusable FastAPI dependencies."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from fastapi.requests import HTTPConnection
from sqlalchemy.ext.asyncio import AsyncSession

from payment_server.core.container import ApplicationContainer
from payment_server.infrastructure.database import session_scope
from payment_server.modules.payments import PaymentService


def get_container(connection: HTTPConnection) -> ApplicationContainer:
    return connection.app.state.container


async def get_db_session(
    container: ApplicationContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    async with session_scope(container.session_factory) as session:
        yield session


def get_payment_service(db: AsyncSession = Depends(get_db_session)) -> PaymentService:
    return PaymentService.with_session(db)


__all__ = [
    "get_container",
    "get_db_session",
    "get_payment_service",
]
