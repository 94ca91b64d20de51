"""Dependency container for wiring core services."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from payment_server.core.config import Settings
from payment_server.infrastructure.database import build_engine, build_session_factory, init_db
from payment_server.services import PaymentMirror, PaymentSync
from payment_server.websocket.manager import NotificationHub

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    hub: NotificationHub
    sync: PaymentSync
    # Held from a store mutation until its mirror write and broadcasts finish.
    mutation_lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        engine = build_engine(settings)
        hub = NotificationHub()
        mirror = PaymentMirror(settings.mirror_path) if settings.mirror.enabled else None
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
            hub=hub,
            sync=PaymentSync(hub=hub, mirror=mirror),
        )

    async def startup(self) -> None:
        await init_db(self.engine)

    async def shutdown(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")


__all__ = ["ApplicationContainer"]
