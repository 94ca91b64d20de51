"""Post-mutation hook: mirror the table and notify subscribers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from payment_server.modules.payments import Payment, PaymentService, PaymentStoreError
from payment_server.websocket.manager import (
    PAYMENTS_UPDATED,
    NotificationHub,
    build_event,
)

from .mirror import MirrorWriteError, PaymentMirror

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PaymentSync:
    hub: NotificationHub
    mirror: Optional[PaymentMirror] = None

    async def after_mutation(
        self, service: PaymentService, event_type: str, data: dict
    ) -> Optional[list[Payment]]:
        """Re-read the table once, then mirror it and broadcast.

        Subscribers receive the full set first and the targeted event second.
        A mirror failure is logged and does not undo the committed mutation.
        If the table cannot be re-read, only the targeted event goes out.
        """
        try:
            payments = await service.list_payments()
        except PaymentStoreError:
            logger.exception("Could not re-read payments after %s", event_type)
            payments = None

        if payments is not None:
            if self.mirror is not None:
                try:
                    await self.mirror.write_async(payments)
                except MirrorWriteError:
                    logger.exception("Mirror update failed after %s", event_type)
            await self.hub.broadcast(build_event(PAYMENTS_UPDATED, [p.to_payload() for p in payments]))

        await self.hub.broadcast(build_event(event_type, data))
        return payments

    async def send_snapshot(self, service: PaymentService, subscriber_id: str) -> bool:
        payments = await service.list_payments()
        return await self.hub.send(
            subscriber_id,
            build_event(PAYMENTS_UPDATED, [p.to_payload() for p in payments]),
        )
