"""WebSocket push channel for payment change events."""
import logging

from fastapi import Depends, WebSocket, WebSocketDisconnect

from payment_server.api.deps import get_container
from payment_server.core.container import ApplicationContainer
from payment_server.infrastructure.database import session_scope
from payment_server.modules.payments import PaymentService, PaymentStoreError

logger = logging.getLogger(__name__)


async def payments_socket(
    websocket: WebSocket,
    container: ApplicationContainer = Depends(get_container),
):
    hub = container.hub
    subscriber_id = await hub.connect(websocket)
    try:
        await _send_initial_snapshot(container, subscriber_id)
        while True:
            # Inbound frames, text or binary, carry no meaning; reading only detects disconnects.
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    except WebSocketDisconnect:
        logger.debug("Subscriber %s closed the socket", subscriber_id)
    finally:
        await hub.disconnect(subscriber_id)


async def _send_initial_snapshot(container: ApplicationContainer, subscriber_id: str) -> None:
    # Taking the mutation lock keeps the snapshot ordered with mutation broadcasts.
    async with container.mutation_lock:
        async with session_scope(container.session_factory) as session:
            try:
                await container.sync.send_snapshot(PaymentService.with_session(session), subscriber_id)
            except PaymentStoreError:
                logger.exception("Initial snapshot for subscriber %s failed", subscriber_id)
