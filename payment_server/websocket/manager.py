"""Notification hub for websocket subscribers."""
import json
import logging
import uuid
from typing import Any, Dict

from fastapi import WebSocket

logger = logging.getLogger(__name__)

PAYMENTS_UPDATED = "paymentsUpdated"
PAYMENT_CREATED = "paymentCreated"
PAYMENT_UPDATED = "paymentUpdated"
PAYMENT_DELETED = "paymentDeleted"


def build_event(event_type: str, data: Any) -> dict:
    return {"type": event_type, "data": data}


class NotificationHub:
    def __init__(self) -> None:
        self.connections: Dict[str, WebSocket] = {}

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        subscriber_id = uuid.uuid4().hex
        self.connections[subscriber_id] = websocket
        logger.info("Subscriber %s connected (%d online)", subscriber_id, len(self.connections))
        return subscriber_id

    async def disconnect(self, subscriber_id: str) -> None:
        if self.connections.pop(subscriber_id, None) is not None:
            logger.info("Subscriber %s disconnected", subscriber_id)

    async def send(self, subscriber_id: str, message: dict) -> bool:
        websocket = self.connections.get(subscriber_id)
        if websocket is None:
            logger.warning("Subscriber %s is not connected", subscriber_id)
            return False
        try:
            await websocket.send_text(json.dumps(message))
            return True
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Sending %s to subscriber %s failed: %s", message.get("type"), subscriber_id, exc)
            await self.disconnect(subscriber_id)
            return False

    async def broadcast(self, message: dict) -> int:
        """Send to every subscriber; returns how many deliveries succeeded."""
        delivered = 0
        for subscriber_id in list(self.connections.keys()):
            if await self.send(subscriber_id, message):
                delivered += 1
        return delivered

    def is_connected(self, subscriber_id: str) -> bool:
        return subscriber_id in self.connections

    @property
    def subscriber_count(self) -> int:
        return len(self.connections)
