from fastapi import APIRouter

from payment_server.api.routers import payments, websocket
from payment_server.core.config import Settings


def create_api_router(settings: Settings) -> APIRouter:
    router = APIRouter()
    router.include_router(payments.router, prefix="/payments", tags=["payments"])
    router.add_api_websocket_route(settings.websocket.path, websocket.payments_socket)
    return router


__all__ = [
    "create_api_router",
]
