"""Application services shared by the HTTP and websocket layers."""

from .mirror import MirrorWriteError, PaymentMirror
from .sync import PaymentSync

__all__ = ["MirrorWriteError", "PaymentMirror", "PaymentSync"]
