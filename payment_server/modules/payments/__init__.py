"""Payment domain exports."""

from .exceptions import (
    PaymentError,
    PaymentNotFoundError,
    PaymentStoreError,
    StoreUnavailable,
    StoreWriteError,
)
from .models import Payment
from .service import PaymentService

__all__ = [
    "Payment",
    "PaymentService",
    "PaymentError",
    "PaymentNotFoundError",
    "PaymentStoreError",
    "StoreUnavailable",
    "StoreWriteError",
]
