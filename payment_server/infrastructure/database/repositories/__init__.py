"""SQLAlchemy-backed repository implementations."""

from .payment_repository import SqlPaymentRepository

__all__ = ["SqlPaymentRepository"]
