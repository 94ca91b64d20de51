"""Payment domain specific exceptions."""


class PaymentError(Exception):
    """Base class for payment domain errors."""


class PaymentNotFoundError(PaymentError):
    """Raised when the requested payment does not exist."""

    def __init__(self, payment_id: int) -> None:
        super().__init__(f"Payment {payment_id} not found")
        self.payment_id = payment_id


class PaymentStoreError(PaymentError):
    """Raised when the backing database fails."""


class StoreUnavailable(PaymentStoreError):
    """Raised when payments cannot be read from the database."""


class StoreWriteError(PaymentStoreError):
    """Raised when a payment mutation cannot be persisted."""
