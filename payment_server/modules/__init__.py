"""Domain modules."""

from . import payments

__all__ = ["payments"]
