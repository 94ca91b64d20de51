"""Pydantic schemas for the payments API."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentPayload(BaseModel):
    amount: float = Field(..., allow_inf_nan=False)
    currency: str


class PaymentResponse(BaseModel):
    id: int
    amount: Optional[float] = None
    currency: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentCreatedResponse(BaseModel):
    id: int
    message: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
