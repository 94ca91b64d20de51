"""Payment CRUD endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from payment_server.api.deps import get_container, get_payment_service
from payment_server.api.schemas import (
    ErrorResponse,
    MessageResponse,
    PaymentCreatedResponse,
    PaymentPayload,
    PaymentResponse,
)
from payment_server.core.container import ApplicationContainer
from payment_server.modules.payments import PaymentNotFoundError, PaymentService
from payment_server.websocket.manager import PAYMENT_CREATED, PAYMENT_DELETED, PAYMENT_UPDATED

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

# SQLite stores ids as signed 64-bit integers.
PaymentId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("", response_model=list[PaymentResponse], summary="List payments")
async def list_payments(service: PaymentService = Depends(get_payment_service)):
    payments = await service.list_payments()
    return [payment.to_payload() for payment in payments]


@router.get("/{payment_id}", response_model=PaymentResponse, responses=NOT_FOUND, summary="Get a payment")
async def get_payment(payment_id: PaymentId, service: PaymentService = Depends(get_payment_service)):
    payment = await service.get_payment(payment_id)
    if payment is None:
        raise PaymentNotFoundError(payment_id)
    return payment.to_payload()


@router.post(
    "",
    response_model=PaymentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a payment",
)
async def create_payment(
    payload: PaymentPayload,
    service: PaymentService = Depends(get_payment_service),
    container: ApplicationContainer = Depends(get_container),
):
    async with container.mutation_lock:
        payment = await service.create_payment(amount=payload.amount, currency=payload.currency)
        await container.sync.after_mutation(service, PAYMENT_CREATED, payment.to_payload())
    return PaymentCreatedResponse(id=payment.id, message="Payment created successfully")


@router.put("/{payment_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Update a payment")
async def update_payment(
    payment_id: PaymentId,
    payload: PaymentPayload,
    service: PaymentService = Depends(get_payment_service),
    container: ApplicationContainer = Depends(get_container),
):
    async with container.mutation_lock:
        changed = await service.update_payment(payment_id, amount=payload.amount, currency=payload.currency)
        if changed == 0:
            raise PaymentNotFoundError(payment_id)
        await container.sync.after_mutation(
            service,
            PAYMENT_UPDATED,
            {"id": payment_id, "amount": payload.amount, "currency": payload.currency},
        )
    return MessageResponse(message="Payment updated successfully")


@router.delete("/{payment_id}", response_model=MessageResponse, responses=NOT_FOUND, summary="Delete a payment")
async def delete_payment(
    payment_id: PaymentId,
    service: PaymentService = Depends(get_payment_service),
    container: ApplicationContainer = Depends(get_container),
):
    async with container.mutation_lock:
        changed = await service.delete_payment(payment_id)
        if changed == 0:
            raise PaymentNotFoundError(payment_id)
        await container.sync.after_mutation(service, PAYMENT_DELETED, {"id": payment_id})
    return MessageResponse(message="Payment deleted successfully")
