"""
Payment term API endpoints.
Mounted under /clients/{client_id}/payment-terms.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from payterms.db.session import get_db
from payterms.controllers.payment_term_controller import PaymentTermController
from payterms.schemas.payment_term import (
    PaymentTermCreate,
    PaymentTermResponse,
    PaymentTermListResponse,
    ResolvedTermResponse,
)

router = APIRouter()


@router.post("", response_model=PaymentTermResponse, status_code=status.HTTP_201_CREATED)
async def create_payment_term(
    client_id: UUID,
    payment_term_data: PaymentTermCreate,
    db: AsyncSession = Depends(get_db),
) -> PaymentTermResponse:
    """Create a custom payment term for a client."""
    controller = PaymentTermController(db)
    return await controller.create_payment_term(client_id, payment_term_data)


@router.get("", response_model=PaymentTermListResponse)
async def list_payment_terms(
    client_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> PaymentTermListResponse:
    """List standard and custom payment terms."""
    controller = PaymentTermController(db)
    return await controller.list_payment_terms(client_id)


@router.get("/resolve", response_model=ResolvedTermResponse)
async def resolve_payment_term(
    client_id: UUID,
    label: Optional[str] = Query(None, max_length=100),
    db: AsyncSession = Depends(get_db),
) -> ResolvedTermResponse:
    """Resolve a payment terms label into net days and discount."""
    controller = PaymentTermController(db)
    return await controller.resolve_payment_term(client_id, label)


@router.delete("/{term_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment_term(
    client_id: UUID,
    term_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a custom payment term."""
    controller = PaymentTermController(db)
    await controller.delete_payment_term(client_id, term_id)
