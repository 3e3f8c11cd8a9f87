"""
Discount conflict guard API endpoints.
Mounted under /clients/{client_id}/discount-guard.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from payterms.db.session import get_db
from payterms.controllers.discount_guard_controller import DiscountGuardController
from payterms.schemas.discount_guard import (
    GuardDecision,
    ManualDiscountChange,
    PaymentTermsChange,
    ReconcileRequest,
)

router = APIRouter()


@router.post("/manual-discount", response_model=GuardDecision)
async def manual_discount_changed(
    client_id: UUID,
    change: ManualDiscountChange,
    db: AsyncSession = Depends(get_db),
) -> GuardDecision:
    """Apply the exclusion rule after the manual discount field changed."""
    controller = DiscountGuardController(db)
    return await controller.manual_discount_changed(client_id, change)


@router.post("/payment-terms", response_model=GuardDecision)
async def payment_terms_changed(
    client_id: UUID,
    change: PaymentTermsChange,
    db: AsyncSession = Depends(get_db),
) -> GuardDecision:
    """Apply the exclusion rule after a payment terms selection."""
    controller = DiscountGuardController(db)
    return await controller.payment_terms_changed(client_id, change)


@router.post("/reconcile", response_model=GuardDecision)
async def reconcile(
    client_id: UUID,
    request: ReconcileRequest,
    db: AsyncSession = Depends(get_db),
) -> GuardDecision:
    """Settle both discount inputs from a bulk update (409 when no winner can be chosen)."""
    controller = DiscountGuardController(db)
    return await controller.reconcile(client_id, request)
