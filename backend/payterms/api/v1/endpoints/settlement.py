"""
Due date and settlement discount API endpoints.
Mounted under /clients/{client_id}.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from uuid import UUID

from payterms.db.session import get_db
from payterms.controllers.settlement_controller import SettlementController
from payterms.schemas.document import (
    DueDateRequest,
    DueDateResponse,
    SettlementRequest,
    SettlementResponse,
)

router = APIRouter()


@router.post("/due-date", response_model=DueDateResponse)
async def compute_due_date(
    client_id: UUID,
    request: DueDateRequest,
    db: AsyncSession = Depends(get_db),
) -> DueDateResponse:
    """Compute the due date for a document date and payment terms."""
    controller = SettlementController(db)
    return await controller.compute_due_date(client_id, request)


@router.post("/settlement", response_model=SettlementResponse)
async def evaluate_settlement(
    client_id: UUID,
    request: SettlementRequest,
    db: AsyncSession = Depends(get_db),
) -> SettlementResponse:
    """Evaluate early-settlement discount eligibility for a payment date."""
    controller = SettlementController(db)
    return await controller.evaluate_settlement(client_id, request)
