"""
Settlement controller.
"""

from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.controllers.base_controller import BaseController
from payterms.services.settlement_service import SettlementService
from payterms.schemas.document import (
    DueDateRequest,
    DueDateResponse,
    SettlementRequest,
    SettlementResponse,
)


class SettlementController(BaseController):
    """Controller for due date and settlement operations."""

    def __init__(self, session: AsyncSession):
        self.settlement_service = SettlementService(session)

    async def compute_due_date(self, client_id: UUID, request: DueDateRequest) -> DueDateResponse:
        """Compute a document's due date."""
        return await self.settlement_service.compute_due_date(client_id, request)

    async def evaluate_settlement(self, client_id: UUID, request: SettlementRequest) -> SettlementResponse:
        """Evaluate early-settlement discount for a payment date."""
        return await self.settlement_service.evaluate_settlement(client_id, request)
