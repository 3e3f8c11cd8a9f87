"""
Discount guard controller.
"""

from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.controllers.base_controller import BaseController
from payterms.services.discount_guard_service import DiscountGuardService
from payterms.schemas.discount_guard import (
    GuardDecision,
    ManualDiscountChange,
    PaymentTermsChange,
    ReconcileRequest,
)


class DiscountGuardController(BaseController):
    """Controller for discount conflict decisions."""

    def __init__(self, session: AsyncSession):
        self.discount_guard_service = DiscountGuardService(session)

    async def manual_discount_changed(self, client_id: UUID, change: ManualDiscountChange) -> GuardDecision:
        return await self.discount_guard_service.manual_discount_changed(client_id, change)

    async def payment_terms_changed(self, client_id: UUID, change: PaymentTermsChange) -> GuardDecision:
        return await self.discount_guard_service.payment_terms_changed(client_id, change)

    async def reconcile(self, client_id: UUID, request: ReconcileRequest) -> GuardDecision:
        return await self.discount_guard_service.reconcile(client_id, request)
