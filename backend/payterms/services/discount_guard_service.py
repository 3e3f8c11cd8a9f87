"""
Discount guard service.
Applies the manual/payment-terms discount exclusion rule to form edits.
"""

from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.services.base_service import BaseService
from payterms.services.payment_term_service import PaymentTermService
from payterms.engine import discount_guard
from payterms.schemas.discount_guard import (
    GuardDecision,
    ManualDiscountChange,
    PaymentTermsChange,
    ReconcileRequest,
)


class DiscountGuardService(BaseService):
    """Service for discount conflict decisions."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.payment_term_service = PaymentTermService(session)

    async def manual_discount_changed(self, client_id: UUID, change: ManualDiscountChange) -> GuardDecision:
        """Decide the form state after the manual discount field changed."""
        catalog = await self.payment_term_service.load_catalog(client_id)
        return discount_guard.on_manual_discount_changed(
            change.new_percent,
            change.current_term_label,
            catalog,
        )

    async def payment_terms_changed(self, client_id: UUID, change: PaymentTermsChange) -> GuardDecision:
        """Decide the form state after a payment terms selection."""
        catalog = await self.payment_term_service.load_catalog(client_id)
        return discount_guard.on_term_changed(
            change.new_label,
            change.current_manual_discount,
            catalog,
        )

    async def reconcile(self, client_id: UUID, request: ReconcileRequest) -> GuardDecision:
        """
        Settle a bulk update carrying both discount inputs.

        Raises:
            ConflictError: If both discounts are set and no last edited field is given
        """
        catalog = await self.payment_term_service.load_catalog(client_id)
        return discount_guard.reconcile(
            request.manual_discount_percent,
            request.payment_terms_label,
            request.last_edited,
            catalog,
        )
