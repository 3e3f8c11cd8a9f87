"""
Payment term controller.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.controllers.base_controller import BaseController
from payterms.services.payment_term_service import PaymentTermService
from payterms.schemas.payment_term import (
    PaymentTermCreate,
    PaymentTermResponse,
    PaymentTermListResponse,
    ResolvedTermResponse,
)


class PaymentTermController(BaseController):
    """Controller for payment term operations."""

    def __init__(self, session: AsyncSession):
        self.payment_term_service = PaymentTermService(session)

    async def create_payment_term(
        self,
        client_id: UUID,
        payment_term_data: PaymentTermCreate,
    ) -> PaymentTermResponse:
        """Create a custom payment term."""
        return await self.payment_term_service.create_payment_term(client_id, payment_term_data)

    async def list_payment_terms(self, client_id: UUID) -> PaymentTermListResponse:
        """List standard and custom payment terms."""
        items, total = await self.payment_term_service.list_payment_terms(client_id)
        return PaymentTermListResponse(items=items, total=total)

    async def delete_payment_term(self, client_id: UUID, term_id: str) -> None:
        """Delete a custom payment term."""
        await self.payment_term_service.delete_payment_term(client_id, term_id)

    async def resolve_payment_term(self, client_id: UUID, label: Optional[str]) -> ResolvedTermResponse:
        """Resolve a payment terms label."""
        return await self.payment_term_service.resolve_label(client_id, label)
