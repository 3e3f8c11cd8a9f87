"""
Settlement service.
Runs due date and early-settlement evaluations against a client's catalog.
"""

from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.core.logging import get_logger
from payterms.services.base_service import BaseService
from payterms.services.payment_term_service import PaymentTermService
from payterms.engine.due_date import due_date_for
from payterms.engine.settlement import evaluate, suggest_payment_amount
from payterms.engine.term_parser import resolve
from payterms.schemas.document import (
    DueDateRequest,
    DueDateResponse,
    SettlementRequest,
    SettlementResponse,
)
from payterms.schemas.payment_term import ResolvedTermResponse

logger = get_logger(__name__)


class SettlementService(BaseService):
    """Service for due date and settlement discount operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.payment_term_service = PaymentTermService(session)

    async def compute_due_date(self, client_id: UUID, request: DueDateRequest) -> DueDateResponse:
        """Compute the due date for a document date and payment terms label."""
        catalog = await self.payment_term_service.load_catalog(client_id)
        term = resolve(request.payment_terms_label, catalog)
        return DueDateResponse(
            document_date=request.document_date,
            due_date=due_date_for(request.document_date, term),
            term=ResolvedTermResponse.from_resolved(request.payment_terms_label, term),
        )

    async def evaluate_settlement(self, client_id: UUID, request: SettlementRequest) -> SettlementResponse:
        """Evaluate a payment date and suggest the payment amount to prefill."""
        catalog = await self.payment_term_service.load_catalog(client_id)
        result = evaluate(request.document, request.payment_date, catalog)
        suggested = suggest_payment_amount(
            result,
            current_amount=request.current_payment_amount,
            previous_suggestion=request.previous_suggestion,
        )

        logger.info(
            "Settlement evaluated",
            extra={
                "client_id": str(client_id),
                "eligible": result.eligible,
                "discount_source": result.discount_source.value,
            },
        )
        return SettlementResponse(result=result, suggested_payment_amount=suggested)
