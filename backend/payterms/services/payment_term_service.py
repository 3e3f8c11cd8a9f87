"""
Payment term service: per-client custom term store and catalog snapshots.
"""

import uuid
from typing import List, Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.core.exceptions import AppException, NotFoundError, ValidationError
from payterms.core.logging import get_logger
from payterms.services.base_service import BaseService
from payterms.db.repositories.payment_term_repository import PaymentTermRepository
from payterms.engine.term_catalog import STANDARD_TERMS, TermCatalog
from payterms.engine.term_parser import resolve
from payterms.models.payment_term import StoredPaymentTerm
from payterms.schemas.payment_term import (
    PaymentTerm,
    PaymentTermCreate,
    PaymentTermResponse,
    ResolvedTermResponse,
)

logger = get_logger(__name__)


def _to_term(row: StoredPaymentTerm) -> PaymentTerm:
    return PaymentTerm(
        id=str(row.id),
        label=row.label,
        net_days=row.net_days,
        discount_percent=row.discount_percent,
        discount_days=row.discount_days,
    )


class PaymentTermService(BaseService):
    """Service for payment term operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.payment_term_repo = PaymentTermRepository(session)

    async def load_catalog(self, client_id: UUID) -> TermCatalog:
        """Load a consistent snapshot of a client's custom terms."""
        rows = await self.payment_term_repo.list_for_client(client_id)
        return TermCatalog.from_terms([_to_term(row) for row in rows])

    async def list_payment_terms(self, client_id: UUID) -> tuple[List[PaymentTermResponse], int]:
        """List standard terms followed by the client's custom terms."""
        catalog = await self.load_catalog(client_id)
        items = [
            PaymentTermResponse(**term.model_dump(), is_standard=True)
            for term in STANDARD_TERMS
        ]
        items.extend(PaymentTermResponse(**term.model_dump()) for term in catalog)
        return items, len(items)

    async def create_payment_term(
        self,
        client_id: UUID,
        payment_term_data: PaymentTermCreate,
    ) -> PaymentTermResponse:
        """
        Validate a custom term against the client's catalog and store it.

        Raises:
            ValidationError: If the term breaks a catalog invariant or its label is taken
        """
        catalog = await self.load_catalog(client_id)
        term_id = uuid.uuid4()
        term = catalog.add(payment_term_data, term_id=str(term_id))

        try:
            await self.payment_term_repo.create(
                id=term_id,
                client_id=client_id,
                label=term.label,
                net_days=term.net_days,
                discount_percent=term.discount_percent,
                discount_days=term.discount_days,
            )
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ValidationError(
                f"Payment term '{term.label}' already exists",
                details={"label": term.label},
            )

        logger.info(
            f"Custom payment term created: {term.label}",
            extra={"client_id": str(client_id), "term_id": term.id},
        )
        return PaymentTermResponse(**term.model_dump())

    async def delete_payment_term(self, client_id: UUID, term_id: str) -> None:
        """
        Delete a custom term. Documents keep their label snapshot, so nothing
        referencing the term is checked.

        Raises:
            AppException: If the id names a standard term
            NotFoundError: If the client has no such custom term
        """
        if any(term.id == term_id for term in STANDARD_TERMS):
            raise AppException("Standard payment terms cannot be deleted", status_code=400)

        try:
            stored_id = UUID(term_id)
        except ValueError:
            raise NotFoundError("Payment term not found", details={"term_id": term_id})

        row = await self.payment_term_repo.get_for_client(client_id, stored_id)
        if not row:
            raise NotFoundError("Payment term not found", details={"term_id": term_id})

        label = row.label
        await self.payment_term_repo.delete_for_client(client_id, stored_id)
        await self.session.commit()
        logger.info(
            f"Custom payment term deleted: {label}",
            extra={"client_id": str(client_id), "term_id": term_id},
        )

    async def resolve_label(self, client_id: UUID, label: Optional[str]) -> ResolvedTermResponse:
        """Interpret a label against the client's catalog."""
        catalog = await self.load_catalog(client_id)
        return ResolvedTermResponse.from_resolved(label or "", resolve(label, catalog))
