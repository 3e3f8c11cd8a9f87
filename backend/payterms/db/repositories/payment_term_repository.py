"""
Payment term repository for the per-client keyed store.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func

from payterms.db.repositories.base_repository import BaseRepository
from payterms.models.payment_term import StoredPaymentTerm


class PaymentTermRepository(BaseRepository[StoredPaymentTerm]):
    """Repository for custom payment term operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(StoredPaymentTerm, session)

    async def list_for_client(self, client_id: UUID) -> List[StoredPaymentTerm]:
        """List a client's custom terms ordered by net days, then label."""
        result = await self.session.execute(
            select(StoredPaymentTerm)
            .where(StoredPaymentTerm.client_id == client_id)
            .order_by(StoredPaymentTerm.net_days, StoredPaymentTerm.label)
        )
        return list(result.scalars().all())

    async def get_for_client(self, client_id: UUID, term_id: UUID) -> Optional[StoredPaymentTerm]:
        """Get one of a client's terms by ID."""
        result = await self.session.execute(
            select(StoredPaymentTerm).where(
                StoredPaymentTerm.client_id == client_id,
                StoredPaymentTerm.id == term_id,
            )
        )
        return result.scalar_one_or_none()

    async def delete_for_client(self, client_id: UUID, term_id: UUID) -> bool:
        """Delete one of a client's terms. True if a row was removed."""
        result = await self.session.execute(
            delete(StoredPaymentTerm).where(
                StoredPaymentTerm.client_id == client_id,
                StoredPaymentTerm.id == term_id,
            )
        )
        await self.session.flush()
        return result.rowcount > 0

    async def count_all(self) -> int:
        """Number of custom terms stored across all clients."""
        result = await self.session.execute(select(func.count()).select_from(StoredPaymentTerm))
        return result.scalar_one()
