"""
Payment term repository tests against the in-memory store.
"""

import uuid
from decimal import Decimal

import pytest

from payterms.db.repositories.payment_term_repository import PaymentTermRepository


@pytest.mark.asyncio
async def test_get_for_client_is_scoped_to_client(test_db_session, client_id):
    repo = PaymentTermRepository(test_db_session)
    row = await repo.create(
        id=uuid.uuid4(),
        client_id=client_id,
        label="2%/10 Net 30",
        net_days=30,
        discount_percent=Decimal("2"),
        discount_days=10,
    )

    found = await repo.get_for_client(client_id, row.id)
    assert found is not None
    assert found.label == "2%/10 Net 30"

    assert await repo.get_for_client(uuid.uuid4(), row.id) is None


@pytest.mark.asyncio
async def test_delete_for_client_reports_removal(test_db_session, client_id):
    repo = PaymentTermRepository(test_db_session)
    row = await repo.create(id=uuid.uuid4(), client_id=client_id, label="Net 21", net_days=21)

    assert await repo.delete_for_client(client_id, row.id) is True
    assert await repo.delete_for_client(client_id, row.id) is False
    assert await repo.list_for_client(client_id) == []
