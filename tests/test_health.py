"""
Health endpoint and service tests.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from payterms.services.health_service import HealthService, check_term_parser


@pytest.mark.asyncio
async def test_health_reports_store_and_parser(test_client, client_id):
    response = await test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["checks"] == {"payment_term_store": "ok", "term_parser": "ok"}
    assert data["stored_terms"] == 0
    assert data["discount_conflict_policy"] == "last_write_wins"
    assert data["uptime"].startswith("PT")


@pytest.mark.asyncio
async def test_health_counts_stored_terms(test_client, client_id):
    await test_client.post(f"/api/v1/clients/{client_id}/payment-terms", json={"net_days": 21})

    data = (await test_client.get("/health")).json()

    assert data["status"] == "ok"
    assert data["stored_terms"] == 1


@pytest.mark.asyncio
async def test_health_degraded_without_payment_term_table():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_maker() as session:
        health = await HealthService().get_health(session)

    await engine.dispose()

    assert health.status == "degraded"
    assert health.stored_terms is None
    assert health.checks["payment_term_store"].startswith("error")
    assert health.checks["term_parser"] == "ok"


def test_term_parser_self_check():
    assert check_term_parser() is True
