"""
Payment term endpoint tests.
"""

import uuid
from decimal import Decimal

import pytest


def terms_url(client_id) -> str:
    return f"/api/v1/clients/{client_id}/payment-terms"


@pytest.mark.asyncio
async def test_list_returns_standard_terms(test_client, client_id):
    """A client without custom terms sees the five standard terms."""
    response = await test_client.get(terms_url(client_id))

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    assert all(item["is_standard"] for item in data["items"])
    assert data["items"][0]["label"] == "Due on Receipt"


@pytest.mark.asyncio
async def test_create_discount_term_derives_label(test_client, client_id):
    response = await test_client.post(
        terms_url(client_id),
        json={"net_days": 30, "discount_percent": "2", "discount_days": 10},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["label"] == "2%/10 Net 30"
    assert data["is_standard"] is False
    uuid.UUID(data["id"])

    listing = (await test_client.get(terms_url(client_id))).json()
    assert listing["total"] == 6
    assert listing["items"][-1]["label"] == "2%/10 Net 30"


@pytest.mark.asyncio
async def test_create_rejects_discount_window_past_due_date(test_client, client_id):
    response = await test_client.post(
        terms_url(client_id),
        json={"net_days": 30, "discount_percent": 2, "discount_days": 45},
    )

    assert response.status_code == 422
    assert "Discount days (45)" in response.json()["error"]["message"]

    listing = (await test_client.get(terms_url(client_id))).json()
    assert listing["total"] == 5


@pytest.mark.asyncio
async def test_create_rejects_duplicate_label(test_client, client_id):
    payload = {"label": "Supplier Special", "net_days": 40}

    first = await test_client.post(terms_url(client_id), json=payload)
    second = await test_client.post(terms_url(client_id), json=payload)

    assert first.status_code == 201
    assert second.status_code == 422
    assert "already exists" in second.json()["error"]["message"]


@pytest.mark.asyncio
async def test_terms_are_isolated_per_client(test_client, client_id):
    await test_client.post(terms_url(client_id), json={"net_days": 21})

    other = (await test_client.get(terms_url(uuid.uuid4()))).json()

    assert other["total"] == 5


@pytest.mark.asyncio
async def test_delete_custom_term(test_client, client_id):
    created = (await test_client.post(terms_url(client_id), json={"net_days": 21})).json()

    response = await test_client.delete(f"{terms_url(client_id)}/{created['id']}")
    assert response.status_code == 204

    listing = (await test_client.get(terms_url(client_id))).json()
    assert listing["total"] == 5

    again = await test_client.delete(f"{terms_url(client_id)}/{created['id']}")
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_delete_standard_term_is_refused(test_client, client_id):
    response = await test_client.delete(f"{terms_url(client_id)}/standard_net_30")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_unknown_id(test_client, client_id):
    response = await test_client.delete(f"{terms_url(client_id)}/not-a-term")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_resolve_label_pattern_and_catalog(test_client, client_id):
    await test_client.post(
        terms_url(client_id),
        json={"label": "Early Bird", "net_days": 21, "discount_percent": 3, "discount_days": 7},
    )

    pattern = (await test_client.get(f"{terms_url(client_id)}/resolve", params={"label": "5%/10 Net 30"})).json()
    custom = (await test_client.get(f"{terms_url(client_id)}/resolve", params={"label": "Early Bird"})).json()
    unknown = (await test_client.get(f"{terms_url(client_id)}/resolve", params={"label": "COD"})).json()

    assert pattern["source"] == "discount_pattern"
    assert pattern["net_days"] == 30
    assert pattern["discount_days"] == 10
    assert pattern["has_discount"] is True

    assert custom["source"] == "catalog"
    assert custom["net_days"] == 21

    assert unknown["is_fallback"] is True
    assert unknown["net_days"] == 30


@pytest.mark.asyncio
async def test_create_rejects_percent_the_store_would_round(test_client, client_id):
    response = await test_client.post(
        terms_url(client_id),
        json={"net_days": 30, "discount_percent": "2.125", "discount_days": 10},
    )

    assert response.status_code == 422
    assert "decimal places" in response.json()["error"]["message"]

    listing = (await test_client.get(terms_url(client_id))).json()
    assert listing["total"] == 5


@pytest.mark.asyncio
async def test_stored_fractional_percent_survives_resolve_and_settlement(test_client, client_id):
    created = await test_client.post(
        terms_url(client_id),
        json={"net_days": 30, "discount_percent": "2.25", "discount_days": 10},
    )
    assert created.status_code == 201
    label = created.json()["label"]
    assert label == "2.25%/10 Net 30"

    resolved = (await test_client.get(f"{terms_url(client_id)}/resolve", params={"label": label})).json()
    assert resolved["source"] == "catalog"
    assert Decimal(resolved["discount_percent"]) == Decimal("2.25")

    settlement = await test_client.post(
        f"/api/v1/clients/{client_id}/settlement",
        json={
            "document": {
                "document_date": "2024-01-01",
                "total_amount": "10000",
                "payment_terms_label": label,
            },
            "payment_date": "2024-01-05",
        },
    )
    result = settlement.json()["result"]
    assert result["eligible"] is True
    assert Decimal(result["discount_amount"]) == Decimal("225.00")
    assert Decimal(result["payable_amount"]) == Decimal("9775.00")


@pytest.mark.asyncio
async def test_delete_other_clients_term_is_not_found(test_client, client_id):
    created = (await test_client.post(terms_url(client_id), json={"net_days": 21})).json()

    response = await test_client.delete(f"{terms_url(uuid.uuid4())}/{created['id']}")
    assert response.status_code == 404

    listing = (await test_client.get(terms_url(client_id))).json()
    assert listing["total"] == 6
