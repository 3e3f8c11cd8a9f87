"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from payterms.api.v1.endpoints import (
    health,
    payment_terms,
    settlement,
    discount_guard,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(
    payment_terms.router,
    prefix="/clients/{client_id}/payment-terms",
    tags=["payment-terms"],
)
api_router.include_router(
    settlement.router,
    prefix="/clients/{client_id}",
    tags=["settlement"],
)
api_router.include_router(
    discount_guard.router,
    prefix="/clients/{client_id}/discount-guard",
    tags=["discount-guard"],
)
