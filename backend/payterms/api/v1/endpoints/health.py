"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.db.session import get_db
from payterms.schemas.health import HealthResponse
from payterms.deps.di_container import get_container

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def get_health(
    db: AsyncSession = Depends(get_db),
) -> HealthResponse:
    """Payment term store reachability and parser self-check."""
    controller = get_container().health_controller()
    return await controller.get_health(db)
