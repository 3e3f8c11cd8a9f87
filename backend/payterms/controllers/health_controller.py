"""
Health controller.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from payterms.controllers.base_controller import BaseController
from payterms.schemas.health import HealthResponse
from payterms.services.health_service import HealthService


class HealthController(BaseController):
    """Controller for health check operations."""

    def __init__(self, health_service: HealthService):
        self.health_service = health_service

    async def get_health(self, session: AsyncSession) -> HealthResponse:
        return await self.health_service.get_health(session)
