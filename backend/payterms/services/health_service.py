"""
Health service.
Reports whether the payment term store answers and whether label
derivation and parsing still agree.
"""

import time
from decimal import Decimal
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payterms.core.config import settings
from payterms.core.logging import get_logger
from payterms.services.base_service import BaseService
from payterms.db.repositories.payment_term_repository import PaymentTermRepository
from payterms.engine.term_catalog import STANDARD_NET_DAYS, build_label
from payterms.engine.term_parser import resolve
from payterms.schemas.health import HealthResponse

logger = get_logger(__name__)

# Labels the parser must read back exactly as build_label wrote them
SELF_CHECK_TERMS = [
    (30, Decimal("2"), 10),
    (60, Decimal("1.5"), 15),
    (45, None, None),
]


def check_term_parser() -> bool:
    """Standard labels and derived labels resolve to the terms they name."""
    for label, net_days in STANDARD_NET_DAYS.items():
        if resolve(label).net_days != net_days:
            return False
    for net_days, percent, days in SELF_CHECK_TERMS:
        term = resolve(build_label(net_days, percent, days))
        if (term.net_days, term.discount_percent, term.discount_days) != (net_days, percent, days):
            return False
    return True


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self):
        self.start_time = time.time()

    async def get_health(self, session: AsyncSession) -> HealthResponse:
        """
        Get service health.

        Args:
            session: Session on the payment term store

        Returns:
            HealthResponse; status is "degraded" when any check fails
        """
        checks = {}
        stored_terms = None

        try:
            stored_terms = await PaymentTermRepository(session).count_all()
            checks["payment_term_store"] = "ok"
        except SQLAlchemyError as e:
            await session.rollback()
            logger.warning(f"Payment term store check failed: {e}")
            checks["payment_term_store"] = f"error: {type(e).__name__}"

        checks["term_parser"] = "ok" if check_term_parser() else "error"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            version=settings.VERSION,
            uptime=f"PT{int(time.time() - self.start_time)}S",
            checks=checks,
            stored_terms=stored_terms,
            discount_conflict_policy=settings.DISCOUNT_CONFLICT_POLICY,
        )
