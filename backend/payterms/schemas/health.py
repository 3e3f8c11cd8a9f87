"""
Health check response schemas.
"""

from pydantic import BaseModel
from typing import Dict, Optional


class HealthResponse(BaseModel):
    """Health check response schema."""
    status: str
    version: str
    uptime: str
    checks: Dict[str, str] = {}
    stored_terms: Optional[int] = None  # None when the store is unreachable
    discount_conflict_policy: str
