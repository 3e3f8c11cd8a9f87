"""
Payment term Pydantic schemas for request/response validation.

Catalog invariants (positive net days, discount window inside the net
period) are enforced by TermCatalog.add so that every write path raises the
same ValidationError; these schemas only describe shape.
"""

import enum
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class TermSource(str, enum.Enum):
    """Where a resolved term came from."""
    STANDARD = "standard"
    CATALOG = "catalog"
    DISCOUNT_PATTERN = "discount_pattern"
    NET_PATTERN = "net_pattern"
    FALLBACK = "fallback"


class PaymentTermBase(BaseModel):
    """Base payment term schema with common fields."""
    net_days: int
    discount_percent: Optional[Decimal] = None
    discount_days: Optional[int] = None

    @property
    def has_discount(self) -> bool:
        return self.discount_percent is not None and self.discount_days is not None


class PaymentTermCreate(PaymentTermBase):
    """Schema for creating a custom payment term. Label is derived when omitted."""
    label: Optional[str] = Field(None, min_length=1, max_length=100)


class PaymentTerm(PaymentTermBase):
    """A named payment term as held by a TermCatalog."""
    id: str
    label: str = Field(..., min_length=1, max_length=100)

    class Config:
        from_attributes = True


class PaymentTermResponse(PaymentTerm):
    """Schema for payment term response."""
    is_standard: bool = False


class PaymentTermListResponse(BaseModel):
    """Schema for payment term list response."""
    items: List[PaymentTermResponse]
    total: int


class ResolvedTerm(BaseModel):
    """Structured interpretation of a payment terms label."""
    net_days: int
    discount_percent: Optional[Decimal] = None
    discount_days: Optional[int] = None
    source: TermSource

    @property
    def has_discount(self) -> bool:
        return bool(self.discount_percent) and bool(self.discount_days)

    @property
    def is_fallback(self) -> bool:
        return self.source == TermSource.FALLBACK


class ResolvedTermResponse(BaseModel):
    """Resolved term plus the label it was resolved from."""
    label: str
    net_days: int
    discount_percent: Optional[Decimal] = None
    discount_days: Optional[int] = None
    source: TermSource
    has_discount: bool
    is_fallback: bool

    @classmethod
    def from_resolved(cls, label: str, term: ResolvedTerm) -> "ResolvedTermResponse":
        return cls(
            label=label,
            net_days=term.net_days,
            discount_percent=term.discount_percent,
            discount_days=term.discount_days,
            source=term.source,
            has_discount=term.has_discount,
            is_fallback=term.is_fallback,
        )
