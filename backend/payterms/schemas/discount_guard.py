"""
Discount conflict guard schemas.
"""

import enum
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class EditedField(str, enum.Enum):
    """Form field the user edited last."""
    MANUAL_DISCOUNT = "manual_discount"
    PAYMENT_TERMS = "payment_terms"


class GuardDecision(BaseModel):
    """
    Resulting form state after a discount or term edit.
    `accepted` is False whenever the edit put the document into conflict
    and one side had to be reset.
    """
    accepted: bool
    term_label: str
    manual_discount_percent: Decimal
    reset_term_label: Optional[str] = None
    cleared_field: Optional[EditedField] = None
    error_message: Optional[str] = None
    info_message: Optional[str] = None


class ManualDiscountChange(BaseModel):
    """Schema for a manual discount field edit."""
    new_percent: Decimal = Field(..., ge=0, le=100)
    current_term_label: str = "Net 30"


class PaymentTermsChange(BaseModel):
    """Schema for a payment terms selection edit."""
    new_label: str
    current_manual_discount: Decimal = Field(Decimal("0"), ge=0, le=100)


class ReconcileRequest(BaseModel):
    """Schema for a bulk update carrying both discount inputs."""
    manual_discount_percent: Decimal = Field(Decimal("0"), ge=0, le=100)
    payment_terms_label: str = "Net 30"
    last_edited: Optional[EditedField] = None
