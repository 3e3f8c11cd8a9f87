"""
Document and settlement Pydantic schemas.
A Document is the bill or invoice snapshot the engine computes against.
"""

import enum
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from payterms.core.config import settings
from payterms.schemas.payment_term import ResolvedTermResponse


class DiscountSource(str, enum.Enum):
    """Which discount path a settlement was computed from."""
    MANUAL = "manual"
    PAYMENT_TERMS = "payment_terms"
    NONE = "none"


class Document(BaseModel):
    """Bill or invoice snapshot."""
    document_date: date
    due_date: Optional[date] = None  # Derived from the payment terms when missing
    total_amount: Decimal = Field(..., ge=0)  # Full amount before any discount
    discount_amount: Decimal = Field(Decimal("0"), ge=0)  # Manual discount-field amount
    discount_percent: Decimal = Field(Decimal("0"), ge=0, le=100)  # Manual discount-field percent
    payment_terms_label: str = "Net 30"
    balance_due: Optional[Decimal] = Field(None, ge=0)

    @model_validator(mode='after')
    def apply_manual_discount(self):
        """
        Tie the manual discount amount to its percent and default balance_due.

        A percent without an amount fills the amount in; a percent whose
        amount disagrees with total_amount by more than the payment tolerance
        is rejected.
        """
        if self.discount_percent > 0:
            expected = (self.total_amount * self.discount_percent / Decimal("100")).quantize(
                settings.MONEY_QUANTUM, rounding=ROUND_HALF_UP
            )
            if self.discount_amount == 0:
                self.discount_amount = expected
            elif abs(self.discount_amount - expected) > settings.PAYMENT_AMOUNT_TOLERANCE:
                raise ValueError(
                    f"Discount amount {self.discount_amount} does not match "
                    f"{self.discount_percent}% of total amount {self.total_amount} ({expected})"
                )
        if self.balance_due is None:
            self.balance_due = max(self.total_amount - self.discount_amount, Decimal("0"))
        return self


class SettlementResult(BaseModel):
    """Outcome of evaluating a candidate payment date against a document."""
    eligible: bool
    discount_amount: Decimal
    payable_amount: Decimal
    full_amount: Decimal
    discount_days: int = 0
    discount_source: DiscountSource = DiscountSource.NONE
    due_date: Optional[date] = None
    discount_deadline: Optional[date] = None


class DueDateRequest(BaseModel):
    """Schema for a due date computation request."""
    document_date: date
    payment_terms_label: str = "Net 30"


class DueDateResponse(BaseModel):
    """Schema for a due date computation response."""
    document_date: date
    due_date: date
    term: ResolvedTermResponse


class SettlementRequest(BaseModel):
    """Schema for evaluating a payment date against a document."""
    document: Document
    payment_date: date
    current_payment_amount: Optional[Decimal] = Field(None, ge=0)  # What the payment form currently holds
    previous_suggestion: Optional[Decimal] = Field(None, ge=0)  # Last amount the service suggested


class SettlementResponse(BaseModel):
    """Schema for settlement evaluation response."""
    result: SettlementResult
    suggested_payment_amount: Decimal
