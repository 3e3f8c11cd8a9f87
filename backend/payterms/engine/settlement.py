"""
Early-settlement discount evaluation.

Given a document and a candidate payment date, decide whether the payment
terms discount applies and what should be paid. A discount entered in the
document's manual discount field is already part of balance_due and is
reported as-is; the payment terms discount is only granted inside the
discount window.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from payterms.core.config import settings
from payterms.engine.due_date import DateLike, as_date, discount_deadline, due_date_for
from payterms.engine.term_catalog import TermCatalog
from payterms.engine.term_parser import resolve
from payterms.schemas.document import DiscountSource, Document, SettlementResult

ZERO = Decimal("0")


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(settings.MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def evaluate(
    document: Document,
    payment_date: DateLike,
    catalog: Optional[TermCatalog] = None,
) -> SettlementResult:
    """
    Evaluate a candidate payment date against a document.

    The document is never modified; identical inputs give identical results.

    Args:
        document: Bill or invoice snapshot
        payment_date: Date the payment would be recorded on
        catalog: Client's custom terms used to resolve the document's label

    Returns:
        SettlementResult with eligibility and amounts
    """
    balance_due = document.balance_due
    if balance_due is None:
        balance_due = max(document.total_amount - document.discount_amount, ZERO)

    term = resolve(document.payment_terms_label, catalog)
    due_date = as_date(document.due_date) if document.due_date else due_date_for(document.document_date, term)

    # Manual discount: already taken off balance_due at creation time
    if document.discount_amount > 0:
        return SettlementResult(
            eligible=False,
            discount_amount=document.discount_amount,
            payable_amount=balance_due,
            full_amount=document.total_amount,
            discount_source=DiscountSource.MANUAL,
            due_date=due_date,
        )

    if not term.has_discount:
        return SettlementResult(
            eligible=False,
            discount_amount=ZERO,
            payable_amount=balance_due,
            full_amount=balance_due,
            due_date=due_date,
        )

    document_date = as_date(document.document_date)
    paid_on = as_date(payment_date)
    deadline = discount_deadline(document_date, term.discount_days)

    after_document_date = paid_on >= document_date
    before_due_date = paid_on <= due_date
    within_discount_window = paid_on <= deadline
    eligible = after_document_date and before_due_date and within_discount_window

    # Reported even when not eligible so the UI can show what was missed
    discount_amount = _money(document.total_amount * term.discount_percent / Decimal("100"))
    payable_amount = max(balance_due - discount_amount, ZERO) if eligible else balance_due

    return SettlementResult(
        eligible=eligible,
        discount_amount=discount_amount,
        payable_amount=payable_amount,
        full_amount=balance_due,
        discount_days=term.discount_days,
        discount_source=DiscountSource.PAYMENT_TERMS,
        due_date=due_date,
        discount_deadline=deadline,
    )


def suggest_payment_amount(
    result: SettlementResult,
    current_amount: Optional[Decimal] = None,
    previous_suggestion: Optional[Decimal] = None,
) -> Decimal:
    """
    Pick the amount to prefill in a payment form.

    The new suggestion replaces the current amount only when the field is
    empty/zero or still holds the previous suggestion; an amount the user
    typed is returned unchanged.
    """
    suggestion = result.payable_amount
    if current_amount is None or current_amount == 0:
        return suggestion
    if (
        previous_suggestion is not None
        and abs(current_amount - previous_suggestion) <= settings.PAYMENT_AMOUNT_TOLERANCE
    ):
        return suggestion
    return current_amount
