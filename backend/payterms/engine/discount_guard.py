"""
Mutual exclusion between the manual discount field and a payment terms discount.

A document may carry a manual discount or an early-payment discount from its
terms, never both. Each function takes the edit that just happened plus the
other field's current value and returns the resulting form state. Whenever
an edit lands in conflict, one side is reset and the decision carries a
message naming what was reset.
"""

from decimal import Decimal
from typing import Optional, Union

from payterms.core.config import settings
from payterms.core.exceptions import ConflictError
from payterms.core.logging import get_logger
from payterms.engine.term_catalog import TermCatalog, format_percent
from payterms.engine.term_parser import has_term_discount, resolve
from payterms.schemas.discount_guard import EditedField, GuardDecision
from payterms.schemas.payment_term import ResolvedTerm

logger = get_logger(__name__)

Number = Union[Decimal, int, float, str]

CONFLICT_MESSAGE = "Cannot use both discount field and payment terms discount."


def _percent(value: Optional[Number]) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def _discount_info(term: ResolvedTerm) -> str:
    return (
        f"Discount of {format_percent(term.discount_percent)}% will be available if paid within "
        f"{term.discount_days} days. Totals stay unchanged until payment."
    )


def on_manual_discount_changed(
    new_percent: Number,
    current_term_label: str,
    catalog: Optional[TermCatalog] = None,
) -> GuardDecision:
    """
    Handle an edit of the manual discount field.

    The manual value always wins: if the selected term carries a discount,
    the term is reset to settings.CONFLICT_RESET_TERM_LABEL.
    """
    manual = _percent(new_percent)

    if manual > 0 and has_term_discount(current_term_label, catalog):
        reset_label = settings.CONFLICT_RESET_TERM_LABEL
        logger.info(
            "Manual discount conflicts with payment terms discount, resetting terms",
            extra={"payment_terms_label": current_term_label, "reset_to": reset_label},
        )
        return GuardDecision(
            accepted=False,
            term_label=reset_label,
            manual_discount_percent=manual,
            reset_term_label=reset_label,
            cleared_field=EditedField.PAYMENT_TERMS,
            error_message=(
                f"{CONFLICT_MESSAGE} Payment terms '{current_term_label}' have been reset to '{reset_label}'."
            ),
        )

    return GuardDecision(
        accepted=True,
        term_label=current_term_label,
        manual_discount_percent=manual,
    )


def on_term_changed(
    new_label: str,
    current_manual_discount: Number,
    catalog: Optional[TermCatalog] = None,
    policy: Optional[str] = None,
) -> GuardDecision:
    """
    Handle a payment terms selection.

    With a discount term and a nonzero manual discount the outcome follows
    `policy` (default settings.DISCOUNT_CONFLICT_POLICY):
        last_write_wins: keep the new term, clear the manual discount
        manual_wins: reset the term, keep the manual discount
    """
    manual = _percent(current_manual_discount)
    term = resolve(new_label, catalog)

    if not term.has_discount:
        return GuardDecision(
            accepted=True,
            term_label=new_label,
            manual_discount_percent=manual,
        )

    if manual <= 0:
        return GuardDecision(
            accepted=True,
            term_label=new_label,
            manual_discount_percent=manual,
            info_message=_discount_info(term),
        )

    policy = policy or settings.DISCOUNT_CONFLICT_POLICY
    logger.info(
        "Payment terms discount conflicts with manual discount",
        extra={"payment_terms_label": new_label, "policy": policy},
    )

    if policy == "manual_wins":
        reset_label = settings.CONFLICT_RESET_TERM_LABEL
        return GuardDecision(
            accepted=False,
            term_label=reset_label,
            manual_discount_percent=manual,
            reset_term_label=reset_label,
            cleared_field=EditedField.PAYMENT_TERMS,
            error_message=(
                f"{CONFLICT_MESSAGE} Payment terms '{new_label}' have been reset to '{reset_label}'; "
                f"the {format_percent(manual)}% discount is kept."
            ),
        )

    return GuardDecision(
        accepted=False,
        term_label=new_label,
        manual_discount_percent=Decimal("0"),
        cleared_field=EditedField.MANUAL_DISCOUNT,
        error_message=(
            f"{CONFLICT_MESSAGE} The {format_percent(manual)}% manual discount has been cleared "
            f"because '{new_label}' includes an early-payment discount."
        ),
        info_message=_discount_info(term),
    )


def ensure_exclusive(
    manual_percent: Number,
    term_label: str,
    catalog: Optional[TermCatalog] = None,
) -> None:
    """
    Raises:
        ConflictError: If both a manual discount and a term discount are set.
    """
    manual = _percent(manual_percent)
    if manual > 0 and has_term_discount(term_label, catalog):
        raise ConflictError(
            f"{CONFLICT_MESSAGE} Either clear the {format_percent(manual)}% discount "
            f"or choose payment terms without a discount instead of '{term_label}'.",
            details={
                "manual_discount_percent": str(manual),
                "payment_terms_label": term_label,
            },
        )


def reconcile(
    manual_percent: Number,
    term_label: str,
    last_edited: Optional[EditedField],
    catalog: Optional[TermCatalog] = None,
) -> GuardDecision:
    """
    Settle both discount inputs arriving together (bulk or API update).

    The field named by `last_edited` wins. Without it a conflicting pair
    cannot be settled and ConflictError is raised.
    """
    if last_edited == EditedField.MANUAL_DISCOUNT:
        return on_manual_discount_changed(manual_percent, term_label, catalog)
    if last_edited == EditedField.PAYMENT_TERMS:
        return on_term_changed(term_label, manual_percent, catalog, policy="last_write_wins")

    ensure_exclusive(manual_percent, term_label, catalog)
    return GuardDecision(
        accepted=True,
        term_label=term_label,
        manual_discount_percent=_percent(manual_percent),
    )
