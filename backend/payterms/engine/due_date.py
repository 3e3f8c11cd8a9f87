"""
Due date calculation from a document date and a payment terms label.
Pure calendar arithmetic: no business-day skipping, no timezone handling.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from payterms.engine.term_catalog import TermCatalog
from payterms.engine.term_parser import resolve
from payterms.schemas.payment_term import ResolvedTerm

DateLike = Union[date, datetime]


def as_date(value: DateLike) -> date:
    """Drop the time-of-day part of a datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def compute_due_date(
    document_date: DateLike,
    label: Optional[str],
    catalog: Optional[TermCatalog] = None,
) -> date:
    """
    Get the due date for a document.

    Args:
        document_date: Bill or invoice date
        label: Payment terms label on the document
        catalog: Client's custom terms

    Returns:
        document_date plus the term's net days
    """
    return due_date_for(document_date, resolve(label, catalog))


def due_date_for(document_date: DateLike, term: ResolvedTerm) -> date:
    """Due date for an already resolved term."""
    return as_date(document_date) + timedelta(days=term.net_days)


def discount_deadline(document_date: DateLike, discount_days: int) -> date:
    """Last calendar day on which an early-payment discount can be taken."""
    return as_date(document_date) + timedelta(days=discount_days)
