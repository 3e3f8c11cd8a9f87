"""
Resolve a free-form payment terms label into a structured term.

Resolution order:
    1. standard labels ("Due on Receipt", "Net 15/30/45/60")
    2. exact label match in the client's catalog
    3. canonical discount format "<percent>%/<days> Net <net>"
    4. "Net <net>" anywhere in the label, case-insensitive
    5. fallback to settings.DEFAULT_NET_DAYS with no discount

Step 3 runs before step 4 so a discount label that never made it into the
catalog (stale client cache, imported document) still carries its discount.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from payterms.core.config import settings
from payterms.core.logging import get_logger
from payterms.engine.term_catalog import STANDARD_NET_DAYS, TermCatalog
from payterms.schemas.payment_term import ResolvedTerm, TermSource

logger = get_logger(__name__)


DISCOUNT_LABEL_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)%/(\d+)\s+Net\s+(\d+)$", re.IGNORECASE)
NET_LABEL_PATTERN = re.compile(r"Net\s+(\d+)", re.IGNORECASE)


def _from_discount_match(match: re.Match) -> ResolvedTerm:
    try:
        discount_percent = Decimal(match.group(1))
    except InvalidOperation:
        discount_percent = Decimal("0")
    discount_days = int(match.group(2))
    net_days = int(match.group(3))

    # "0%/10 Net 30" or "2%/0 Net 30" describe no usable discount
    if discount_percent <= 0 or discount_days <= 0:
        return ResolvedTerm(net_days=net_days, source=TermSource.DISCOUNT_PATTERN)

    return ResolvedTerm(
        net_days=net_days,
        discount_percent=discount_percent,
        discount_days=discount_days,
        source=TermSource.DISCOUNT_PATTERN,
    )


def resolve(label: Optional[str], catalog: Optional[TermCatalog] = None) -> ResolvedTerm:
    """
    Interpret a payment terms label.

    Args:
        label: Label stored on the document; may be unknown or empty
        catalog: Client's custom terms; None behaves like an empty catalog

    Returns:
        ResolvedTerm. Unrecognized labels resolve with source FALLBACK
        instead of raising, so every document still gets a due date.
    """
    if label in STANDARD_NET_DAYS:
        return ResolvedTerm(net_days=STANDARD_NET_DAYS[label], source=TermSource.STANDARD)

    if catalog is not None:
        custom = catalog.find_by_label(label)
        if custom is not None:
            return ResolvedTerm(
                net_days=custom.net_days,
                discount_percent=custom.discount_percent if custom.has_discount else None,
                discount_days=custom.discount_days if custom.has_discount else None,
                source=TermSource.CATALOG,
            )

    text = (label or "").strip()

    match = DISCOUNT_LABEL_PATTERN.match(text)
    if match:
        return _from_discount_match(match)

    match = NET_LABEL_PATTERN.search(text)
    if match:
        return ResolvedTerm(net_days=int(match.group(1)), source=TermSource.NET_PATTERN)

    logger.warning(
        f"Unrecognized payment terms '{label}', assuming Net {settings.DEFAULT_NET_DAYS}",
        extra={"payment_terms_label": label, "net_days": settings.DEFAULT_NET_DAYS},
    )
    return ResolvedTerm(net_days=settings.DEFAULT_NET_DAYS, source=TermSource.FALLBACK)


def has_term_discount(label: Optional[str], catalog: Optional[TermCatalog] = None) -> bool:
    """True when the label resolves to an early-payment discount."""
    return resolve(label, catalog).has_discount
