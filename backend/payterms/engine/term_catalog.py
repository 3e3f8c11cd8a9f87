"""
Per-client catalog of custom payment terms.

Standard terms are recognized by their fixed labels and are never stored
here. The catalog is a plain in-memory mapping keyed by label; callers load
a snapshot (see PaymentTermService.load_catalog) and hand it to the engine,
which only reads it.
"""

import uuid
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Union

from payterms.core.exceptions import ValidationError
from payterms.core.logging import get_logger
from payterms.schemas.payment_term import PaymentTerm, PaymentTermCreate

logger = get_logger(__name__)


STANDARD_NET_DAYS: Dict[str, int] = {
    "Due on Receipt": 0,
    "Net 15": 15,
    "Net 30": 30,
    "Net 45": 45,
    "Net 60": 60,
}

PERCENT_DECIMAL_PLACES = 2

STANDARD_TERMS: List[PaymentTerm] = [
    PaymentTerm(
        id=f"standard_{label.lower().replace(' ', '_')}",
        label=label,
        net_days=net_days,
    )
    for label, net_days in STANDARD_NET_DAYS.items()
]


def is_standard_label(label: Optional[str]) -> bool:
    """True for the built-in, non-deletable term labels."""
    return label in STANDARD_NET_DAYS


def format_percent(percent: Decimal) -> str:
    """Render a percent without trailing zeros or exponent ("2", "2.5")."""
    return format(Decimal(percent).normalize(), "f")


def build_label(
    net_days: int,
    discount_percent: Optional[Decimal] = None,
    discount_days: Optional[int] = None,
) -> str:
    """
    Derive the canonical label for a term.

    Discount terms use "<percent>%/<days> Net <net>" so that the discount
    survives in the label itself; everything else is "Net <net>".
    """
    if discount_percent is not None and discount_days is not None:
        return f"{format_percent(discount_percent)}%/{discount_days} Net {net_days}"
    return f"Net {net_days}"


def validate_term(
    net_days: int,
    discount_percent: Optional[Decimal] = None,
    discount_days: Optional[int] = None,
) -> None:
    """
    Check catalog invariants for a custom term.

    Raises:
        ValidationError: If net days are not positive or the discount
            fields are incomplete, nonpositive, above 100% or outlasts the net period.
    """
    if net_days is None or net_days <= 0:
        raise ValidationError(
            "Payment days must be greater than 0",
            details={"net_days": net_days},
        )

    if discount_percent is None and discount_days is None:
        return

    if discount_percent is None or discount_days is None:
        raise ValidationError(
            "Discount percent and discount days must be provided together",
            details={
                "discount_percent": str(discount_percent) if discount_percent is not None else None,
                "discount_days": discount_days,
            },
        )
    if discount_percent <= 0:
        raise ValidationError(
            "Discount percent must be greater than 0",
            details={"discount_percent": str(discount_percent)},
        )
    if discount_percent > 100:
        raise ValidationError(
            "Discount percent cannot exceed 100",
            details={"discount_percent": str(discount_percent)},
        )
    # Must fit the stored Numeric(5, 2) column unchanged
    if -discount_percent.normalize().as_tuple().exponent > PERCENT_DECIMAL_PLACES:
        raise ValidationError(
            f"Discount percent can have at most {PERCENT_DECIMAL_PLACES} decimal places",
            details={"discount_percent": str(discount_percent)},
        )
    if discount_days <= 0:
        raise ValidationError(
            "Discount days must be greater than 0",
            details={"discount_days": discount_days},
        )
    if discount_days > net_days:
        raise ValidationError(
            f"Discount days ({discount_days}) cannot be greater than payment days ({net_days}). "
            "The discount must be available before the payment due date.",
            details={"discount_days": discount_days, "net_days": net_days},
        )


class TermCatalog:
    """Mapping from label to custom PaymentTerm."""

    def __init__(self, terms: Optional[List[PaymentTerm]] = None):
        self._terms: Dict[str, PaymentTerm] = {}
        for term in terms or []:
            self._terms[term.label] = term

    @classmethod
    def from_terms(cls, terms: List[PaymentTerm]) -> "TermCatalog":
        """Build a catalog snapshot from already-validated terms."""
        return cls(terms)

    def add(
        self,
        term: Union[PaymentTermCreate, PaymentTerm],
        term_id: Optional[str] = None,
    ) -> PaymentTerm:
        """
        Validate and insert a custom term.

        Args:
            term: Term to add; when it has no label one is derived
            term_id: Identifier to store it under; generated when omitted

        Returns:
            The stored PaymentTerm

        Raises:
            ValidationError: If the term breaks an invariant or its label is
                a standard label or already taken. Nothing is inserted.
        """
        discount_percent = (
            Decimal(str(term.discount_percent)) if term.discount_percent is not None else None
        )
        validate_term(term.net_days, discount_percent, term.discount_days)

        label = term.label or build_label(term.net_days, discount_percent, term.discount_days)
        if is_standard_label(label):
            raise ValidationError(
                f"'{label}' is a standard payment term",
                details={"label": label},
            )
        if label in self._terms:
            raise ValidationError(
                f"Payment term '{label}' already exists",
                details={"label": label},
            )

        term_id = term_id or getattr(term, "id", None) or f"custom_{uuid.uuid4().hex}"
        stored = PaymentTerm(
            id=term_id,
            label=label,
            net_days=term.net_days,
            discount_percent=discount_percent,
            discount_days=term.discount_days,
        )
        self._terms[label] = stored
        logger.info(f"Payment term added: {label}", extra={"term_id": term_id})
        return stored

    def remove(self, term_id: str) -> Optional[PaymentTerm]:
        """
        Delete a custom term by id.
        Documents keep their own label snapshot, so no reference check is made.
        """
        for label, term in self._terms.items():
            if term.id == term_id:
                del self._terms[label]
                logger.info(f"Payment term removed: {label}", extra={"term_id": term_id})
                return term
        return None

    def find_by_label(self, label: Optional[str]) -> Optional[PaymentTerm]:
        """Case-sensitive exact label lookup."""
        if label is None:
            return None
        return self._terms.get(label)

    def get(self, term_id: str) -> Optional[PaymentTerm]:
        """Lookup by id."""
        for term in self._terms.values():
            if term.id == term_id:
                return term
        return None

    def terms(self) -> List[PaymentTerm]:
        return list(self._terms.values())

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, label: object) -> bool:
        return label in self._terms

    def __iter__(self) -> Iterator[PaymentTerm]:
        return iter(list(self._terms.values()))
