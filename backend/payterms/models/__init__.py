"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from payterms.models.payment_term import StoredPaymentTerm

__all__ = [
    "StoredPaymentTerm",
]
