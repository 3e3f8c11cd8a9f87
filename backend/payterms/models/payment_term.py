"""
Custom payment term model, stored per client.
"""

from sqlalchemy import Column, String, Integer, Numeric, UniqueConstraint, Uuid
import uuid

from payterms.db.base import Base


class StoredPaymentTerm(Base):
    """A client's custom payment term. Standard terms are never stored."""

    __tablename__ = "payment_terms"
    __table_args__ = (
        UniqueConstraint("client_id", "label", name="uq_payment_terms_client_label"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(Uuid, nullable=False, index=True)
    label = Column(String(100), nullable=False)  # e.g., "2%/10 Net 30"
    net_days = Column(Integer, nullable=False)
    discount_percent = Column(Numeric(5, 2), nullable=True)  # scale matches PERCENT_DECIMAL_PLACES
    discount_days = Column(Integer, nullable=True)
