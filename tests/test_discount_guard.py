"""
Manual discount / payment terms discount exclusion tests.
"""

from decimal import Decimal

import pytest

from payterms.core.exceptions import ConflictError
from payterms.engine.discount_guard import (
    ensure_exclusive,
    on_manual_discount_changed,
    on_term_changed,
    reconcile,
)
from payterms.schemas.discount_guard import EditedField


def test_manual_discount_resets_discount_term():
    decision = on_manual_discount_changed(Decimal("5"), "2%/10 Net 30", None)

    assert decision.accepted is False
    assert decision.term_label == "Net 30"
    assert decision.reset_term_label == "Net 30"
    assert decision.manual_discount_percent == Decimal("5")
    assert decision.cleared_field == EditedField.PAYMENT_TERMS
    assert "'2%/10 Net 30'" in decision.error_message
    assert "'Net 30'" in decision.error_message


def test_manual_discount_with_plain_term_is_accepted():
    decision = on_manual_discount_changed(Decimal("5"), "Net 45", None)

    assert decision.accepted is True
    assert decision.term_label == "Net 45"
    assert decision.error_message is None


def test_clearing_manual_discount_keeps_discount_term():
    decision = on_manual_discount_changed(0, "2%/10 Net 30", None)

    assert decision.accepted is True
    assert decision.term_label == "2%/10 Net 30"


def test_manual_discount_conflicts_with_catalog_term(catalog):
    decision = on_manual_discount_changed("2.5", "Early Bird", catalog)

    assert decision.accepted is False
    assert decision.term_label == "Net 30"
    assert decision.manual_discount_percent == Decimal("2.5")


def test_discount_term_without_manual_discount_reports_info():
    decision = on_term_changed("2%/10 Net 30", Decimal("0"), None)

    assert decision.accepted is True
    assert decision.term_label == "2%/10 Net 30"
    assert decision.error_message is None
    assert decision.info_message.startswith("Discount of 2% will be available if paid within 10 days")


def test_plain_term_keeps_manual_discount():
    decision = on_term_changed("Net 60", Decimal("5"), None)

    assert decision.accepted is True
    assert decision.manual_discount_percent == Decimal("5")
    assert decision.info_message is None


def test_discount_term_clears_manual_discount_by_default():
    decision = on_term_changed("2%/10 Net 30", Decimal("5"), None)

    assert decision.accepted is False
    assert decision.term_label == "2%/10 Net 30"
    assert decision.manual_discount_percent == Decimal("0")
    assert decision.cleared_field == EditedField.MANUAL_DISCOUNT
    assert decision.reset_term_label is None
    assert "5% manual discount has been cleared" in decision.error_message


def test_discount_term_reverts_when_manual_discount_wins():
    decision = on_term_changed("2%/10 Net 30", Decimal("5"), None, policy="manual_wins")

    assert decision.accepted is False
    assert decision.term_label == "Net 30"
    assert decision.reset_term_label == "Net 30"
    assert decision.manual_discount_percent == Decimal("5")
    assert decision.cleared_field == EditedField.PAYMENT_TERMS
    assert "'Net 30'" in decision.error_message


def test_reconcile_manual_edited_last():
    decision = reconcile(Decimal("5"), "2%/10 Net 30", EditedField.MANUAL_DISCOUNT)

    assert decision.term_label == "Net 30"
    assert decision.manual_discount_percent == Decimal("5")


def test_reconcile_terms_edited_last():
    decision = reconcile(Decimal("5"), "2%/10 Net 30", EditedField.PAYMENT_TERMS)

    assert decision.term_label == "2%/10 Net 30"
    assert decision.manual_discount_percent == Decimal("0")


def test_reconcile_without_last_edited_raises_on_conflict():
    with pytest.raises(ConflictError) as exc_info:
        reconcile(Decimal("5"), "2%/10 Net 30", None)

    assert exc_info.value.status_code == 409
    assert exc_info.value.details["payment_terms_label"] == "2%/10 Net 30"


def test_reconcile_without_conflict_is_accepted():
    decision = reconcile(Decimal("5"), "Net 30", None)

    assert decision.accepted is True
    assert decision.manual_discount_percent == Decimal("5")


def test_ensure_exclusive(catalog):
    ensure_exclusive(0, "2%/10 Net 30", None)
    ensure_exclusive(5, "Net 21", catalog)

    with pytest.raises(ConflictError):
        ensure_exclusive(5, "Early Bird", catalog)
