"""
Due date calculation tests.
"""

from datetime import date, datetime

from payterms.engine.due_date import compute_due_date, discount_deadline


def test_due_on_receipt_adds_no_days():
    assert compute_due_date(date(2024, 1, 31), "Due on Receipt", None) == date(2024, 1, 31)


def test_net_30_from_new_year():
    assert compute_due_date(date(2024, 1, 1), "Net 30", None) == date(2024, 1, 31)


def test_discount_term_uses_net_days():
    assert compute_due_date(date(2024, 1, 1), "2%/10 Net 30", None) == date(2024, 1, 31)


def test_calendar_days_across_leap_february():
    assert compute_due_date(date(2024, 1, 1), "Net 60", None) == date(2024, 3, 1)


def test_datetime_time_of_day_is_ignored():
    assert compute_due_date(datetime(2024, 1, 1, 23, 59), "Net 15", None) == date(2024, 1, 16)


def test_custom_term_from_catalog(catalog):
    assert compute_due_date(date(2024, 1, 1), "Early Bird", catalog) == date(2024, 1, 22)


def test_unrecognized_label_uses_thirty_days():
    assert compute_due_date(date(2024, 2, 1), "whenever", None) == date(2024, 3, 2)


def test_discount_deadline():
    assert discount_deadline(date(2024, 1, 1), 10) == date(2024, 1, 11)
