"""Tests for email and currency helpers."""

import pytest

from utils.currency import display_currency
from utils.emails import is_valid_email, normalize_email


def test_normalize_email():
    assert normalize_email("  Jane.Doe@Cafe.Test ") == "jane.doe@cafe.test"
    assert normalize_email(None) == ""


@pytest.mark.parametrize(
    "email", ["a@b.com", "first.last+tag@sub.example.co.ke"]
)
def test_valid_emails(email):
    assert is_valid_email(email)


def test_reserved_domains_need_opt_in():
    assert not is_valid_email("jane@cafe.test")
    assert is_valid_email("jane@cafe.test", allow_test_domains=True)


@pytest.mark.parametrize(
    "email", ["not-an-email", "jane@", "@cafe.test", "jane doe@cafe.test", "jane@@cafe.test"]
)
def test_invalid_emails(email):
    assert not is_valid_email(email)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (250, "KES 250.00"),
        ("1250.5", "KES 1,250.50"),
        (1234567.891, "KES 1,234,567.89"),
        (0, "KES 0.00"),
    ],
)
def test_display_currency(amount, expected):
    assert display_currency(amount) == expected
