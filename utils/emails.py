"""Email normalization and syntax checks."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email


def normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    return (raw_email or "").strip().lower()


def is_valid_email(email: str, *, allow_test_domains: bool = False) -> bool:
    """Return True when ``email`` is a syntactically valid address.

    Reserved names such as ``.test`` are refused unless ``allow_test_domains``
    is set.
    """

    try:
        validate_email(
            email,
            check_deliverability=False,
            test_environment=allow_test_domains,
        )
    except EmailNotValidError:
        return False
    return True
