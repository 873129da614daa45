"""Account registration: validation, role resolution, hashing and persistence."""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Optional

from models.account import ROLE_ADMIN, ROLE_GENERAL, Account
from storage.abstract_storage import (
    AbstractAccountStore,
    AccountDraft,
    DuplicateAccountError,
    StorageError,
)
from utils.emails import is_valid_email, normalize_email
from utils.passwords import DEFAULT_ROUNDS, hash_password

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 1024
DUPLICATE_MESSAGE = "User already exists"
INTERNAL_MESSAGE = "Signup failed"


class RegistrationErrorKind(str, Enum):
    """Every way a registration can be refused."""

    MISSING_EMAIL = "missing_email"
    INVALID_EMAIL = "invalid_email"
    MISSING_PASSWORD = "missing_password"
    WEAK_PASSWORD = "weak_password"
    MISSING_NAME = "missing_name"
    DUPLICATE_ACCOUNT = "duplicate_account"
    INVALID_ADMIN_KEY = "invalid_admin_key"
    ADMIN_REGISTRATION_NOT_CONFIGURED = "admin_registration_not_configured"
    INTERNAL = "internal"

    @property
    def status(self) -> HTTPStatus:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    RegistrationErrorKind.MISSING_EMAIL: HTTPStatus.BAD_REQUEST,
    RegistrationErrorKind.INVALID_EMAIL: HTTPStatus.BAD_REQUEST,
    RegistrationErrorKind.MISSING_PASSWORD: HTTPStatus.BAD_REQUEST,
    RegistrationErrorKind.WEAK_PASSWORD: HTTPStatus.BAD_REQUEST,
    RegistrationErrorKind.MISSING_NAME: HTTPStatus.BAD_REQUEST,
    RegistrationErrorKind.DUPLICATE_ACCOUNT: HTTPStatus.CONFLICT,
    RegistrationErrorKind.INVALID_ADMIN_KEY: HTTPStatus.FORBIDDEN,
    RegistrationErrorKind.ADMIN_REGISTRATION_NOT_CONFIGURED: HTTPStatus.INTERNAL_SERVER_ERROR,
    RegistrationErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class RegistrationError:
    """A refused registration. ``cause`` is for server-side logs only."""

    kind: RegistrationErrorKind
    message: str
    cause: Optional[BaseException] = None

    @property
    def status(self) -> HTTPStatus:
        return self.kind.status


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of :meth:`RegistrationService.register`: an account or an error."""

    account: Optional[Account] = None
    error: Optional[RegistrationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return f"{self.account.role} User created Successfully!"


def _fail(kind: RegistrationErrorKind, message: str, cause=None) -> RegistrationResult:
    return RegistrationResult(error=RegistrationError(kind, message, cause))


class RegistrationService:
    """Register new accounts against an account store.

    The admin registration key is injected at construction; when it is None the
    deployment does not offer admin self-registration at all.
    """

    def __init__(
        self,
        store: AbstractAccountStore,
        admin_registration_key: Optional[str] = None,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
        max_password_length: int = MAX_PASSWORD_LENGTH,
        allow_test_domains: bool = False,
    ):
        self.store = store
        self.admin_registration_key = admin_registration_key or None
        self.bcrypt_rounds = bcrypt_rounds
        self.max_password_length = max_password_length
        self.allow_test_domains = allow_test_domains

    def register(self, payload: dict) -> RegistrationResult:
        """Validate ``payload`` and create the account it describes.

        Checks run in a fixed order and the first failure is returned. Nothing
        is written unless every check passes.
        """

        email = _string(payload, "email")
        password = _string(payload, "password")
        name = _string(payload, "name")
        admin_key = _string(payload, "adminKey")

        if not email or not email.strip():
            return _fail(RegistrationErrorKind.MISSING_EMAIL, "Please provide email")
        email = normalize_email(email)
        if not is_valid_email(email, allow_test_domains=self.allow_test_domains):
            return _fail(RegistrationErrorKind.INVALID_EMAIL, "Invalid email format")

        if not password:
            return _fail(RegistrationErrorKind.MISSING_PASSWORD, "Please provide password")
        if len(password) < MIN_PASSWORD_LENGTH:
            return _fail(
                RegistrationErrorKind.WEAK_PASSWORD,
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        if len(password) > self.max_password_length:
            return _fail(
                RegistrationErrorKind.WEAK_PASSWORD,
                f"Password must be at most {self.max_password_length} characters long",
            )

        name = (name or "").strip()
        if not name:
            return _fail(RegistrationErrorKind.MISSING_NAME, "Please provide name")

        try:
            existing = self.store.find_by_email(email)
        except StorageError as exc:
            return _fail(RegistrationErrorKind.INTERNAL, INTERNAL_MESSAGE, exc)
        if existing is not None:
            return _fail(RegistrationErrorKind.DUPLICATE_ACCOUNT, DUPLICATE_MESSAGE)

        role = ROLE_GENERAL
        if admin_key:
            if self.admin_registration_key is None:
                return _fail(
                    RegistrationErrorKind.ADMIN_REGISTRATION_NOT_CONFIGURED,
                    "Admin registration is not configured",
                )
            if not _keys_match(admin_key, self.admin_registration_key):
                return _fail(
                    RegistrationErrorKind.INVALID_ADMIN_KEY,
                    "Invalid admin registration key",
                )
            role = ROLE_ADMIN

        try:
            password_hash = hash_password(password, rounds=self.bcrypt_rounds)
        except ValueError as exc:
            return _fail(RegistrationErrorKind.INTERNAL, INTERNAL_MESSAGE, exc)

        draft = AccountDraft(email=email, password_hash=password_hash, name=name, role=role)
        try:
            account = self.store.insert(draft)
        except DuplicateAccountError:
            # Lost a race with a concurrent signup for the same address.
            return _fail(RegistrationErrorKind.DUPLICATE_ACCOUNT, DUPLICATE_MESSAGE)
        except StorageError as exc:
            return _fail(RegistrationErrorKind.INTERNAL, INTERNAL_MESSAGE, exc)

        return RegistrationResult(account=account)


def _string(payload: dict, key: str) -> Optional[str]:
    value = payload.get(key)
    return value if isinstance(value, str) else None


def _keys_match(supplied: str, expected: str) -> bool:
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))
