"""Account persistence abstraction layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from models.account import Account


class StorageError(Exception):
    """Raised when the backing store fails for reasons other than uniqueness."""


class DuplicateAccountError(StorageError):
    """Raised when an insert violates the unique email constraint."""


@dataclass(frozen=True)
class AccountDraft:
    """Values for a new account, ready to be written."""

    email: str
    password_hash: str
    name: str
    role: str


class AbstractAccountStore(ABC):
    """Interface for account storage backends."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional["Account"]:
        """Return the account registered under ``email`` (case-insensitive), if any."""

    @abstractmethod
    def insert(self, draft: AccountDraft) -> "Account":
        """Persist ``draft`` and return the stored account.

        Raises :class:`DuplicateAccountError` when the email is already taken
        and :class:`StorageError` for any other backend failure.
        """
