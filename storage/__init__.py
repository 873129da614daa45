"""Storage backends."""

from .abstract_storage import (
    AbstractAccountStore,
    AccountDraft,
    DuplicateAccountError,
    StorageError,
)
from .sql_storage import SQLAlchemyAccountStore

__all__ = [
    "AbstractAccountStore",
    "AccountDraft",
    "DuplicateAccountError",
    "StorageError",
    "SQLAlchemyAccountStore",
]
