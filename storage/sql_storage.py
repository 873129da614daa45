"""SQLAlchemy-backed account storage."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models import db
from models.account import Account

from .abstract_storage import (
    AbstractAccountStore,
    AccountDraft,
    DuplicateAccountError,
    StorageError,
)


class SQLAlchemyAccountStore(AbstractAccountStore):
    """Persist accounts through the shared Flask-SQLAlchemy session."""

    def __init__(self, session=None):
        self.session = session or db.session

    def find_by_email(self, email: str) -> Optional[Account]:
        try:
            return (
                self.session.query(Account)
                .filter(func.lower(Account.email) == email.lower())
                .first()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError("Account lookup failed.") from exc

    def insert(self, draft: AccountDraft) -> Account:
        account = Account(
            email=draft.email,
            password_hash=draft.password_hash,
            name=draft.name,
            role=draft.role,
        )
        self.session.add(account)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateAccountError(draft.email) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError("Account insert failed.") from exc
        return account
