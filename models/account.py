"""Account model definition."""

from datetime import datetime

from utils.passwords import verify_password

from . import db


ROLE_GENERAL = "GENERAL"
ROLE_ADMIN = "ADMIN"


class Account(db.Model):
    """Represents a storefront customer or administrator."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.Text, nullable=False)
    role = db.Column(db.String(16), nullable=False, default=ROLE_GENERAL)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return verify_password(password, self.password_hash)

    def to_dict(self) -> dict:
        """Serialize the account without its credential."""

        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Account {self.id} {self.role}>"
