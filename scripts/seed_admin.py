"""Seed or reset the café administrator account."""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app  # noqa: E402
from models import db  # noqa: E402
from models.account import ROLE_ADMIN, Account  # noqa: E402
from utils.emails import normalize_email  # noqa: E402
from utils.passwords import hash_password  # noqa: E402

ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL", "admin@cafe.example")
ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "AdminPass123")
ADMIN_NAME = os.getenv("SEED_ADMIN_NAME", "Café Admin")


def main() -> None:
    app = create_app()
    rounds = int(app.config.get("BCRYPT_ROUNDS", 12))
    email = normalize_email(ADMIN_EMAIL)
    with app.app_context():
        db.create_all()
        admin = Account.query.filter_by(email=email).first()
        if admin is None:
            admin = Account(email=email, name=ADMIN_NAME, role=ROLE_ADMIN)
            db.session.add(admin)
            action = "created"
        else:
            admin.role = ROLE_ADMIN
            action = "updated"
        admin.password_hash = hash_password(ADMIN_PASSWORD, rounds=rounds)
        db.session.commit()
        print(f"Admin account {action}: {email}")


if __name__ == "__main__":
    main()
