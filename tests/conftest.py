"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient
from flask_jwt_extended import create_access_token

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from models import db  # noqa: E402
from models.account import ROLE_ADMIN, ROLE_GENERAL, Account  # noqa: E402
from utils.passwords import hash_password  # noqa: E402

TEST_BCRYPT_ROUNDS = 4


class _BaseTestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    JWT_SECRET_KEY = SECRET_KEY
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_ROUNDS = TEST_BCRYPT_ROUNDS
    ADMIN_REGISTRATION_KEY = None
    EMAIL_ALLOW_TEST_DOMAINS = True


def build_app(**overrides) -> Flask:
    """Create an app whose config class overrides the given attributes."""

    class TestConfig(_BaseTestConfig):
        pass

    for key, value in overrides.items():
        setattr(TestConfig, key, value)

    application = create_app(TestConfig)
    with application.app_context():
        db.create_all()
    return application


@pytest.fixture()
def app() -> Flask:
    """Create a Flask application instance for tests."""

    application = build_app()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()


@pytest.fixture()
def db_session(app: Flask):
    """Yield the database session inside an application context."""

    with app.app_context():
        yield db.session


def create_account(
    email: str,
    password: str,
    *,
    name: str = "Test User",
    role: str = ROLE_GENERAL,
) -> int:
    """Persist an account directly and return its id. Needs an app context."""

    account = Account(
        email=email,
        name=name,
        role=role,
        password_hash=hash_password(password, rounds=TEST_BCRYPT_ROUNDS),
    )
    db.session.add(account)
    db.session.commit()
    return account.id


def auth_header(app: Flask, account_id: int) -> dict[str, str]:
    with app.app_context():
        token = create_access_token(identity=str(account_id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers(app: Flask) -> dict[str, str]:
    with app.app_context():
        admin_id = create_account("admin@cafe.test", "AdminPass123", role=ROLE_ADMIN)
    return auth_header(app, admin_id)


@pytest.fixture()
def customer_headers(app: Flask) -> dict[str, str]:
    with app.app_context():
        customer_id = create_account("customer@cafe.test", "CustomerPass123")
    return auth_header(app, customer_id)
