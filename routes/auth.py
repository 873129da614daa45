"""Authentication blueprint providing signup, signin and profile endpoints."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, current_app, request
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required
from werkzeug.exceptions import (
    BadRequest,
    Conflict,
    Forbidden,
    InternalServerError,
    NotFound,
    Unauthorized,
)

from models import db
from models.account import Account
from services.registration import (
    RegistrationError,
    RegistrationErrorKind,
    RegistrationService,
)
from storage.sql_storage import SQLAlchemyAccountStore
from utils.emails import normalize_email
from utils.request_validation import parse_json_request
from utils.responses import json_success

auth_bp = Blueprint("auth", __name__)

_EXCEPTION_BY_STATUS = {
    HTTPStatus.BAD_REQUEST: BadRequest,
    HTTPStatus.CONFLICT: Conflict,
    HTTPStatus.FORBIDDEN: Forbidden,
    HTTPStatus.INTERNAL_SERVER_ERROR: InternalServerError,
}


def _registration_service() -> RegistrationService:
    config = current_app.config
    return RegistrationService(
        SQLAlchemyAccountStore(db.session),
        admin_registration_key=config.get("ADMIN_REGISTRATION_KEY"),
        bcrypt_rounds=int(config.get("BCRYPT_ROUNDS", 12)),
        max_password_length=int(config.get("PASSWORD_MAX_LENGTH", 1024)),
        allow_test_domains=bool(config.get("EMAIL_ALLOW_TEST_DOMAINS", False)),
    )


def _raise_registration_error(error: RegistrationError) -> None:
    kind = error.kind.name
    if error.cause is not None:
        current_app.logger.error("Signup failed (%s)", kind, exc_info=error.cause)
    elif error.kind is RegistrationErrorKind.ADMIN_REGISTRATION_NOT_CONFIGURED:
        current_app.logger.error("Signup refused (%s): ADMIN_REGISTRATION_KEY is not set", kind)
    elif error.kind is RegistrationErrorKind.INVALID_ADMIN_KEY:
        current_app.logger.warning("Signup refused (%s) from %s", kind, request.remote_addr)
    raise _EXCEPTION_BY_STATUS[error.status](error.message)


def current_account() -> Account:
    identity = get_jwt_identity()
    try:
        account_id = int(identity)
    except (TypeError, ValueError):
        raise Unauthorized("Invalid or malformed token")
    account = db.session.get(Account, account_id)
    if account is None:
        raise NotFound("User not found")
    return account


@auth_bp.route("/signup", methods=["POST"])
def signup() -> tuple:
    """Register a new account, optionally as an administrator."""
    payload = parse_json_request(request, allow_empty=True)
    result = _registration_service().register(payload)
    if not result.ok:
        _raise_registration_error(result.error)

    account = result.account
    current_app.logger.info("Account %s registered with role %s", account.id, account.role)
    return json_success(account.to_dict(), result.message, HTTPStatus.CREATED)


@auth_bp.route("/signin", methods=["POST"])
def signin() -> tuple:
    """Authenticate an account and return a JWT access token."""
    payload = parse_json_request(request, allow_empty=True)
    email = payload.get("email")
    password = payload.get("password")

    if not isinstance(email, str) or not email.strip():
        raise BadRequest("Please provide email")
    if not isinstance(password, str) or not password:
        raise BadRequest("Please provide password")

    account = SQLAlchemyAccountStore(db.session).find_by_email(normalize_email(email))
    if account is None or not account.check_password(password):
        raise Unauthorized("Invalid email or password")

    token = create_access_token(identity=str(account.id))
    return json_success(
        {"token": token, "user": account.to_dict()},
        "Login successfully",
        HTTPStatus.OK,
    )


@auth_bp.route("/user-details", methods=["GET"])
@jwt_required()
def user_details() -> tuple:
    """Return the signed-in account."""
    account = current_account()
    return json_success(account.to_dict(), "User details", HTTPStatus.OK)


@auth_bp.route("/logout", methods=["POST"])
def logout() -> tuple:
    """Acknowledge a logout; clients discard their token."""
    return json_success([], "Logged out successfully", HTTPStatus.OK)
