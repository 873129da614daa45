"""Products blueprint: public catalogue plus admin create, update and delete."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from http import HTTPStatus

from flask import Blueprint, current_app, request
from flask_jwt_extended import jwt_required
from sqlalchemy import or_
from werkzeug.exceptions import BadRequest, Forbidden, NotFound

from models import db
from models.account import Account
from models.product import PRODUCT_CATEGORIES, Product
from routes.auth import current_account
from utils.request_validation import parse_json_request
from utils.responses import json_success

products_bp = Blueprint("products", __name__)


def _require_admin() -> Account:
    account = current_account()
    if not account.is_admin:
        raise Forbidden("Admin privileges required")
    return account


def _get_product_or_404(product_id: int) -> Product:
    product = db.session.get(Product, product_id)
    if product is None:
        raise NotFound("Product not found")
    return product


def _escape_like(term: str) -> str:
    """Make LIKE wildcards in ``term`` match literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _parse_amount(value, field: str, errors: list) -> Decimal | None:
    if value in (None, ""):
        return None
    if isinstance(value, bool):
        errors.append(f"{field} must be numeric")
        return None
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, TypeError):
        errors.append(f"{field} must be numeric")
        return None
    if not amount.is_finite():
        errors.append(f"{field} must be numeric")
        return None
    return amount


def _validate_product_payload(data: dict, current: Product | None = None) -> dict:
    """Validate ``data`` and return the cleaned values it supplies.

    With ``current`` set only the supplied fields are checked, and the price
    rule is applied to the merged result.
    """

    partial = current is not None
    errors: list[str] = []
    cleaned: dict = {}

    def supplied(field: str) -> bool:
        return not partial or field in data

    if supplied("product_name"):
        name = data.get("product_name")
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            errors.append("Product name is required")
        elif len(name) < 3:
            errors.append("Product name must be at least 3 characters")
        else:
            cleaned["product_name"] = name

    if "brand_name" in data:
        brand = data.get("brand_name")
        cleaned["brand_name"] = (brand.strip() or None) if isinstance(brand, str) else None

    if supplied("category"):
        category = data.get("category")
        if not category:
            errors.append("Please select a category")
        elif category not in PRODUCT_CATEGORIES:
            errors.append("category must be one of " + ", ".join(PRODUCT_CATEGORIES))
        else:
            cleaned["category"] = category

    if supplied("product_image"):
        images = data.get("product_image")
        if (
            not isinstance(images, list)
            or not images
            or not all(isinstance(url, str) and url.strip() for url in images)
        ):
            errors.append("At least one product image is required")
        else:
            cleaned["product_image"] = [url.strip() for url in images]

    if supplied("description"):
        description = data.get("description")
        description = description.strip() if isinstance(description, str) else ""
        if not description:
            errors.append("Product description is required")
        elif len(description) < 10:
            errors.append("Description must be at least 10 characters")
        else:
            cleaned["description"] = description

    if supplied("price"):
        raw_price = data.get("price")
        price = _parse_amount(raw_price, "price", errors)
        if price is not None and price > 0:
            cleaned["price"] = price
        elif price is not None or raw_price in (None, ""):
            errors.append("Price must be greater than 0")

    if "selling_price" in data:
        cleaned["selling_price"] = _parse_amount(
            data.get("selling_price"), "selling_price", errors
        )

    price = cleaned.get("price", current.price if current is not None else None)
    selling_price = cleaned.get(
        "selling_price", current.selling_price if current is not None else None
    )
    if selling_price is not None:
        if selling_price < 0:
            errors.append("Selling price must not be negative")
        elif price is not None and Decimal(selling_price) >= Decimal(price):
            errors.append("Selling price must be less than regular price")

    if errors:
        raise BadRequest("; ".join(errors))
    return cleaned


@products_bp.route("", methods=["GET"])
def list_products():
    """Return products with optional category and text filters."""

    query = Product.query

    category = request.args.get("category")
    if category:
        if category not in PRODUCT_CATEGORIES:
            raise BadRequest("Invalid category.")
        query = query.filter(Product.category == category)

    search_term = request.args.get("q")
    if search_term:
        like = f"%{_escape_like(search_term.lower())}%"
        query = query.filter(
            or_(
                db.func.lower(Product.product_name).like(like, escape="\\"),
                db.func.lower(Product.brand_name).like(like, escape="\\"),
                db.func.lower(Product.description).like(like, escape="\\"),
            )
        )

    products = query.order_by(Product.created_at.desc(), Product.id.desc()).all()
    return json_success([product.to_dict() for product in products], "All products")


@products_bp.route("/<int:product_id>", methods=["GET"])
def get_product(product_id: int):
    product = _get_product_or_404(product_id)
    return json_success(product.to_dict(), "Product details")


@products_bp.route("", methods=["POST"])
@jwt_required()
def create_product():
    """Create a product. Admins only."""

    admin = _require_admin()
    data = parse_json_request(request)
    cleaned = _validate_product_payload(data)

    product = Product(**cleaned)
    db.session.add(product)
    db.session.commit()

    current_app.logger.info("Product %s created by account %s", product.id, admin.id)
    return json_success(product.to_dict(), "Product uploaded successfully", HTTPStatus.CREATED)


@products_bp.route("/<int:product_id>", methods=["PATCH"])
@jwt_required()
def update_product(product_id: int):
    admin = _require_admin()
    product = _get_product_or_404(product_id)

    data = parse_json_request(request, allow_empty=False)
    cleaned = _validate_product_payload(data, current=product)
    for field, value in cleaned.items():
        setattr(product, field, value)
    db.session.commit()

    current_app.logger.info("Product %s updated by account %s", product.id, admin.id)
    return json_success(product.to_dict(), "Product updated successfully")


@products_bp.route("/<int:product_id>", methods=["DELETE"])
@jwt_required()
def delete_product(product_id: int):
    admin = _require_admin()
    product = _get_product_or_404(product_id)

    db.session.delete(product)
    db.session.commit()

    current_app.logger.info("Product %s deleted by account %s", product_id, admin.id)
    return json_success({"id": product_id}, "Product deleted successfully")
