"""Product model for the café menu and merchandise catalogue."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from utils.currency import display_currency

from . import db

PRODUCT_CATEGORIES = (
    "hot-coffee",
    "cold-coffee",
    "tea",
    "pastries",
    "sandwiches",
    "cakes",
    "breakfast",
    "smoothies",
    "seasonal-specials",
    "merchandise",
)


def _as_float(value):
    return float(value) if isinstance(value, Decimal) else value


class Product(db.Model):
    """Represents an item sold by the café."""

    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    product_name = db.Column(db.Text, nullable=False)
    brand_name = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(32), nullable=False, index=True)
    product_image = db.Column(db.JSON, nullable=False, default=list)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    selling_price = db.Column(db.Numeric(10, 2), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    @property
    def discount_percentage(self) -> int | None:
        if self.selling_price is None or not self.price:
            return None
        price = Decimal(self.price)
        discount = (price - Decimal(self.selling_price)) / price * 100
        return int(discount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def to_dict(self) -> dict:
        """Serialize the product, including formatted prices."""

        data = {
            "id": self.id,
            "product_name": self.product_name,
            "brand_name": self.brand_name,
            "category": self.category,
            "product_image": list(self.product_image or []),
            "description": self.description,
            "price": _as_float(self.price),
            "selling_price": _as_float(self.selling_price),
            "display_price": display_currency(self.price),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if self.selling_price is not None:
            data["display_selling_price"] = display_currency(self.selling_price)
            data["discount_percentage"] = self.discount_percentage
        return data
