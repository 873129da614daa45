"""Seed the café menu with demo products."""

import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app  # noqa: E402
from models import db  # noqa: E402
from models.product import Product  # noqa: E402

MENU = [
    {
        "product_name": "Kenyan AA Espresso",
        "brand_name": "House Roast",
        "category": "hot-coffee",
        "product_image": ["https://images.cafe.example/espresso.jpg"],
        "description": "Double shot pulled from single-origin Nyeri beans.",
        "price": Decimal("250.00"),
        "selling_price": None,
    },
    {
        "product_name": "Caramel Cold Brew",
        "brand_name": "House Roast",
        "category": "cold-coffee",
        "product_image": ["https://images.cafe.example/cold-brew.jpg"],
        "description": "Slow-steeped for eighteen hours, finished with caramel.",
        "price": Decimal("420.00"),
        "selling_price": Decimal("380.00"),
    },
    {
        "product_name": "Masala Chai",
        "brand_name": None,
        "category": "tea",
        "product_image": ["https://images.cafe.example/chai.jpg"],
        "description": "Black tea simmered with milk, ginger and cardamom.",
        "price": Decimal("200.00"),
        "selling_price": None,
    },
    {
        "product_name": "Butter Croissant",
        "brand_name": None,
        "category": "pastries",
        "product_image": ["https://images.cafe.example/croissant.jpg"],
        "description": "Laminated dough baked fresh every morning.",
        "price": Decimal("180.00"),
        "selling_price": None,
    },
    {
        "product_name": "Ceramic Travel Mug",
        "brand_name": "Café Goods",
        "category": "merchandise",
        "product_image": [
            "https://images.cafe.example/mug-front.jpg",
            "https://images.cafe.example/mug-side.jpg",
        ],
        "description": "Double-walled 350ml mug with a silicone lid.",
        "price": Decimal("1500.00"),
        "selling_price": Decimal("1250.00"),
    },
]


def main() -> None:
    app = create_app()
    with app.app_context():
        db.create_all()
        created = 0
        for data in MENU:
            product = Product.query.filter_by(product_name=data["product_name"]).first()
            if product is None:
                db.session.add(Product(**data))
                created += 1
            else:
                for key, value in data.items():
                    setattr(product, key, value)
        db.session.commit()
        print(f"Menu seeded: {created} created, {len(MENU) - created} updated.")


if __name__ == "__main__":
    main()
