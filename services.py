"""
Business logic layer for Inventory Management System
"""
import logging
import math
from typing import Optional

from errors import DuplicateProductError, InvalidInputError, ProductNotFoundError
from models import Product

logger = logging.getLogger(__name__)

NEGATIVE_VALUE_ERROR = "Price or Quantity cannot be negative!"

INITIAL_PRODUCTS = (
    ("01", "Water", 1.00, 50, None),
    ("02", "Biscuit", 3.00, 30, "15/11/2025"),
    ("03", "Chocolate", 3.00, 45, None),
    ("04", "Ice Cream", 1.50, 29, "10/11/2025"),
    ("05", "Gummy Bears", 2.50, 45, None),
)


def _is_valid_stock(price: float, quantity: int) -> bool:
    # NaN compares false against everything, so test finiteness first
    return math.isfinite(price) and price >= 0 and quantity >= 0


class InventoryManager:
    """Owns the in-memory product list. Lookups are linear scans."""

    def __init__(self, products: Optional[list[Product]] = None) -> None:
        self._products: list[Product] = []
        for product in products or []:
            self.add(product)

    def __len__(self) -> int:
        return len(self._products)

    def add_initial_products(self) -> None:
        for product_id, name, price, quantity, expiry in INITIAL_PRODUCTS:
            self.add(Product(product_id, name, price, quantity, expiry))

    def _exists(self, product_id: str) -> bool:
        return any(p.product_id == product_id for p in self._products)

    def add(self, product: Product) -> Product:
        if self._exists(product.product_id):
            logger.warning("Rejected duplicate product id %s", product.product_id)
            raise DuplicateProductError(product.product_id)
        if not _is_valid_stock(product.price, product.quantity):
            logger.warning("Rejected product %s with negative price or quantity", product.product_id)
            raise InvalidInputError(NEGATIVE_VALUE_ERROR)
        self._products.append(product)
        logger.info("Added product %s (%s)", product.product_id, product.name)
        return product

    def find(self, product_id: str) -> Product:
        for p in self._products:
            if p.product_id == product_id:
                return p
        raise ProductNotFoundError()

    def update(self, product_id: str, price: float, quantity: int) -> Product:
        product = self.find(product_id)
        if not _is_valid_stock(price, quantity):
            logger.warning("Rejected update of %s with negative price or quantity", product_id)
            raise InvalidInputError(NEGATIVE_VALUE_ERROR)
        product.price = price
        product.quantity = quantity
        logger.info("Updated product %s: price=%.2f quantity=%d", product_id, price, quantity)
        return product

    def delete(self, product_id: str) -> Product:
        product = self.find(product_id)
        self._products.remove(product)
        logger.info("Deleted product %s", product_id)
        return product

    def count(self) -> int:
        return len(self._products)

    def list_products(self) -> tuple[Product, ...]:
        return tuple(self._products)
