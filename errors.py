"""
Error types for the Inventory Management System
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    DUPLICATE_KEY = "duplicate_key"


class InventoryError(ValueError):
    """Base class for catalog failures; `kind` tells the GUI which one it got"""

    kind: ErrorKind
    default_message = "Inventory error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ProductNotFoundError(InventoryError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Product not found in inventory!"


class InvalidInputError(InventoryError):
    kind = ErrorKind.INVALID_VALUE
    default_message = "Invalid input detected!"


class DuplicateProductError(InventoryError):
    kind = ErrorKind.DUPLICATE_KEY
    default_message = "Duplicate product detected!"

    def __init__(self, product_id: Optional[str] = None) -> None:
        self.product_id = product_id
        message = None
        if product_id is not None:
            message = f"Product ID {product_id} already exists. Please use a unique ID."
        super().__init__(message)
