"""
Catalog entities for the Inventory Management System
"""
from dataclasses import asdict, dataclass
from typing import Any, Optional


DEFAULT_CURRENCY = "AED"


def format_currency(value: float, symbol: str) -> str:
    return f"{symbol}{value:.2f}"


@dataclass
class Product:
    """A catalog record. Setting `expiry_date` makes it a perishable product."""

    product_id: str
    name: str
    price: float
    quantity: int
    expiry_date: Optional[str] = None

    @property
    def is_perishable(self) -> bool:
        return self.expiry_date is not None

    def display_string(self, currency: str = DEFAULT_CURRENCY) -> str:
        text = (
            f"ID: {self.product_id:<5} | Name: {self.name:<15} | "
            f"Price: {format_currency(self.price, currency)} | Qty: {self.quantity}"
        )
        if self.is_perishable:
            text += f" | Expiry: {self.expiry_date}"
        return text

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
