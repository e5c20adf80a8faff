"""
Form input parsing for the Inventory Management System

Every helper takes the raw text of an entry field and either returns a
clean value or raises InvalidInputError with the message shown to the user.
"""
import math
import re

from errors import InvalidInputError


NUMBER_ERROR = "Price and Quantity must be valid numbers."

# Plain ASCII literals only; int()/float() also take "1_0", "nan", "inf"
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def validate_product_id(raw: str) -> str:
    product_id = (raw or "").strip()
    if product_id == "":
        raise InvalidInputError("Product ID cannot be empty.")
    if not INTEGER_PATTERN.fullmatch(product_id):
        raise InvalidInputError("Product ID must be a numeric integer.")
    # Keep the text as typed so "06" and "6" stay distinct keys
    return product_id


def validate_name(raw: str) -> str:
    name = (raw or "").strip()
    if name == "":
        raise InvalidInputError("Product Name cannot be empty.")
    return name


def parse_price(raw: str) -> float:
    text = (raw or "").strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise InvalidInputError(NUMBER_ERROR)
    price = float(text)
    if not math.isfinite(price):
        raise InvalidInputError(NUMBER_ERROR)
    return price


def parse_quantity(raw: str) -> int:
    text = (raw or "").strip()
    if not INTEGER_PATTERN.fullmatch(text):
        raise InvalidInputError(NUMBER_ERROR)
    return int(text)


def validate_expiry(raw: str) -> str:
    expiry = (raw or "").strip()
    if expiry == "":
        raise InvalidInputError("Perishable product requires an Expiry Date.")
    return expiry
