# tests/test_inventory.py
import pytest

from errors import (
    DuplicateProductError,
    ErrorKind,
    InvalidInputError,
    ProductNotFoundError,
)
from models import Product
from services import InventoryManager


def snapshot(m):
    return [p.to_dict() for p in m.list_products()]


def test_seeded_catalog_has_five_products(manager):
    assert manager.count() == 5
    assert [p.product_id for p in manager.list_products()] == ["01", "02", "03", "04", "05"]
    assert manager.find("02").expiry_date == "15/11/2025"
    assert not manager.find("01").is_perishable


def test_add_then_delete_restores_count(manager):
    manager.add(Product("06", "Juice", 2.00, 10))
    assert manager.count() == 6
    assert manager.find("06").name == "Juice"
    manager.delete("06")
    assert manager.count() == 5
    with pytest.raises(ProductNotFoundError):
        manager.find("06")


def test_add_keeps_insertion_order():
    m = InventoryManager()
    m.add(Product("10", "B", 1.0, 1))
    m.add(Product("02", "A", 1.0, 1))
    assert [p.product_id for p in m.list_products()] == ["10", "02"]
    assert len(m) == 2


def test_duplicate_id_rejected_and_catalog_unchanged(manager):
    before = snapshot(manager)
    with pytest.raises(DuplicateProductError) as exc:
        manager.add(Product("03", "Other", 9.99, 1))
    assert exc.value.kind is ErrorKind.DUPLICATE_KEY
    assert str(exc.value) == "Product ID 03 already exists. Please use a unique ID."
    assert snapshot(manager) == before


def test_duplicate_checked_before_negative_values(manager):
    with pytest.raises(DuplicateProductError):
        manager.add(Product("01", "Water", -1.0, -1))


@pytest.mark.parametrize("price,quantity", [(-0.01, 1), (1.0, -1)])
def test_add_negative_values_rejected(manager, price, quantity):
    before = snapshot(manager)
    with pytest.raises(InvalidInputError) as exc:
        manager.add(Product("07", "Bad", price, quantity))
    assert exc.value.kind is ErrorKind.INVALID_VALUE
    assert exc.value.message == "Price or Quantity cannot be negative!"
    assert snapshot(manager) == before


def test_add_zero_values_allowed(manager):
    manager.add(Product("08", "Free Sample", 0.0, 0))
    assert manager.find("08").price == 0.0


def test_update_changes_only_price_and_quantity(manager):
    manager.update("04", 2.25, 12)
    p = manager.find("04")
    assert (p.product_id, p.name, p.price, p.quantity, p.expiry_date) == (
        "04", "Ice Cream", 2.25, 12, "10/11/2025"
    )
    assert manager.count() == 5


@pytest.mark.parametrize("price,quantity", [(-1.0, 5), (5.0, -5)])
def test_update_negative_values_rejected(manager, price, quantity):
    before = snapshot(manager)
    with pytest.raises(InvalidInputError):
        manager.update("01", price, quantity)
    assert snapshot(manager) == before


def test_update_unknown_id_is_not_found_even_with_bad_values(manager):
    with pytest.raises(ProductNotFoundError) as exc:
        manager.update("99", -1.0, -1)
    assert exc.value.kind is ErrorKind.NOT_FOUND
    assert exc.value.message == "Product not found in inventory!"


def test_delete_unknown_id_leaves_catalog_unchanged(manager):
    before = snapshot(manager)
    with pytest.raises(ProductNotFoundError):
        manager.delete("42")
    assert snapshot(manager) == before


def test_ids_compare_as_text(manager):
    with pytest.raises(ProductNotFoundError):
        manager.find("1")
    manager.add(Product("1", "Water Bottle", 1.0, 1))
    assert manager.find("1").name == "Water Bottle"
    assert manager.find("01").name == "Water"


def test_list_products_is_a_snapshot(manager):
    products = manager.list_products()
    assert isinstance(products, tuple)
    manager.delete("01")
    assert len(products) == 5
    assert manager.count() == 4


def test_constructor_validates_initial_products():
    with pytest.raises(DuplicateProductError):
        InventoryManager([Product("01", "A", 1.0, 1), Product("01", "B", 1.0, 1)])


def test_inventory_errors_are_value_errors():
    assert isinstance(ProductNotFoundError(), ValueError)
    assert str(InvalidInputError()) == "Invalid input detected!"
    assert str(DuplicateProductError()) == "Duplicate product detected!"


@pytest.mark.parametrize("price", [float("nan"), float("inf")])
def test_non_finite_price_rejected(manager, price):
    before = snapshot(manager)
    with pytest.raises(InvalidInputError):
        manager.add(Product("06", "Odd", price, 1))
    with pytest.raises(InvalidInputError):
        manager.update("01", price, 1)
    assert snapshot(manager) == before
