import pytest

from app.models.product import IN_STOCK, OUT_OF_STOCK, Product, derive_status
from app.services.normalizer import normalize_row, parse_stock


def test_empty_or_missing_name_is_skipped():
    assert normalize_row({"name": "", "stock": "3"}) is None
    assert normalize_row({"name": "   "}) is None
    assert normalize_row({"unit": "pcs"}) is None


def test_defaults_are_filled():
    c = normalize_row({"name": "Hammer", "unit": "", "category": "", "brand": "", "stock": "", "image": ""})
    assert c.name == "Hammer"
    assert c.unit == "pcs"
    assert c.category == "Uncategorized"
    assert c.brand == "Unknown"
    assert c.stock == 0
    assert c.status == OUT_OF_STOCK
    assert c.image is None


def test_values_pass_through():
    c = normalize_row(
        {"name": "Rice", "unit": "kg", "category": "Groceries", "brand": "Daawat", "stock": "24", "image": "https://x/rice.png"}
    )
    assert (c.unit, c.category, c.brand, c.stock) == ("kg", "Groceries", "Daawat", 24)
    assert c.status == IN_STOCK
    assert c.image == "https://x/rice.png"


def test_status_column_is_not_trusted():
    c = normalize_row({"name": "Hammer", "stock": "0", "status": "In Stock"})
    assert c.status == OUT_OF_STOCK


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("7", 7),
        (" 7 ", 7),
        ("7.9", 7),
        ("7 boxes", 7),
        ("+3", 3),
        ("abc", 0),
        ("", 0),
        (None, 0),
        ("-4", 0),
    ],
)
def test_parse_stock(raw, expected):
    assert parse_stock(raw) == expected


@pytest.mark.parametrize("stock,status", [(0, OUT_OF_STOCK), (1, IN_STOCK), (250, IN_STOCK)])
def test_derive_status_boundary(stock, status):
    assert derive_status(stock) == status


def test_product_status_follows_stock_assignment():
    p = Product(name="Hammer", stock=3)
    assert p.status == IN_STOCK
    p.stock = 0
    assert p.status == OUT_OF_STOCK
    p.stock = 9
    assert p.status == IN_STOCK
