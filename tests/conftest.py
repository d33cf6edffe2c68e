"""
Wspolne fixture'y: katalog, klient, plik zamowien w tmp_path.
"""
import json
from datetime import datetime
from decimal import Decimal

import pytest

from shop.data.catalog import Catalog
from shop.domain.models import Customer, Product
from shop.repos.order_store import OrderStore
from shop.services.order_assembler import OrderAssembler
from shop.services.session_service import ShopSession


@pytest.fixture
def make_product():
    def _make(
        id="P1",
        name="Product",
        description="",
        tags=(),
        category="Misc",
        price="10.00",
        stock=10,
    ):
        return Product(
            id=id,
            name=name,
            description=description,
            tags=tags,
            category=category,
            price=Decimal(price),
            stock=stock,
        )

    return _make


@pytest.fixture
def laptop(make_product):
    return make_product(
        id="P001",
        name="Gaming Laptop ASUS",
        description="High-performance gaming computer",
        tags=("laptop", "gaming", "asus"),
        category="Electronics",
        price="1899",
        stock=3,
    )


@pytest.fixture
def products(laptop, make_product):
    return [
        laptop,
        make_product(
            id="P002",
            name="Wireless Mouse Logitech",
            description="Ergonomic wireless mouse for office and gaming",
            tags=("mouse", "wireless", "logitech"),
            category="Accessories",
            price="49.50",
            stock=25,
        ),
        make_product(
            id="P003",
            name="Mechanical Keyboard",
            description="RGB mechanical keyboard with blue switches",
            tags=("keyboard", "mechanical", "rgb"),
            category="Accessories",
            price="129.99",
            stock=12,
        ),
        make_product(
            id="P004",
            name="Office Chair",
            description="Adjustable ergonomic office chair",
            tags=("chair", "office"),
            category="Furniture",
            price="259.00",
            stock=2,
        ),
    ]


@pytest.fixture
def catalog(products):
    return Catalog(products)


@pytest.fixture
def customer():
    return Customer(
        id="C001",
        name="Anna Kowalska",
        email="anna.kowalska@example.com",
        address="ul. Dluga 12, Krakow",
        phone="+48123456789",
    )


@pytest.fixture
def orders_path(tmp_path):
    return str(tmp_path / "orders.csv")


@pytest.fixture
def store(orders_path):
    # bez ponawiania, testy bledow nie czekaja na backoff
    return OrderStore(orders_path, retry_attempts=1)


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 5, 17, 14, 30, 5, 123456)


@pytest.fixture
def session(customer, catalog, store, fixed_clock):
    return ShopSession(
        customer=customer,
        catalog=catalog,
        store=store,
        assembler=OrderAssembler(clock=fixed_clock),
    )


@pytest.fixture
def data_files(tmp_path):
    """Pliki JSON w formacie camelCase, tak jak w katalogu data/."""
    products_path = tmp_path / "products.json"
    customers_path = tmp_path / "customers.json"

    products_path.write_text(
        json.dumps(
            [
                {
                    "id": "P001",
                    "name": "Gaming Laptop ASUS",
                    "description": "High-performance gaming computer",
                    "price": "1899.00",
                    "category": "Electronics",
                    "stock": 3,
                    "tags": ["laptop", "gaming", "asus"],
                    "createdAt": "2024-01-15T10:00:00",
                },
                {
                    "id": "P002",
                    "name": "Wireless Mouse Logitech",
                    "description": "Ergonomic wireless mouse for office and gaming",
                    "price": "49.50",
                    "category": "Accessories",
                    "stock": 25,
                    "tags": ["mouse", "wireless"],
                },
            ]
        ),
        encoding="utf-8",
    )
    customers_path.write_text(
        json.dumps(
            [
                {
                    "id": "C001",
                    "name": "Anna Kowalska",
                    "email": "anna.kowalska@example.com",
                    "address": "ul. Dluga 12, Krakow",
                    "phone": "+48123456789",
                    "registeredAt": "2023-11-02T10:00:00",
                },
                {
                    "id": "C002",
                    "name": "Piotr Nowak",
                    "email": "piotr.nowak@example.com",
                    "address": "ul. Polna 3, Warszawa",
                    "phone": None,
                },
            ]
        ),
        encoding="utf-8",
    )
    return {
        "products": str(products_path),
        "customers": str(customers_path),
        "orders": str(tmp_path / "orders.csv"),
    }
