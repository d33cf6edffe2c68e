# shop/domain/models.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """
    Produkt z katalogu. Wszystkie pola sa zamrozone poza `stock`,
    ktory zmienia tylko Catalog.reserve_stock przy skladaniu zamowienia.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    id: str = Field(..., min_length=1, frozen=True)
    name: str = Field(..., min_length=1, frozen=True)
    description: str = Field("", frozen=True)
    tags: Tuple[str, ...] = Field(default=(), frozen=True)
    category: str = Field(..., min_length=1, frozen=True)
    price: Decimal = Field(..., gt=0, frozen=True)
    stock: int = Field(..., ge=0)
    created_at: Optional[datetime] = Field(None, frozen=True)


class Customer(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: EmailStr
    address: str = ""
    phone: Optional[str] = None
    registered_at: Optional[datetime] = None

    @field_validator("phone")
    @classmethod
    def phone_min_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) < 10:
            raise ValueError("Numer telefonu musi miec co najmniej 10 znakow")
        return v


class SearchHit(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: Product
    score: float = Field(..., ge=0)


class CartLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(..., gt=0)

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


class Cart(BaseModel):
    """
    Niezmienny koszyk, klucz = product_id. Kazda zmiana zwraca nowy obiekt,
    wiec nieudana operacja nie zostawia po sobie zadnych sladow.
    """

    model_config = ConfigDict(frozen=True)

    lines: Dict[str, CartLine] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total(self) -> Decimal:
        return sum((line.line_total for line in self.lines.values()), Decimal("0.00"))

    def quantity_of(self, product_id: str) -> int:
        line = self.lines.get(product_id)
        return line.quantity if line else 0

    def with_line(self, product: Product, quantity: int) -> "Cart":
        #istniejaca linia -> sumujemy ilosci, nowa -> dopisujemy na koncu
        lines = dict(self.lines)
        merged = self.quantity_of(product.id) + quantity
        lines[product.id] = CartLine(product=product, quantity=merged)
        return Cart(lines=lines)


class OrderStatus(str, Enum):
    PROCESSING = "Processing"
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class ProductSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str

    @classmethod
    def of(cls, product: Product) -> "ProductSnapshot":
        return cls(id=product.id, name=product.name, category=product.category)


class OrderLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: ProductSnapshot
    quantity: int = Field(..., gt=0)
    unit_price: Decimal  # cena z chwili zlozenia zamowienia, nigdy nie przeliczana

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    customer: Customer
    items: Tuple[OrderLine, ...] = Field(..., min_length=1)
    status: OrderStatus = OrderStatus.PROCESSING
    order_date: datetime
    total_amount: Decimal

    def with_status(self, status: OrderStatus) -> "Order":
        return self.model_copy(update={"status": status})

    def total_with_tax(self, tax_rate: Decimal) -> Decimal:
        return (self.total_amount * (Decimal("1") + tax_rate)).quantize(Decimal("0.01"))


MIN_REORDER_LEVEL = 5


class InventoryRecord(BaseModel):
    """Wiersz raportu magazynowego: stan produktu i prog ponownego zamowienia."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    product_name: str
    category: str
    current_stock: int
    reorder_level: int
    last_restocked: Optional[datetime] = None

    @classmethod
    def of(cls, product: Product) -> "InventoryRecord":
        #25% biezacego stanu, ale nie mniej niz 5
        return cls(
            product_id=product.id,
            product_name=product.name,
            category=product.category,
            current_stock=product.stock,
            reorder_level=max(product.stock // 4, MIN_REORDER_LEVEL),
            last_restocked=product.created_at,
        )


class SalesRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    total: Decimal
    customer_name: str

    @classmethod
    def from_order(cls, order: Order) -> List["SalesRecord"]:
        return [
            cls(
                date=order.order_date,
                product_id=item.product.id,
                product_name=item.product.name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                total=item.line_total,
                customer_name=order.customer.name,
            )
            for item in order.items
        ]
