# shop/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from shop.domain.models import Cart, Order
from shop.utils.settings import TAX_RATE


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: str
    name: str
    description: str
    tags: List[str]
    category: str
    price: Decimal
    stock: int

    model_config = ConfigDict(from_attributes=True)


class SearchHitOut(BaseModel):
    product: ProductOut
    score: float

    model_config = ConfigDict(from_attributes=True)


class CustomerOut(BaseModel):
    id: str
    name: str
    email: str
    address: str
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CreateSessionIn(BaseModel):
    """Schema dla otwarcia sesji zakupowej."""

    customer_id: str = Field(..., min_length=1, description="ID klienta")


class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., min_length=1, description="ID produktu")
    quantity: int = Field(..., description="Ilosc produktu")


class CartLineOut(BaseModel):
    product_id: str
    name: str
    quantity: int
    price: Decimal
    line_total: Decimal


class CartOut(BaseModel):
    """Schema dla koszyka w sesji (response)."""

    session_id: str
    customer_id: str
    state: str
    items: List[CartLineOut]
    total: Decimal

    @classmethod
    def of(cls, session_id: str, customer_id: str, state: str, cart: Cart) -> "CartOut":
        return cls(
            session_id=session_id,
            customer_id=customer_id,
            state=state,
            items=[
                CartLineOut(
                    product_id=line.product.id,
                    name=line.product.name,
                    quantity=line.quantity,
                    price=line.product.price,
                    line_total=line.line_total,
                )
                for line in cart.lines.values()
            ],
            total=cart.total,
        )


class OrderLineOut(BaseModel):
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    id: str
    customer_id: str
    customer_name: str
    status: str
    order_date: datetime
    items: List[OrderLineOut]
    total_amount: Decimal
    total_with_tax: Decimal

    @classmethod
    def of(cls, order: Order) -> "OrderOut":
        return cls(
            id=order.id,
            customer_id=order.customer.id,
            customer_name=order.customer.name,
            status=order.status.value,
            order_date=order.order_date,
            items=[
                OrderLineOut(
                    product_id=item.product.id,
                    product_name=item.product.name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
                for item in order.items
            ],
            total_amount=order.total_amount,
            total_with_tax=order.total_with_tax(TAX_RATE),
        )
