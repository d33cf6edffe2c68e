# shop/services/order_assembler.py
from datetime import datetime
from decimal import Decimal
from typing import Callable

from shop.domain.errors import EmptyCartError
from shop.domain.models import Cart, Customer, Order, OrderLine, OrderStatus, ProductSnapshot
from shop.utils.ids import new_order_id
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class OrderAssembler:
    """
    Buduje niezmienne zamowienie z zamknietego koszyka.
    Klient i produkty sa kopiowane, wiec pozniejsze zmiany w katalogu nie ruszaja historii.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def assemble(self, customer: Customer, cart: Cart) -> Order:
        if cart.is_empty:
            raise EmptyCartError()

        now = self.clock().replace(microsecond=0)
        items = tuple(
            OrderLine(
                product=ProductSnapshot.of(line.product),
                quantity=line.quantity,
                unit_price=line.product.price,
            )
            for line in cart.lines.values()
        )
        total = sum((item.line_total for item in items), Decimal("0.00"))

        order = Order(
            id=new_order_id(now),
            customer=customer.model_copy(deep=True),
            items=items,
            status=OrderStatus.PROCESSING,
            order_date=now,
            total_amount=total,
        )

        logger.info(f"Order {order.id} assembled for customer {customer.id}, total {total}")
        return order
