# shop/services/cart_builder.py
from enum import Enum
from typing import Optional

from shop.data.catalog import Catalog
from shop.domain.errors import (
    EmptyCartError,
    InsufficientStockError,
    InvalidQuantityError,
    InvalidStateError,
)
from shop.domain.models import Cart, Product
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class CartState(str, Enum):
    BROWSING = "BROWSING"
    SELECTING = "SELECTING"
    REVIEWING = "REVIEWING"


class CartBuilder:
    """
    Maszyna stanow koszyka dla jednej sesji:
    BROWSING -> SELECTING(produkt) -> BROWSING ... -> REVIEWING (koniec)

    Stan magazynu czytamy z katalogu przy kazdym dodaniu, nic nie jest cache'owane.
    Nieudana komenda zostawia koszyk bez zmian.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self.state = CartState.BROWSING
        self.pending: Optional[Product] = None
        self.cart = Cart()

    def _require(self, state: CartState, action: str) -> None:
        if self.state != state:
            raise InvalidStateError(self.state.value, action)

    #commands
    def select(self, product_id: str) -> Product:
        self._require(CartState.BROWSING, "select")

        product = self.catalog.get(product_id)
        self.pending = product
        self.state = CartState.SELECTING
        return product

    def choose_quantity(self, quantity: int) -> Cart:
        self._require(CartState.SELECTING, "choose_quantity")

        product = self.pending
        #niezaleznie od wyniku wracamy do przegladania
        self.pending = None
        self.state = CartState.BROWSING

        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        requested = self.cart.quantity_of(product.id) + quantity
        if requested > product.stock:
            logger.warning(
                f"Odrzucono dodanie {quantity} szt. produktu {product.id}: "
                f"zadano lacznie {requested}, dostepne {product.stock}"
            )
            raise InsufficientStockError(product.id, requested, product.stock)

        self.cart = self.cart.with_line(product, quantity)
        logger.info(f"Dodano {quantity} szt. produktu {product.id}, w koszyku {requested}")
        return self.cart

    def cancel_selection(self) -> None:
        self._require(CartState.SELECTING, "cancel_selection")
        self.pending = None
        self.state = CartState.BROWSING

    def add(self, product_id: str, quantity: int) -> Cart:
        self.select(product_id)
        return self.choose_quantity(quantity)

    def finish(self) -> Cart:
        self._require(CartState.BROWSING, "finish")

        if self.cart.is_empty:
            raise EmptyCartError()

        self.state = CartState.REVIEWING
        logger.info(f"Koszyk zamkniety, {len(self.cart.lines)} pozycji, suma {self.cart.total}")
        return self.cart
