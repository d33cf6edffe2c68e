# shop/services/session_service.py
from decimal import Decimal
from typing import Callable, Dict, List, Optional, TypeVar

from shop.data.catalog import Catalog
from shop.domain.errors import Err, InsufficientStockError, InvalidStateError, Ok, Result, ShopError
from shop.domain.models import Cart, Customer, Order, Product, SearchHit
from shop.repos.order_store import OrderStore
from shop.services.cart_builder import CartBuilder, CartState
from shop.services.catalog_query import CatalogQuery
from shop.services.order_assembler import OrderAssembler
from shop.utils.ids import new_session_id
from shop.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def attempt(action: Callable[[], T]) -> Result[T]:
    try:
        return Ok(action())
    except ShopError as e:
        logger.info(f"Komenda odrzucona: {e.kind} - {e.message}")
        return Err(e)


class ShopSession:
    """
    Jedyne wejscie dla sterownika (HTTP, testy, skrypt).
    Kazda komenda zwraca Ok / Err, zadne wyjatki domenowe nie wychodza na zewnatrz.

    place_order mozna powtarzac po PersistenceError - zamowienie jest budowane raz
    i ponawiamy sam zapis, bez odbudowy koszyka.
    """

    def __init__(
        self,
        customer: Customer,
        catalog: Catalog,
        store: OrderStore,
        assembler: Optional[OrderAssembler] = None,
        session_id: Optional[str] = None,
    ):
        self.id = session_id or new_session_id()
        self.customer = customer
        self.catalog = catalog
        self.store = store
        self.query = CatalogQuery(catalog)
        self.builder = CartBuilder(catalog)
        self.assembler = assembler or OrderAssembler()
        self.pending_order: Optional[Order] = None
        self.placed_order: Optional[Order] = None

    @property
    def state(self) -> CartState:
        return self.builder.state

    @property
    def cart(self) -> Cart:
        return self.builder.cart

    #query
    def search(self, text: str, limit: Optional[int] = None) -> Result[List[SearchHit]]:
        return attempt(lambda: self.query.search(text, limit))

    def filter_category(self, category: str) -> Result[List[Product]]:
        return attempt(lambda: self.query.filter_by_category(category))

    def filter_price(self, min_price: Decimal, max_price: Decimal) -> Result[List[Product]]:
        return attempt(lambda: self.query.filter_by_price_range(min_price, max_price))

    def view_cart(self) -> Result[Cart]:
        return Ok(self.cart)

    #commands
    def select_product(self, product_id: str) -> Result[Product]:
        return attempt(lambda: self.builder.select(product_id))

    def choose_quantity(self, quantity: int) -> Result[Cart]:
        return attempt(lambda: self.builder.choose_quantity(quantity))

    def add_to_cart(self, product_id: str, quantity: int) -> Result[Cart]:
        return attempt(lambda: self.builder.add(product_id, quantity))

    def finish_cart(self) -> Result[Cart]:
        return attempt(self.builder.finish)

    def place_order(self) -> Result[Order]:
        if self.placed_order:
            return Ok(self.placed_order)

        if self.state != CartState.REVIEWING:
            return Err(InvalidStateError(self.state.value, "place_order"))

        if self.pending_order is None:
            assembled = attempt(lambda: self.assembler.assemble(self.customer, self.cart))
            if not assembled.ok:
                return assembled
            self.pending_order = assembled.value

        order = self.pending_order

        #stan mogl sie zmienic od dodania do koszyka, sprawdzamy przed zapisem
        for item in order.items:
            product = self.catalog.get(item.product.id)
            if item.quantity > product.stock:
                return Err(InsufficientStockError(product.id, item.quantity, product.stock))

        saved = self.store.append(order)
        if not saved.ok:
            logger.warning(f"Zamowienie {order.id} niezapisane, mozna ponowic: {saved.error.message}")
            return saved

        #zamowienie jest zlozone dopiero po potwierdzonym zapisie
        for item in order.items:
            self.catalog.reserve_stock(item.product.id, item.quantity)

        self.placed_order = order
        self.pending_order = None
        logger.info(f"Order {order.id} placed, total {order.total_amount}")
        return Ok(order)


class SessionRegistry:
    def __init__(self):
        self._sessions: Dict[str, ShopSession] = {}

    def open(self, customer: Customer, catalog: Catalog, store: OrderStore) -> ShopSession:
        session = ShopSession(customer=customer, catalog=catalog, store=store)
        self._sessions[session.id] = session
        logger.info(f"Otwarto sesje {session.id} dla klienta {customer.id}")
        return session

    def get(self, session_id: str) -> Optional[ShopSession]:
        return self._sessions.get(session_id)

    def close(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
