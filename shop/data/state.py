# shop/data/state.py
from typing import Optional

from fastapi import HTTPException, Request

from shop.data.catalog import Catalog
from shop.domain.errors import LoadError
from shop.repos.customer_repo import CustomerRepo, load_customers
from shop.repos.order_store import OrderStore
from shop.repos.product_repo import load_products
from shop.services.session_service import SessionRegistry
from shop.utils.logging import get_logger
from shop.utils.settings import CUSTOMERS_PATH, ORDERS_PATH, PRODUCTS_PATH

logger = get_logger(__name__)


class ShopState:
    """
    Wszystko co zyje przez czas dzialania aplikacji: migawka katalogu, klienci,
    plik zamowien i otwarte sesje. Blad ladowania nie zabija procesu, tylko blokuje sklep.
    """

    def __init__(
        self,
        catalog: Optional[Catalog],
        customers: Optional[CustomerRepo],
        store: OrderStore,
        load_error: Optional[LoadError] = None,
    ):
        self.catalog = catalog
        self.customers = customers
        self.store = store
        self.load_error = load_error
        self.sessions = SessionRegistry()

    @property
    def ready(self) -> bool:
        return self.load_error is None

    @classmethod
    def load(
        cls,
        products_path: str = PRODUCTS_PATH,
        customers_path: str = CUSTOMERS_PATH,
        orders_path: str = ORDERS_PATH,
    ) -> "ShopState":
        store = OrderStore(orders_path)

        products = load_products(products_path)
        if not products.ok:
            logger.error(f"Sklep niedostepny: {products.error.message}")
            return cls(None, None, store, products.error)

        customers = load_customers(customers_path)
        if not customers.ok:
            logger.error(f"Sklep niedostepny: {customers.error.message}")
            return cls(None, None, store, customers.error)

        logger.info(
            f"Zaladowano {len(products.value)} produktow i {len(customers.value)} klientow"
        )
        return cls(Catalog(products.value), CustomerRepo(customers.value), store)


def get_state(request: Request) -> ShopState:
    state: ShopState = request.app.state.shop
    if not state.ready:
        raise HTTPException(status_code=503, detail=state.load_error.to_dict())
    return state
