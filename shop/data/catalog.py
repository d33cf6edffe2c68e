# shop/data/catalog.py
from typing import Dict, Iterable, List, Optional

from shop.domain.errors import InsufficientStockError, ProductNotFoundError
from shop.domain.models import Product
from shop.utils.logging import get_logger

logger = get_logger(__name__)


class Catalog:
    """
    Uchwyt na katalog produktow dla jednej sesji aplikacji
    -migawka ladowana raz przy starcie
    -jedyne miejsce ktore zmienia stock (reserve_stock)
    """

    def __init__(self, products: Iterable[Product]):
        self._products: List[Product] = list(products)
        self._by_id: Dict[str, Product] = {p.id: p for p in self._products}

    def __len__(self) -> int:
        return len(self._products)

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def get(self, product_id: str) -> Product:
        product = self.find_by_id(product_id)
        if not product:
            raise ProductNotFoundError(product_id)
        return product

    def reserve_stock(self, product_id: str, quantity: int) -> Product:
        product = self.get(product_id)

        if quantity > product.stock:
            raise InsufficientStockError(product_id, quantity, product.stock)

        product.stock = product.stock - quantity
        logger.info(f"Zarezerwowano {quantity} szt. produktu {product_id}, pozostalo {product.stock}")
        return product
