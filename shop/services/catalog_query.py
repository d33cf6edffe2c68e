# shop/services/catalog_query.py
from decimal import Decimal
from typing import List, Optional

from shop.data.catalog import Catalog
from shop.domain.errors import InvalidRangeError
from shop.domain.models import InventoryRecord, Product, SearchHit
from shop.services.ranking import rank
from shop.utils.logging import get_logger
from shop.utils.settings import SEARCH_RESULT_LIMIT
from shop.utils.text import clean_text

logger = get_logger(__name__)


class CatalogQuery:
    """
    Zapytania tylko do odczytu nad katalogiem.
    Mozna je dowolnie przeplatac z operacjami na koszyku.
    """

    def __init__(self, catalog: Catalog, default_limit: int = SEARCH_RESULT_LIMIT):
        self.catalog = catalog
        self.default_limit = default_limit

    def search(self, query: str, limit: Optional[int] = None) -> List[SearchHit]:
        hits = rank(query, self.catalog.products)

        limit = self.default_limit if limit is None else limit
        if limit > 0:
            hits = hits[:limit]

        logger.info(f"Wyszukiwanie '{query}': {len(hits)} wynikow")
        return hits

    def filter_by_category(self, category: str) -> List[Product]:
        wanted = clean_text(category)
        return [p for p in self.catalog.products if clean_text(p.category) == wanted]

    def filter_by_price_range(self, min_price: Decimal, max_price: Decimal) -> List[Product]:
        if min_price > max_price:
            raise InvalidRangeError(min_price, max_price)
        return [p for p in self.catalog.products if min_price <= p.price <= max_price]

    def all_products(self) -> List[Product]:
        return self.catalog.products

    def categories(self) -> List[str]:
        return sorted({p.category for p in self.catalog.products})

    def low_stock(self, threshold: int) -> List[Product]:
        return [p for p in self.catalog.products if p.stock <= threshold]

    def inventory(self) -> List[InventoryRecord]:
        return [InventoryRecord.of(p) for p in self.catalog.products]

    def get(self, product_id: str) -> Product:
        return self.catalog.get(product_id)
