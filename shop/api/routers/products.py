# shop/api/routers/products.py
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Query

from shop.api.errors import unwrap
from shop.data.state import ShopState, get_state
from shop.domain.models import InventoryRecord
from shop.domain.schemas import ProductOut, SearchHitOut
from shop.services.catalog_query import CatalogQuery
from shop.services.session_service import attempt
from shop.utils.settings import LOW_STOCK_THRESHOLD

router = APIRouter(prefix="/products", tags=["products"])


def get_query(state: ShopState = Depends(get_state)) -> CatalogQuery:
    return CatalogQuery(state.catalog)


@router.get("/", response_model=List[ProductOut])
def list_products(
    category: str | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
    query: CatalogQuery = Depends(get_query),
):
    products = query.all_products()

    if category is not None:
        products = unwrap(attempt(lambda: query.filter_by_category(category)))

    if min_price is not None or max_price is not None:
        low = min_price if min_price is not None else Decimal("0")
        high = max_price if max_price is not None else Decimal("Infinity")
        in_range = unwrap(attempt(lambda: query.filter_by_price_range(low, high)))
        wanted = {p.id for p in in_range}
        products = [p for p in products if p.id in wanted]

    return [ProductOut.model_validate(p) for p in products]


@router.get("/search", response_model=List[SearchHitOut])
def search_products(
    q: str = Query(""),
    limit: int | None = Query(None, ge=0),
    query: CatalogQuery = Depends(get_query),
):
    hits = unwrap(attempt(lambda: query.search(q, limit)))
    return [SearchHitOut.model_validate(h) for h in hits]


@router.get("/categories", response_model=List[str])
def list_categories(query: CatalogQuery = Depends(get_query)):
    return query.categories()


@router.get("/low-stock", response_model=List[ProductOut])
def low_stock(
    threshold: int = Query(LOW_STOCK_THRESHOLD, ge=0),
    query: CatalogQuery = Depends(get_query),
):
    return [ProductOut.model_validate(p) for p in query.low_stock(threshold)]


@router.get("/inventory", response_model=List[InventoryRecord])
def inventory(query: CatalogQuery = Depends(get_query)):
    return query.inventory()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, query: CatalogQuery = Depends(get_query)):
    product = unwrap(attempt(lambda: query.get(product_id)))
    return ProductOut.model_validate(product)
