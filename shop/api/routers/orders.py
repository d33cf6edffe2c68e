# shop/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends

from shop.api.errors import unwrap
from shop.data.state import ShopState, get_state
from shop.domain.models import SalesRecord
from shop.domain.schemas import OrderOut
from shop.services.session_service import attempt

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/", response_model=List[OrderOut])
def list_orders(state: ShopState = Depends(get_state)):
    orders = unwrap(attempt(state.store.load_orders))
    return [OrderOut.of(o) for o in orders]


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, state: ShopState = Depends(get_state)):
    """
    Pobiera zamowienie z pliku (nie z pamieci sesji).
    """
    order = unwrap(attempt(lambda: state.store.get(order_id)))
    return OrderOut.of(order)


@router.get("/{order_id}/sales", response_model=List[SalesRecord])
def get_order_sales(order_id: str, state: ShopState = Depends(get_state)):
    order = unwrap(attempt(lambda: state.store.get(order_id)))
    return SalesRecord.from_order(order)
