# shop/api/routers/sessions.py
from fastapi import APIRouter, Depends, HTTPException

from shop.api.errors import unwrap
from shop.data.state import ShopState, get_state
from shop.domain.errors import CustomerNotFoundError, Err
from shop.domain.schemas import CartOut, CreateSessionIn, ItemIn, OrderOut
from shop.services.session_service import ShopSession

router = APIRouter(prefix="/sessions", tags=["sessions"])


def get_session(session_id: str, state: ShopState = Depends(get_state)) -> ShopSession:
    session = state.sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Sesja nie znaleziona")
    return session


def cart_out(session: ShopSession) -> CartOut:
    return CartOut.of(session.id, session.customer.id, session.state.value, session.cart)


@router.post("/", response_model=CartOut, status_code=201)
def open_session(payload: CreateSessionIn, state: ShopState = Depends(get_state)):
    customer = state.customers.find_by_id(payload.customer_id)
    if not customer:
        unwrap(Err(CustomerNotFoundError(payload.customer_id)))

    session = state.sessions.open(customer, state.catalog, state.store)
    return cart_out(session)


@router.get("/{session_id}", response_model=CartOut)
def get_cart(session: ShopSession = Depends(get_session)):
    return cart_out(session)


@router.post("/{session_id}/items", response_model=CartOut)
def add_item(payload: ItemIn, session: ShopSession = Depends(get_session)):
    unwrap(session.add_to_cart(payload.product_id, payload.quantity))
    return cart_out(session)


@router.post("/{session_id}/finish", response_model=CartOut)
def finish_cart(session: ShopSession = Depends(get_session)):
    unwrap(session.finish_cart())
    return cart_out(session)


@router.post("/{session_id}/order", response_model=OrderOut, status_code=201)
def place_order(session: ShopSession = Depends(get_session)):
    """
    Sklada i zapisuje zamowienie. Po 503 (PersistenceError) mozna wywolac ponownie -
    zapisane zostanie to samo zamowienie.
    """
    order = unwrap(session.place_order())
    return OrderOut.of(order)
