# shop/api/routers/customers.py
from typing import List

from fastapi import APIRouter, Depends

from shop.data.state import ShopState, get_state
from shop.domain.schemas import CustomerOut
from shop.api.errors import unwrap
from shop.domain.errors import CustomerNotFoundError, Err, Ok

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=List[CustomerOut])
def list_customers(name: str | None = None, state: ShopState = Depends(get_state)):
    customers = state.customers.search_by_name(name) if name else state.customers.customers
    return [CustomerOut.model_validate(c) for c in customers]


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: str, state: ShopState = Depends(get_state)):
    customer = state.customers.find_by_id(customer_id)
    result = Ok(customer) if customer else Err(CustomerNotFoundError(customer_id))
    return CustomerOut.model_validate(unwrap(result))
