# shop/api/errors.py
from typing import TypeVar

from fastapi import HTTPException

from shop.domain.errors import Result

T = TypeVar("T")

STATUS_BY_KIND = {
    "EmptyQuery": 400,
    "InvalidRange": 400,
    "InvalidQuantity": 400,
    "EmptyCart": 400,
    "InsufficientStock": 409,
    "InvalidState": 409,
    "ProductNotFound": 404,
    "CustomerNotFound": 404,
    "OrderNotFound": 404,
    "LoadError": 503,
    "PersistenceError": 503,
}


def unwrap(result: Result[T]) -> T:
    """Ok -> wartosc, Err -> HTTPException ze statusem zaleznym od rodzaju bledu."""
    if result.ok:
        return result.value
    error = result.error
    raise HTTPException(status_code=STATUS_BY_KIND.get(error.kind, 400), detail=error.to_dict())
