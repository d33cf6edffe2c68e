# shop/domain/errors.py
"""
Bledy domenowe sklepu.

Serwisy rzucaja wyjatki z tej hierarchii, a fasada sesji (ShopSession) i OrderStore
zamieniaja je na wartosci Ok / Err, wiec do warstwy wywolujacej nie przechodzi zaden wyjatek.
Kazdy blad ma staly tag `kind` uzywany przez API.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")


class ShopError(Exception):
    kind = "ShopError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message, **self.details()}


# ---------------- walidacja ----------------

class EmptyQueryError(ShopError):
    kind = "EmptyQuery"

    def __init__(self):
        super().__init__("Zapytanie nie moze byc puste")


class InvalidRangeError(ShopError):
    kind = "InvalidRange"

    def __init__(self, min_price: Decimal, max_price: Decimal):
        super().__init__(f"Niepoprawny zakres cen: {min_price} > {max_price}")
        self.min_price = min_price
        self.max_price = max_price

    def details(self):
        return {"min": str(self.min_price), "max": str(self.max_price)}


class InsufficientStockError(ShopError):
    kind = "InsufficientStock"

    def __init__(self, product_id: str, requested: int, available: int):
        super().__init__(
            f"Brak wystarczajacej ilosci produktu {product_id}: "
            f"zadano {requested}, dostepne {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available

    def details(self):
        return {
            "product_id": self.product_id,
            "requested": self.requested,
            "available": self.available,
        }


class InvalidQuantityError(ShopError):
    kind = "InvalidQuantity"

    def __init__(self, quantity: int):
        super().__init__(f"Ilosc musi byc wieksza niz 0 (podano {quantity})")
        self.quantity = quantity

    def details(self):
        return {"quantity": self.quantity}


class EmptyCartError(ShopError):
    kind = "EmptyCart"

    def __init__(self):
        super().__init__("Koszyk jest pusty")


class InvalidStateError(ShopError):
    kind = "InvalidState"

    def __init__(self, state: str, action: str):
        super().__init__(f"Operacja '{action}' niedozwolona w stanie {state}")
        self.state = state
        self.action = action

    def details(self):
        return {"state": self.state, "action": self.action}


# ---------------- wyszukiwanie po id ----------------

class ProductNotFoundError(ShopError):
    kind = "ProductNotFound"

    def __init__(self, product_id: str):
        super().__init__(f"Produkt nie istnieje: {product_id}")
        self.product_id = product_id

    def details(self):
        return {"product_id": self.product_id}


class CustomerNotFoundError(ShopError):
    kind = "CustomerNotFound"

    def __init__(self, customer_id: str):
        super().__init__(f"Klient nie istnieje: {customer_id}")
        self.customer_id = customer_id

    def details(self):
        return {"customer_id": self.customer_id}


class OrderNotFoundError(ShopError):
    kind = "OrderNotFound"

    def __init__(self, order_id: str):
        super().__init__(f"Zamowienie nie istnieje: {order_id}")
        self.order_id = order_id

    def details(self):
        return {"order_id": self.order_id}


# ---------------- I/O ----------------

class LoadError(ShopError):
    kind = "LoadError"

    def __init__(self, reason: str):
        super().__init__(f"Blad ladowania danych: {reason}")
        self.reason = reason

    def details(self):
        return {"reason": self.reason}


class PersistenceError(ShopError):
    kind = "PersistenceError"

    def __init__(self, reason: str):
        super().__init__(f"Blad zapisu zamowienia: {reason}")
        self.reason = reason

    def details(self):
        return {"reason": self.reason}


# ---------------- Result ----------------

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ShopError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
