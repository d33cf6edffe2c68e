# shop/repos/order_store.py
import csv
import io
import os
import tempfile
import threading
from contextlib import suppress
from datetime import datetime
from decimal import Decimal
from typing import Dict, List

from shop.domain.errors import Err, Ok, OrderNotFoundError, PersistenceError, Result
from shop.domain.models import Customer, Order, OrderLine, OrderStatus, ProductSnapshot
from shop.utils.logging import get_logger
from shop.utils.retry import store_retry
from shop.utils.settings import ORDERS_PATH, STORE_RETRY_ATTEMPTS

logger = get_logger(__name__)

CSV_COLUMNS = [
    "OrderId",
    "CustomerId",
    "CustomerName",
    "CustomerEmail",
    "CustomerAddress",
    "CustomerPhone",
    "OrderDate",
    "Status",
    "TotalAmount",
    "ProductId",
    "ProductName",
    "Category",
    "Quantity",
    "UnitPrice",
    "LineTotal",
]

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def encode_order(order: Order) -> List[List[str]]:
    """Jeden wiersz na pozycje zamowienia, wszystkie ze wspolnym OrderId."""
    c = order.customer
    return [
        [
            order.id,
            c.id,
            c.name,
            c.email,
            c.address,
            c.phone or "",
            order.order_date.strftime(DATE_FORMAT),
            order.status.value,
            str(order.total_amount),
            item.product.id,
            item.product.name,
            item.product.category,
            str(item.quantity),
            str(item.unit_price),
            str(item.line_total),
        ]
        for item in order.items
    ]


def decode_orders(rows: List[Dict[str, str]]) -> List[Order]:
    grouped: Dict[str, List[Dict[str, str]]] = {}
    for row in rows:
        grouped.setdefault(row["OrderId"], []).append(row)

    orders = []
    for order_id, order_rows in grouped.items():
        head = order_rows[0]
        orders.append(
            Order(
                id=order_id,
                customer=Customer(
                    id=head["CustomerId"],
                    name=head["CustomerName"],
                    email=head["CustomerEmail"],
                    address=head["CustomerAddress"],
                    phone=head["CustomerPhone"] or None,
                ),
                items=tuple(
                    OrderLine(
                        product=ProductSnapshot(
                            id=r["ProductId"],
                            name=r["ProductName"],
                            category=r["Category"],
                        ),
                        quantity=int(r["Quantity"]),
                        unit_price=Decimal(r["UnitPrice"]),
                    )
                    for r in order_rows
                ),
                status=OrderStatus(head["Status"]),
                order_date=datetime.strptime(head["OrderDate"], DATE_FORMAT),
                total_amount=Decimal(head["TotalAmount"]),
            )
        )
    return orders


class OrderStore:
    """
    Plik CSV z zamowieniami, tylko dopisywanie.

    Zapis atomowy: stara zawartosc + nowe wiersze ida do pliku tymczasowego w tym samym
    katalogu, fsync, potem os.replace. Czytelnik widzi albo stary plik, albo nowy, nigdy pol rekordu.
    """

    def __init__(self, path: str = ORDERS_PATH, retry_attempts: int = STORE_RETRY_ATTEMPTS):
        self.path = path
        self.retry_attempts = retry_attempts
        self._lock = threading.Lock()

    #commands
    def append(self, order: Order) -> Result[None]:
        with self._lock:
            try:
                existing = self._read_text()
                if order.id in {row["OrderId"] for row in self._parse(existing)}:
                    return Err(PersistenceError(f"Zamowienie {order.id} jest juz zapisane"))

                store_retry(self.retry_attempts)(self._replace_with)(existing, encode_order(order))
            except PersistenceError as e:
                logger.error(f"Nie udalo sie zapisac zamowienia {order.id}: {e.reason}")
                return Err(e)
            except (OSError, csv.Error, ValueError, KeyError) as e:
                logger.error(f"Nie udalo sie zapisac zamowienia {order.id}: {e}")
                return Err(PersistenceError(str(e)))

        logger.info(f"Order {order.id} saved to {self.path}")
        return Ok(None)

    #queries
    def load_orders(self) -> List[Order]:
        with self._lock:
            rows = self._parse(self._read_text())
            try:
                return decode_orders(rows)
            except (ValueError, KeyError, TypeError, ArithmeticError) as e:
                raise PersistenceError(f"Uszkodzony rekord w {self.path}: {e}") from e

    def get(self, order_id: str) -> Order:
        for order in self.load_orders():
            if order.id == order_id:
                return order
        raise OrderNotFoundError(order_id)

    def raw_lines(self) -> List[str]:
        return self._read_text().splitlines()

    #helpers
    def _read_text(self) -> str:
        #pusty plik albo same biale znaki traktujemy jak brak pliku
        if not os.path.exists(self.path):
            return ""
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise PersistenceError(f"Plik {self.path} nie jest poprawnym UTF-8: {e}") from e
        except OSError as e:
            raise PersistenceError(f"Blad odczytu {self.path}: {e}") from e
        return text if text.strip() else ""

    def _parse(self, text: str) -> List[Dict[str, str]]:
        if not text:
            return []
        reader = csv.DictReader(io.StringIO(text, newline=""))
        try:
            if reader.fieldnames != CSV_COLUMNS:
                raise PersistenceError(f"Niepoprawny naglowek w {self.path}: {reader.fieldnames}")
            return list(reader)
        except csv.Error as e:
            raise PersistenceError(f"Uszkodzony plik CSV {self.path}: {e}") from e

    def _replace_with(self, existing: str, rows: List[List[str]]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(prefix=".orders-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                if existing:
                    f.write(existing)
                    if not existing.endswith("\n"):
                        f.write("\n")
                else:
                    writer.writerow(CSV_COLUMNS)
                writer.writerows(rows)
                f.flush()
                os.fsync(f.fileno())

            os.replace(tmp_path, self.path)
        except Exception:
            with suppress(OSError):
                os.remove(tmp_path)
            raise
