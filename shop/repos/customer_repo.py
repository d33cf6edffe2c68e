# shop/repos/customer_repo.py
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from shop.domain.errors import Err, LoadError, Ok, Result
from shop.domain.models import Customer
from shop.utils.logging import get_logger
from shop.utils.settings import CUSTOMERS_PATH
from shop.utils.text import clean_text, contains_keyword

logger = get_logger(__name__)

_customers_adapter = TypeAdapter(List[Customer])


def load_customers(path: str = CUSTOMERS_PATH) -> Result[List[Customer]]:
    logger.info(f"Ladowanie klientow z {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            customers = _customers_adapter.validate_json(f.read())
    except FileNotFoundError:
        return Err(LoadError(f"Plik nie istnieje: {path}"))
    except UnicodeDecodeError as e:
        return Err(LoadError(f"Plik {path} nie jest poprawnym UTF-8: {e.reason}"))
    except OSError as e:
        return Err(LoadError(f"Blad odczytu {path}: {e}"))
    except ValidationError as e:
        return Err(LoadError(f"Niepoprawne dane klientow w {path}: {e.error_count()} bledow"))

    logger.info(f"Zaladowano {len(customers)} klientow")
    return Ok(customers)


class CustomerRepo:
    def __init__(self, customers: List[Customer]):
        self.customers = list(customers)

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        return next((c for c in self.customers if c.id == customer_id), None)

    def find_by_email(self, email: str) -> Optional[Customer]:
        wanted = clean_text(email)
        return next((c for c in self.customers if clean_text(c.email) == wanted), None)

    def search_by_name(self, query: str) -> List[Customer]:
        return [c for c in self.customers if contains_keyword([query], c.name)]
