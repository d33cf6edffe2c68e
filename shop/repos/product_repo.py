# shop/repos/product_repo.py
from typing import List

from pydantic import TypeAdapter, ValidationError

from shop.domain.errors import Err, LoadError, Ok, Result
from shop.domain.models import Product
from shop.utils.logging import get_logger
from shop.utils.settings import PRODUCTS_PATH

logger = get_logger(__name__)

_products_adapter = TypeAdapter(List[Product])


def load_products(path: str = PRODUCTS_PATH) -> Result[List[Product]]:
    logger.info(f"Ladowanie produktow z {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            products = _products_adapter.validate_json(f.read())
    except FileNotFoundError:
        return Err(LoadError(f"Plik nie istnieje: {path}"))
    except UnicodeDecodeError as e:
        return Err(LoadError(f"Plik {path} nie jest poprawnym UTF-8: {e.reason}"))
    except OSError as e:
        return Err(LoadError(f"Blad odczytu {path}: {e}"))
    except ValidationError as e:
        return Err(LoadError(f"Niepoprawne dane produktow w {path}: {e.error_count()} bledow"))

    ids = [p.id for p in products]
    if len(ids) != len(set(ids)):
        return Err(LoadError(f"Zduplikowane id produktow w {path}"))

    logger.info(f"Zaladowano {len(products)} produktow")
    return Ok(products)
