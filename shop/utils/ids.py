# shop/utils/ids.py
import secrets
import uuid
from datetime import datetime


def new_order_id(now: datetime | None = None) -> str:
    """
    ORDER-<yyyyMMdd-HHmmss>-<6 hex>
    prefiks czasowy sortuje sie leksykograficznie, sufiks rozroznia zamowienia z tej samej sekundy
    """
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return f"ORDER-{stamp}-{secrets.token_hex(3).upper()}"


def new_session_id() -> str:
    return uuid.uuid4().hex
