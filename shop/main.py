# shop/main.py
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from shop.api.routers import customers, health, orders, products, sessions
from shop.data.state import ShopState
from shop.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(state: Optional[ShopState] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        #katalog i klienci ladowani raz, na czas zycia aplikacji
        app.state.shop = state or ShopState.load()
        if app.state.shop.ready:
            logger.info("Sklep gotowy")
        yield

    app = FastAPI(
        title="Shop Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(customers.router)
    app.include_router(sessions.router)
    app.include_router(orders.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
