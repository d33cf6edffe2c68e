# shop/api/routers/health.py
from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request):
    state = request.app.state.shop
    if not state.ready:
        return {"status": "degraded", "error": state.load_error.to_dict()}
    return {"status": "ok", "products": len(state.catalog)}
