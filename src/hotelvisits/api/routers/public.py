"""Public routes: health check plus the /api resource routers."""

from fastapi import APIRouter

from hotelvisits.api.routes import customers, hotels, visitations

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}


api_router = APIRouter(prefix="/api")
api_router.include_router(customers.router)
api_router.include_router(hotels.router)
api_router.include_router(visitations.router)
