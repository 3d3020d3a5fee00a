"""FastAPI dependencies resolving the stores owned by the running app."""

from fastapi import Request

from hotelvisits.infra.stores.bundle import Stores


def get_stores(request: Request) -> Stores:
    """Return the Stores bundle built by create_app()."""
    return request.app.state.stores
