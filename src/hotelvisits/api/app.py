"""ASGI entry point: ``uvicorn hotelvisits.api.app:app``."""

from .factory import create_app

app = create_app()
