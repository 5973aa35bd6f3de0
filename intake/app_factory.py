"""ASGI entry point: ``uvicorn intake.app_factory:app``."""
from intake.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
