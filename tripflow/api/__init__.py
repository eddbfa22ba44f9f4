"""FastAPI application and routes."""

from tripflow.api.app import create_app
from tripflow.api.routes import router

__all__ = ["create_app", "router"]
