"""HTTP API package."""
from src.api.routes import router

__all__ = ["router"]
