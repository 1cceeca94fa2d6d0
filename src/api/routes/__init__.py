"""
API Routes module - Endpoint definitions.

- bfhl.py   : The operation dispatch endpoint
- health.py : Health check endpoint
"""
from src.api.routes.bfhl import router as bfhl_router
from src.api.routes.health import router as health_router

__all__ = [
    "bfhl_router",
    "health_router",
]
