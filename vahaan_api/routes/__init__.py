"""
Route package initialization.
"""
from .ssr import router as ssr_router
from .vehicles import router as vehicles_router

__all__ = ["ssr_router", "vehicles_router"]
