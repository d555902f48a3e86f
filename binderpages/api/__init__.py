from binderpages.api.health import router as health_router
from binderpages.api.layout import router as layout_router

__all__ = [
    "health_router",
    "layout_router",
]
