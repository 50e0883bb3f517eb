from pressdesk.presentation.api.routers.dashboard import router as dashboard_router
from pressdesk.presentation.api.routers.navigation import router as navigation_router

__all__ = [
    "dashboard_router",
    "navigation_router",
]
