from .users import router as users_router
from .content import router as content_router
from .approvals import router as approvals_router
from .calendar import router as calendar_router
from .workflows import router as workflows_router
from .analytics import router as analytics_router

__all__ = [
    "users_router",
    "content_router",
    "approvals_router",
    "calendar_router",
    "workflows_router",
    "analytics_router",
]
