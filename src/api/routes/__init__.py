"""API route modules."""

from .auth import router as auth_router
from .drive import router as drive_router
from .events import router as events_router
from .health import router as health_router
from .mail import router as mail_router

__all__ = ["auth_router", "drive_router", "events_router", "health_router", "mail_router"]
