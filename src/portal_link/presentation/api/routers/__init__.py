"""API routers."""

from portal_link.presentation.api.routers.auth import router as auth_router
from portal_link.presentation.api.routers.portal_pages import (
    router as portal_pages_router,
)
from portal_link.presentation.api.routers.public_pages import (
    router as public_pages_router,
)

__all__ = [
    "auth_router",
    "portal_pages_router",
    "public_pages_router",
]
