"""Portal page domain exceptions."""

from typing import Any

from portal_link.domain.shared.exceptions import (
    AuthorizationError,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidPortalPageError(ValidationError):
    """Raised when a page or link field violates its validation rule."""

    def __init__(self, reason: str, field: str | None = None) -> None:
        details: dict[str, Any] = {"field": field} if field else {}
        super().__init__(
            message=reason,
            code=ErrorCode.INVALID_PARAMS,
            details=details,
        )
        self.field = field


class SlugAlreadyExistsError(ConflictError):
    """Raised when a slug is already taken by another portal page."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            message=f"Slug '{slug}' is already taken",
            code=ErrorCode.SLUG_EXISTS,
            details={"slug": slug},
        )
        self.slug = slug


class PortalPageNotFoundError(EntityNotFoundError):
    """Raised when a portal page cannot be found by id or slug."""

    def __init__(
        self,
        portal_page_id: int | None = None,
        slug: str | None = None,
    ) -> None:
        identifier = slug if slug is not None else portal_page_id
        super().__init__(
            message=f"Portal page '{identifier}' not found",
            code=ErrorCode.PORTAL_PAGE_NOT_FOUND,
            details={"portal_page_id": portal_page_id, "slug": slug},
        )


class LinkNotFoundError(EntityNotFoundError):
    """Raised when a link id is not part of the portal page."""

    def __init__(self, link_id: int, portal_page_id: int | None = None) -> None:
        super().__init__(
            message=f"Link '{link_id}' not found",
            code=ErrorCode.LINK_NOT_FOUND,
            details={"link_id": link_id, "portal_page_id": portal_page_id},
        )
        self.link_id = link_id


class PortalPageAccessDeniedError(AuthorizationError):
    """Raised when a user acts on a portal page they do not own."""

    def __init__(self, portal_page_id: int, user_id: int) -> None:
        super().__init__(
            message="You do not have access to this portal page",
            code=ErrorCode.UNAUTHORIZED,
            details={"portal_page_id": portal_page_id, "user_id": user_id},
        )
