"""Portal page schemas for API request/response models."""

from pydantic import BaseModel, ConfigDict, Field

from portal_link.domain.shared import MAX_ID


class LinkRequest(BaseModel):
    """A link in a page update. Omit ``id`` (or send 0) for a new link."""

    id: int = Field(
        default=0,
        ge=0,
        le=MAX_ID,
        description="Existing link id, 0 for new",
    )
    title: str = Field(..., description="Link title (1-100 characters)")
    url: str = Field(..., description="Absolute URL")
    description: str = Field(default="", description="Up to 500 characters")
    icon_url: str = Field(default="", description="Absolute URL or empty")
    display_order: int = Field(..., description="Position, starting at 1")


class PortalPageCreateRequest(BaseModel):
    """Request schema for creating a portal page."""

    slug: str = Field(..., description="3-50 chars: lowercase, digits, hyphens")
    title: str = Field(..., description="Page title (1-100 characters)")
    bio: str = Field(default="", description="Up to 500 characters")
    profile_image_url: str = Field(default="", description="Absolute URL or empty")
    theme: str = Field(default="", description="'light' (default) or 'dark'")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "slug": "john-doe",
                "title": "John Doe",
                "bio": "Photographer and hiker",
                "profile_image_url": "https://example.com/me.png",
                "theme": "light",
            },
        },
    )


class PortalPageUpdateRequest(BaseModel):
    """Request schema for updating a portal page.

    Empty or omitted profile fields keep their current value. ``links``
    replaces the page's links entirely: send every link that should stay.
    """

    slug: str = ""
    title: str = ""
    bio: str = ""
    profile_image_url: str = ""
    theme: str = ""
    links: list[LinkRequest] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "John Doe",
                "links": [
                    {
                        "id": 1,
                        "title": "Blog",
                        "url": "https://example.com/blog",
                        "display_order": 1,
                    },
                    {
                        "title": "Portfolio",
                        "url": "https://example.com/work",
                        "display_order": 2,
                    },
                ],
            },
        },
    )


class PortalPageIdResponse(BaseModel):
    """Response schema returning the id of a created or updated page."""

    id: int


class LinkResponse(BaseModel):
    """Response schema for a link."""

    id: int
    title: str
    url: str
    description: str
    icon_url: str
    display_order: int


class PortalPageResponse(BaseModel):
    """Response schema for a full portal page."""

    id: int
    slug: str
    title: str
    bio: str
    profile_image_url: str
    theme: str
    links: list[LinkResponse]


class PortalPageSummaryResponse(BaseModel):
    """Response schema for a page in a listing."""

    id: int
    slug: str
    title: str


class PortalPageListResponse(BaseModel):
    """Response schema for the current user's pages."""

    portal_pages: list[PortalPageSummaryResponse]
