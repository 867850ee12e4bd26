"""DTOs for portal page commands and queries."""

from dataclasses import dataclass, field
from datetime import datetime

from portal_link.domain.portal_page import Link, PortalPage


@dataclass(frozen=True)
class LinkInput:
    """A link as submitted by a client; id 0 marks a new link."""

    title: str
    url: str
    description: str = ""
    icon_url: str = ""
    display_order: int = 1
    id: int = 0


@dataclass(frozen=True)
class LinkDTO:
    """Link information for presentation layer."""

    id: int
    title: str
    url: str
    description: str
    icon_url: str
    display_order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, link: Link) -> "LinkDTO":
        return cls(
            id=link.id,
            title=link.title,
            url=link.url,
            description=link.description,
            icon_url=link.icon_url,
            display_order=link.display_order,
            created_at=link.created_at,
            updated_at=link.updated_at,
        )


@dataclass(frozen=True)
class PortalPageDTO:
    """Full portal page with links ordered by display order."""

    id: int
    user_id: int
    slug: str
    title: str
    bio: str
    profile_image_url: str
    theme: str
    created_at: datetime
    updated_at: datetime
    links: list[LinkDTO] = field(default_factory=list)

    @classmethod
    def from_aggregate(cls, page: PortalPage) -> "PortalPageDTO":
        return cls(
            id=page.id,
            user_id=page.user_id,
            slug=page.slug,
            title=page.title,
            bio=page.bio,
            profile_image_url=page.profile_image_url,
            theme=page.theme.value,
            created_at=page.created_at,
            updated_at=page.updated_at,
            links=[LinkDTO.from_entity(link) for link in page.sorted_links()],
        )


@dataclass(frozen=True)
class PortalPageSummaryDTO:
    """Page listing entry; carries no link data."""

    id: int
    slug: str
    title: str

    @classmethod
    def from_aggregate(cls, page: PortalPage) -> "PortalPageSummaryDTO":
        return cls(id=page.id, slug=page.slug, title=page.title)
