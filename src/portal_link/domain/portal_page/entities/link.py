"""Link entity - an outbound link owned by a portal page."""

from datetime import datetime
from typing import Optional

from portal_link.domain.portal_page.rules import validate_link_fields
from portal_link.domain.shared.time import utc_now


class Link:
    """
    A single outbound link on a portal page.

    Links have no meaning outside their page and are only created, changed
    or removed through the PortalPage aggregate. An id of 0 marks a link
    that has not been persisted yet.
    """

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        url: str,
        description: str = "",
        icon_url: str = "",
        display_order: int = 1,
        id: int = 0,
        portal_page_id: int = 0,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        now = utc_now()
        self._id = id
        self._portal_page_id = portal_page_id
        self._title = title
        self._url = url
        self._description = description
        self._icon_url = icon_url
        self._display_order = display_order
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @property
    def id(self) -> int:
        return self._id

    @property
    def portal_page_id(self) -> int:
        return self._portal_page_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def url(self) -> str:
        return self._url

    @property
    def description(self) -> str:
        return self._description

    @property
    def icon_url(self) -> str:
        return self._icon_url

    @property
    def display_order(self) -> int:
        return self._display_order

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_new(self) -> bool:
        return self._id == 0

    def update(
        self,
        title: str = "",
        url: str = "",
        description: str = "",
        icon_url: str = "",
        display_order: int = 0,
    ) -> None:
        """Apply overrides; empty strings and non-positive orders are ignored."""
        validate_link_fields(
            title=title or self._title,
            url=url or self._url,
            description=description or self._description,
            icon_url=icon_url or self._icon_url,
            display_order=display_order if display_order > 0 else self._display_order,
        )
        if title:
            self._title = title
        if url:
            self._url = url
        if description:
            self._description = description
        if icon_url:
            self._icon_url = icon_url
        if display_order > 0:
            self._display_order = display_order
        self._updated_at = utc_now()

    def assign_identity(
        self,
        id: int,
        portal_page_id: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        """Write back identity and timestamps generated by a repository."""
        self._id = id
        self._portal_page_id = portal_page_id
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        title: str,
        url: str,
        description: str = "",
        icon_url: str = "",
        display_order: int = 1,
        id: int = 0,
        portal_page_id: int = 0,
    ) -> "Link":
        validate_link_fields(title, url, description, icon_url, display_order)
        return cls(
            title=title,
            url=url,
            description=description,
            icon_url=icon_url,
            display_order=display_order,
            id=id,
            portal_page_id=portal_page_id,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: int,
        portal_page_id: int,
        title: str,
        url: str,
        description: str,
        icon_url: str,
        display_order: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Link":
        """Rebuild a persisted link without re-running validation."""
        return cls(
            title=title,
            url=url,
            description=description,
            icon_url=icon_url,
            display_order=display_order,
            id=id,
            portal_page_id=portal_page_id,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __repr__(self) -> str:
        return (
            f"Link(id={self._id}, title={self._title!r}, "
            f"display_order={self._display_order})"
        )
