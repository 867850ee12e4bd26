from datetime import datetime
from typing import Iterable, Optional, Union

from portal_link.domain.portal_page.entities.link import Link
from portal_link.domain.portal_page.exceptions import LinkNotFoundError
from portal_link.domain.portal_page.rules import (
    validate_bio,
    validate_optional_url,
    validate_title,
)
from portal_link.domain.portal_page.value_objects import Slug, Theme
from portal_link.domain.shared.time import utc_now


class PortalPage:
    """
    Portal page aggregate root.

    Owns the page profile (slug, title, bio, image, theme) and the ordered
    collection of links. Links are only mutated through this aggregate.
    An id of 0 marks a page that has not been persisted yet.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: int,
        slug: Union[str, Slug],
        title: str,
        bio: str = "",
        profile_image_url: str = "",
        theme: Theme = Theme.LIGHT,
        id: int = 0,
        links: Optional[Iterable[Link]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        now = utc_now()
        self._id = id
        self._user_id = user_id
        self._slug = slug.value if isinstance(slug, Slug) else slug
        self._title = title
        self._bio = bio
        self._profile_image_url = profile_image_url
        self._theme = theme
        self._links: list[Link] = list(links) if links else []
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @property
    def id(self) -> int:
        return self._id

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def title(self) -> str:
        return self._title

    @property
    def bio(self) -> str:
        return self._bio

    @property
    def profile_image_url(self) -> str:
        return self._profile_image_url

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def links(self) -> list[Link]:
        # New list, same Link objects: repositories write ids back into them
        return list(self._links)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: int) -> bool:
        return self._user_id == user_id

    def sorted_links(self) -> list[Link]:
        """Links by ascending display order; ties keep insertion order."""
        return sorted(self._links, key=lambda link: link.display_order)

    def find_link(self, link_id: int) -> Link:
        for link in self._links:
            if link.id == link_id:
                return link
        raise LinkNotFoundError(link_id, self._id)

    def add_link(  # NOQA: PLR0913
        self,
        title: str,
        url: str,
        description: str = "",
        icon_url: str = "",
        display_order: int = 1,
        link_id: int = 0,
    ) -> Link:
        """Append a link to the page.

        Parameters
        ----------
        link_id
            Identifier carried over from the client. 0 marks a new link;
            repositories decide whether a nonzero id matches a stored link.

        Returns
        -------
        The newly added link
        """
        link = Link.create(
            title=title,
            url=url,
            description=description,
            icon_url=icon_url,
            display_order=display_order,
            id=link_id,
            portal_page_id=self._id,
        )
        self._links.append(link)
        self._updated_at = utc_now()
        return link

    def update_link(  # NOQA: PLR0913
        self,
        link_id: int,
        title: str = "",
        url: str = "",
        description: str = "",
        icon_url: str = "",
        display_order: int = 0,
    ) -> Link:
        # Only non-empty strings and positive orders are applied
        link = self.find_link(link_id)
        link.update(
            title=title,
            url=url,
            description=description,
            icon_url=icon_url,
            display_order=display_order,
        )
        self._updated_at = utc_now()
        return link

    def remove_link(self, link_id: int) -> None:
        link = self.find_link(link_id)
        self._links.remove(link)
        self._updated_at = utc_now()

    def clear_links(self) -> None:
        self._links = []
        self._updated_at = utc_now()

    def update_details(
        self,
        slug: str = "",
        title: str = "",
        bio: str = "",
        profile_image_url: str = "",
        theme: Union[str, Theme, None] = None,
    ) -> None:
        """Apply profile overrides; empty values leave the field unchanged."""
        new_slug = Slug(slug).value if slug else None
        if title:
            validate_title(title)
        if bio:
            validate_bio(bio)
        if profile_image_url:
            validate_optional_url(profile_image_url, "profile_image_url")
        new_theme = Theme.parse(theme)

        if new_slug:
            self._slug = new_slug
        if title:
            self._title = title
        if bio:
            self._bio = bio
        if profile_image_url:
            self._profile_image_url = profile_image_url
        if new_theme is not None:
            self._theme = new_theme
        self._updated_at = utc_now()

    def assign_identity(
        self,
        id: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        """Write back identity and timestamps generated by a repository."""
        self._id = id
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        user_id: int,
        slug: Union[str, Slug],
        title: str,
        bio: str = "",
        profile_image_url: str = "",
        theme: Union[str, Theme, None] = None,
        links: Optional[Iterable[Link]] = None,
    ) -> "PortalPage":
        slug_obj = slug if isinstance(slug, Slug) else Slug(slug)
        validate_title(title)
        validate_bio(bio)
        validate_optional_url(profile_image_url, "profile_image_url")

        return cls(
            user_id=user_id,
            slug=slug_obj,
            title=title,
            bio=bio,
            profile_image_url=profile_image_url,
            theme=Theme.parse(theme) or Theme.default(),
            links=links,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: int,
        user_id: int,
        slug: str,
        title: str,
        bio: str,
        profile_image_url: str,
        theme: Union[str, Theme],
        created_at: datetime,
        updated_at: datetime,
        links: Optional[Iterable[Link]] = None,
    ) -> "PortalPage":
        """Rebuild a persisted page without re-running validation."""
        return cls(
            id=id,
            user_id=user_id,
            slug=slug,
            title=title,
            bio=bio,
            profile_image_url=profile_image_url,
            theme=Theme(theme),
            links=links,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __repr__(self) -> str:
        return (
            f"PortalPage(id={self._id}, slug={self._slug!r}, "
            f"links={len(self._links)})"
        )
