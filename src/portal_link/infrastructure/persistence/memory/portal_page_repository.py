"""In-memory implementation of PortalPageRepository.

Pages live in an id-keyed arena with secondary indexes for slug and owner.
Every read and write deep-copies, so callers never alias stored state.
One asyncio.Lock guards all access, so reads are serialized with writes
and with each other. Critical sections never await.
"""

import asyncio
import copy
import logging
from typing import Optional

from portal_link.domain.portal_page import (
    Link,
    PortalPage,
    PortalPageNotFoundError,
    PortalPageRepository,
    SlugAlreadyExistsError,
    normalize_slug,
)
from portal_link.domain.shared.time import utc_now

logger = logging.getLogger(__name__)


class InMemoryPortalPageRepository(PortalPageRepository):
    """Dict-backed portal page store for development and tests."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._pages: dict[int, PortalPage] = {}
        self._slug_index: dict[str, int] = {}
        self._user_index: dict[int, list[int]] = {}
        self._next_page_id = 1
        self._next_link_id = 1

    async def create(self, portal_page: PortalPage) -> None:
        async with self._lock:
            if portal_page.slug in self._slug_index:
                raise SlugAlreadyExistsError(portal_page.slug)

            now = utc_now()
            page_id = self._next_page_id
            self._next_page_id += 1

            portal_page.assign_identity(page_id, now, now)
            for link in portal_page.links:
                link.assign_identity(self._take_link_id(), page_id, now, now)

            self._pages[page_id] = copy.deepcopy(portal_page)
            self._slug_index[portal_page.slug] = page_id
            self._user_index.setdefault(portal_page.user_id, []).append(page_id)

        logger.info(
            "Created portal page: %s (ID: %s, links: %d)",
            portal_page.slug,
            page_id,
            len(portal_page.links),
        )

    async def update(self, portal_page: PortalPage) -> None:
        async with self._lock:
            stored = self._pages.get(portal_page.id)
            if stored is None:
                raise PortalPageNotFoundError(portal_page_id=portal_page.id)

            if portal_page.slug != stored.slug:
                owner = self._slug_index.get(portal_page.slug)
                if owner is not None and owner != portal_page.id:
                    raise SlugAlreadyExistsError(portal_page.slug)

            now = utc_now()
            persisted = {link.id: link for link in stored.links}
            kept: set[int] = set()

            for link in portal_page.links:
                existing = persisted.get(link.id) if link.id else None
                if existing is not None and link.id not in kept:
                    link.assign_identity(link.id, stored.id, existing.created_at, now)
                    kept.add(link.id)
                else:
                    link.assign_identity(self._take_link_id(), stored.id, now, now)

            removed = [link_id for link_id in persisted if link_id not in kept]

            portal_page.assign_identity(stored.id, stored.created_at, now)

            if portal_page.slug != stored.slug:
                del self._slug_index[stored.slug]
                self._slug_index[portal_page.slug] = stored.id

            self._pages[stored.id] = copy.deepcopy(portal_page)

        if removed:
            logger.info(
                "Deleted %d link(s) from portal page %s: %s",
                len(removed),
                portal_page.id,
                removed,
            )
        logger.debug("Updated portal page: %s", portal_page.id)

    async def find_by_slug(self, slug: str) -> Optional[PortalPage]:
        async with self._lock:
            page_id = self._slug_index.get(normalize_slug(slug))
            if page_id is None:
                return None
            return self._copy_sorted(self._pages[page_id])

    async def find_by_id(self, portal_page_id: int) -> Optional[PortalPage]:
        async with self._lock:
            page = self._pages.get(portal_page_id)
            if page is None:
                return None
            return self._copy_sorted(page)

    async def list_by_user_id(self, user_id: int) -> list[PortalPage]:
        async with self._lock:
            pages = [self._pages[pid] for pid in self._user_index.get(user_id, [])]
            summaries = [self._copy_without_links(page) for page in pages]

        return sorted(summaries, key=lambda page: (page.created_at, page.id))

    def _take_link_id(self) -> int:
        link_id = self._next_link_id
        self._next_link_id += 1
        return link_id

    @staticmethod
    def _copy_sorted(page: PortalPage) -> PortalPage:
        result = copy.deepcopy(page)
        ordered: list[Link] = sorted(
            result.links,
            key=lambda link: (link.display_order, link.id),
        )
        return PortalPage.reconstitute(
            id=result.id,
            user_id=result.user_id,
            slug=result.slug,
            title=result.title,
            bio=result.bio,
            profile_image_url=result.profile_image_url,
            theme=result.theme,
            created_at=result.created_at,
            updated_at=result.updated_at,
            links=ordered,
        )

    @staticmethod
    def _copy_without_links(page: PortalPage) -> PortalPage:
        return PortalPage.reconstitute(
            id=page.id,
            user_id=page.user_id,
            slug=page.slug,
            title=page.title,
            bio=page.bio,
            profile_image_url=page.profile_image_url,
            theme=page.theme,
            created_at=page.created_at,
            updated_at=page.updated_at,
        )
