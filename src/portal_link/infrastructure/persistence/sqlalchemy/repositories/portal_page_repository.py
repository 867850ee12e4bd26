"""SQLAlchemy implementation of PortalPageRepository.

Each write runs in its own transaction: it commits when the block
completes and rolls back on any exception.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from portal_link.domain.portal_page import (
    Link,
    PortalPage,
    PortalPageNotFoundError,
    PortalPageRepository,
    SlugAlreadyExistsError,
    normalize_slug,
)
from portal_link.domain.shared.identity import is_storable_id
from portal_link.domain.shared.time import ensure_tz_aware, utc_now
from portal_link.infrastructure.persistence.sqlalchemy.models import (
    LinkModel,
    PortalPageModel,
)
from portal_link.infrastructure.persistence.sqlalchemy.repositories.errors import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class PortalPageRepositorySQLAlchemy(PortalPageRepository):
    """SQLAlchemy implementation of the PortalPageRepository interface."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def create(self, portal_page: PortalPage) -> None:
        now = utc_now()
        model = self._map_to_model(portal_page, now)

        try:
            async with self._session_maker() as session, session.begin():
                if await self._slug_owner(session, portal_page.slug) is not None:
                    raise SlugAlreadyExistsError(portal_page.slug)

                session.add(model)
                await session.flush()
                page_id = model.id
                link_ids = [link_model.id for link_model in model.links]
        except IntegrityError as e:
            if is_unique_violation(e, "slug"):
                raise SlugAlreadyExistsError(portal_page.slug) from e
            raise

        portal_page.assign_identity(page_id, now, now)
        for link, link_id in zip(portal_page.links, link_ids):
            link.assign_identity(link_id, page_id, now, now)

        logger.info(
            "Created portal page: %s (ID: %s, links: %d)",
            portal_page.slug,
            page_id,
            len(link_ids),
        )

    async def update(self, portal_page: PortalPage) -> None:
        now = utc_now()

        try:
            async with self._session_maker() as session, session.begin():
                model = None
                if is_storable_id(portal_page.id):
                    model = await self._find_model_by_id(session, portal_page.id)
                if model is None:
                    raise PortalPageNotFoundError(portal_page_id=portal_page.id)

                if model.slug != portal_page.slug:
                    owner = await self._slug_owner(session, portal_page.slug)
                    if owner is not None and owner != model.id:
                        raise SlugAlreadyExistsError(portal_page.slug)

                model.slug = portal_page.slug
                model.title = portal_page.title
                model.bio = portal_page.bio
                model.profile_image_url = portal_page.profile_image_url
                model.theme = portal_page.theme.value
                model.updated_at = now

                pairs, removed = self._reconcile_links(model, portal_page.links, now)

                await session.flush()
                page_created_at = ensure_tz_aware(model.created_at)
                identities = [
                    (link, link_model.id, ensure_tz_aware(link_model.created_at))
                    for link, link_model in pairs
                ]
        except IntegrityError as e:
            if is_unique_violation(e, "slug"):
                raise SlugAlreadyExistsError(portal_page.slug) from e
            raise

        portal_page.assign_identity(portal_page.id, page_created_at, now)
        for link, link_id, created_at in identities:
            link.assign_identity(link_id, portal_page.id, created_at, now)

        if removed:
            logger.info(
                "Deleted %d link(s) from portal page %s: %s",
                len(removed),
                portal_page.id,
                removed,
            )
        logger.debug("Updated portal page: %s", portal_page.id)

    async def find_by_slug(self, slug: str) -> Optional[PortalPage]:
        stmt = (
            select(PortalPageModel)
            .options(selectinload(PortalPageModel.links))
            .where(PortalPageModel.slug == normalize_slug(slug))
        )
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            if model is None:
                return None
            return self._map_to_domain(model, with_links=True)

    async def find_by_id(self, portal_page_id: int) -> Optional[PortalPage]:
        if not is_storable_id(portal_page_id):
            return None
        async with self._session_maker() as session:
            model = await self._find_model_by_id(session, portal_page_id)
            if model is None:
                return None
            return self._map_to_domain(model, with_links=True)

    async def list_by_user_id(self, user_id: int) -> list[PortalPage]:
        if not is_storable_id(user_id):
            return []
        stmt = (
            select(PortalPageModel)
            .where(PortalPageModel.user_id == user_id)
            .order_by(PortalPageModel.created_at, PortalPageModel.id)
        )
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            return [
                self._map_to_domain(model, with_links=False)
                for model in result.scalars().all()
            ]

    @classmethod
    def _reconcile_links(
        cls,
        model: PortalPageModel,
        links: list[Link],
        now: datetime,
    ) -> tuple[list[tuple[Link, LinkModel]], list[int]]:
        """Turn the submitted links into the page's new link rows.

        Known ids update their row in place, everything else becomes a new
        row. Rows left out of the new collection are deleted as orphans.
        """
        persisted = {link_model.id: link_model for link_model in model.links}
        kept: set[int] = set()
        pairs: list[tuple[Link, LinkModel]] = []

        for link in links:
            link_model = persisted.get(link.id) if link.id else None
            if link_model is not None and link.id not in kept:
                link_model.title = link.title
                link_model.url = link.url
                link_model.description = link.description
                link_model.icon_url = link.icon_url
                link_model.display_order = link.display_order
                link_model.updated_at = now
                kept.add(link.id)
            else:
                link_model = cls._link_to_model(link, now)
            pairs.append((link, link_model))

        model.links = [link_model for _, link_model in pairs]
        removed = [link_id for link_id in persisted if link_id not in kept]
        return pairs, removed

    @staticmethod
    async def _slug_owner(session: AsyncSession, slug: str) -> Optional[int]:
        stmt = select(PortalPageModel.id).where(PortalPageModel.slug == slug)
        return await session.scalar(stmt)

    @staticmethod
    async def _find_model_by_id(
        session: AsyncSession,
        portal_page_id: int,
    ) -> Optional[PortalPageModel]:
        stmt = (
            select(PortalPageModel)
            .options(selectinload(PortalPageModel.links))
            .where(PortalPageModel.id == portal_page_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _link_to_model(link: Link, now: datetime) -> LinkModel:
        return LinkModel(
            title=link.title,
            url=link.url,
            description=link.description,
            icon_url=link.icon_url,
            display_order=link.display_order,
            created_at=now,
            updated_at=now,
        )

    def _map_to_model(self, portal_page: PortalPage, now: datetime) -> PortalPageModel:
        model = PortalPageModel(
            user_id=portal_page.user_id,
            slug=portal_page.slug,
            title=portal_page.title,
            bio=portal_page.bio,
            profile_image_url=portal_page.profile_image_url,
            theme=portal_page.theme.value,
            created_at=now,
            updated_at=now,
        )
        model.links = [self._link_to_model(link, now) for link in portal_page.links]
        return model

    @staticmethod
    def _map_to_domain(model: PortalPageModel, with_links: bool) -> PortalPage:
        links = None
        if with_links:
            ordered = sorted(
                model.links,
                key=lambda link_model: (link_model.display_order, link_model.id),
            )
            links = [
                Link.reconstitute(
                    id=link_model.id,
                    portal_page_id=link_model.portal_page_id,
                    title=link_model.title,
                    url=link_model.url,
                    description=link_model.description,
                    icon_url=link_model.icon_url,
                    display_order=link_model.display_order,
                    created_at=ensure_tz_aware(link_model.created_at),
                    updated_at=ensure_tz_aware(link_model.updated_at),
                )
                for link_model in ordered
            ]

        return PortalPage.reconstitute(
            id=model.id,
            user_id=model.user_id,
            slug=model.slug,
            title=model.title,
            bio=model.bio,
            profile_image_url=model.profile_image_url,
            theme=model.theme,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            links=links,
        )
