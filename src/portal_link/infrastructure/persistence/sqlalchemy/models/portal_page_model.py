"""SQLAlchemy model for the PortalPage aggregate root."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal_link.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from portal_link.infrastructure.persistence.sqlalchemy.models.link_model import (
        LinkModel,
    )


class PortalPageModel(Base, TimestampMixin):
    """Database model for portal pages.

    The slug carries a unique constraint; the repositories translate a
    violation into SlugAlreadyExistsError.
    """

    __tablename__ = "portal_pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Owner
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Profile
    slug: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    profile_image_url: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        default="",
    )
    theme: Mapped[str] = mapped_column(String(10), nullable=False, default="light")

    # Relationships
    links: Mapped[list["LinkModel"]] = relationship(
        "LinkModel",
        back_populates="portal_page",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<PortalPageModel(id={self.id}, slug={self.slug})>"
