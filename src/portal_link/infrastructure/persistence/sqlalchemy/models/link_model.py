"""SQLAlchemy model for links owned by a portal page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal_link.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from portal_link.infrastructure.persistence.sqlalchemy.models.portal_page_model import (  # NOQA: E501
        PortalPageModel,
    )


class LinkModel(Base, TimestampMixin):
    """Database model for portal page links."""

    __tablename__ = "links"

    __table_args__ = (
        CheckConstraint("display_order >= 1", name="ck_links_display_order_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    portal_page_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("portal_pages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    icon_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    portal_page: Mapped["PortalPageModel"] = relationship(
        "PortalPageModel",
        back_populates="links",
    )

    def __repr__(self) -> str:
        return (
            f"<LinkModel(id={self.id}, portal_page_id={self.portal_page_id}, "
            f"display_order={self.display_order})>"
        )
