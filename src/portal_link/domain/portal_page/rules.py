"""Field rules shared by portal page creation, update and links.

Every rule raises InvalidPortalPageError with a readable reason. Lengths
are counted in characters.
"""

from urllib.parse import urlsplit

from portal_link.domain.portal_page.exceptions import InvalidPortalPageError
from portal_link.domain.shared.identity import MAX_ID

TITLE_MAX_LENGTH = 100
BIO_MAX_LENGTH = 500
LINK_DESCRIPTION_MAX_LENGTH = 500
URL_MAX_LENGTH = 2048
MAX_DISPLAY_ORDER = MAX_ID


def is_absolute_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc) and " " not in value


def validate_title(title: str, label: str = "Title") -> None:
    if not title:
        raise InvalidPortalPageError(f"{label} is required", "title")
    if len(title) > TITLE_MAX_LENGTH:
        msg = f"{label} must be at most {TITLE_MAX_LENGTH} characters"
        raise InvalidPortalPageError(msg, "title")


def validate_bio(bio: str) -> None:
    if len(bio) > BIO_MAX_LENGTH:
        msg = f"Bio must be at most {BIO_MAX_LENGTH} characters"
        raise InvalidPortalPageError(msg, "bio")


def validate_url(url: str, field: str) -> None:
    if not url:
        raise InvalidPortalPageError(f"{field} is required", field)
    validate_optional_url(url, field)


def validate_optional_url(url: str, field: str) -> None:
    """Empty means "no URL"; anything else must be absolute."""
    if not url:
        return
    if len(url) > URL_MAX_LENGTH:
        msg = f"{field} must be at most {URL_MAX_LENGTH} characters"
        raise InvalidPortalPageError(msg, field)
    if not is_absolute_url(url):
        raise InvalidPortalPageError(f"{field} must be a valid absolute URL", field)


def validate_link_fields(
    title: str,
    url: str,
    description: str,
    icon_url: str,
    display_order: int,
) -> None:
    """Validate a complete link as submitted by a client."""
    validate_title(title, label="Link title")
    validate_url(url, "url")
    if len(description) > LINK_DESCRIPTION_MAX_LENGTH:
        msg = (
            f"Link description must be at most "
            f"{LINK_DESCRIPTION_MAX_LENGTH} characters"
        )
        raise InvalidPortalPageError(msg, "description")
    validate_optional_url(icon_url, "icon_url")
    if display_order < 1:
        msg = "Display order must be a positive integer"
        raise InvalidPortalPageError(msg, "display_order")
    if display_order > MAX_DISPLAY_ORDER:
        msg = f"Display order must be at most {MAX_DISPLAY_ORDER}"
        raise InvalidPortalPageError(msg, "display_order")
