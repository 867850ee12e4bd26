from portal_link.domain.user.aggregates.user import User

__all__ = ["User"]
