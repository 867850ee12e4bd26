from portal_link.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
