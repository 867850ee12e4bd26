"""REST API presentation layer for Portal Link.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain errors to HTTP responses
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from portal_link.presentation.api.app import create_app

__all__ = ["create_app"]
