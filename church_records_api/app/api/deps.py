"""
FastAPI dependencies shared by the v1 endpoints.
"""

from fastapi import Request

from ..core.context import Repositories


def get_repositories(request: Request) -> Repositories:
    """Return the entity stores created for this application.

    Tests override this dependency to inject their own context.
    """
    return request.app.state.repositories
