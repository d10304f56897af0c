"""
Shared API dependencies.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from dreamcinema.service import DreamVideoService

limiter = Limiter(key_func=get_remote_address)


def get_service(request: Request) -> DreamVideoService:
    """Service instance owned by the running app."""
    service = getattr(request.app.state, "service", None)
    if service is None:
        service = DreamVideoService()
        request.app.state.service = service
    return service
