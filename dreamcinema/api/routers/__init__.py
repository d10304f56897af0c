"""API routers for Dream Cinema."""

from dreamcinema.api.routers import catalog, dreams

__all__ = ["catalog", "dreams"]
