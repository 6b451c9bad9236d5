"""Route handlers for the daumdic HTTP API."""

from daumdic.routes.search import router as search_router

__all__ = ["search_router"]
