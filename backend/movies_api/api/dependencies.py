"""Request Dependencies: hand the app-owned MovieStore to route handlers.

Invariants:
    - The store is created once by the lifespan and lives on app.state
    - Handlers never construct or cache a store themselves

Design Decisions:
    - Depends() provider over module-level singleton: tests swap the store
      through app.dependency_overrides without touching globals
"""

from fastapi import Request

from movies_api.core.movie_store import MovieStore


def get_movie_store(request: Request) -> MovieStore:
    """FastAPI dependency for the process-wide MovieStore."""
    store = getattr(request.app.state, "movie_store", None)
    if store is None:
        raise RuntimeError("MovieStore not initialized")
    return store
