"""Movies: list and append titles on the shared MovieStore.

Invariants:
    - GET /movies always returns 200 with a JSON array of strings, in insertion order
    - POST /movies appends the raw body as one title and returns 201 with no body
    - Empty or undecodable POST bodies raise title errors (400, no body) and
      leave the store untouched

Design Decisions:
    - Raw body via Request.body(), not a Pydantic model: the title is plain text,
      not a JSON document
    - Store injected via Depends(get_movie_store), never imported as a global
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from movies_api.api.dependencies import get_movie_store
from movies_api.config import Settings, get_settings
from movies_api.core.movie_store import MovieStore
from movies_api.core.movie_title import decode_title
from movies_api.schemas.movie import MovieListResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies", tags=["movies"])


@router.get(
    "", response_model=MovieListResponse, status_code=status.HTTP_200_OK,
)
async def list_movies(store: MovieStore = Depends(get_movie_store)):
    """Return every title accepted so far."""
    titles = store.list()
    logger.info("Received GET request!", extra={"store_size": len(titles)})
    return MovieListResponse(titles)


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
)
async def append_movie(
    request: Request,
    store: MovieStore = Depends(get_movie_store),
    settings: Settings = Depends(get_settings),
):
    """Append the request body as a new title."""
    title = decode_title(await request.body(), settings.title_encoding)
    store.append(title)
    logger.info(
        f"Received POST request for movie {title}!",
        extra={"title": title, "store_size": len(store)},
    )
    return Response(
        status_code=status.HTTP_201_CREATED, media_type="application/json",
    )
