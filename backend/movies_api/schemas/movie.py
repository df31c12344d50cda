"""Movie Schemas: explicit JSON shape of the GET /movies response.

Invariants:
    - The list response is a bare JSON array of strings, in store order
"""

from pydantic import RootModel


class MovieListResponse(RootModel[list[str]]):
    """GET /movies body: e.g. ["Inception", "Dune"]."""
