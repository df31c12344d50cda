"""Movie Schemas: the list response serializes as a bare JSON array."""

import pytest
from pydantic import ValidationError

from movies_api.schemas.movie import MovieListResponse


def test_list_response_dumps_as_array():
    resp = MovieListResponse(["Inception", "Dune"])
    assert resp.model_dump_json() == '["Inception","Dune"]'


def test_empty_list_response():
    assert MovieListResponse([]).model_dump() == []


def test_list_response_rejects_non_strings():
    with pytest.raises(ValidationError):
        MovieListResponse([1, 2])
