"""Movie Title: the only value type, plus decoding from a raw request body.

Invariants:
    - A MovieTitle is a bare, non-empty string (no fields beyond the name)
    - Emptiness is checked on the raw decoded text: whitespace-only is a valid title
    - A missing body arrives as b"" and is rejected exactly like an empty one

Design Decisions:
    - NewType over dataclass wrapper: zero runtime cost, JSON-serializable as-is
"""

from typing import NewType

from movies_api.core.errors import EmptyTitleError, MalformedTitleError

MovieTitle = NewType("MovieTitle", str)


def decode_title(raw: bytes | None, encoding: str = "utf-8") -> MovieTitle:
    """Decode a POST body into a MovieTitle or raise a title error."""
    if not raw:
        raise EmptyTitleError()
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError:
        raise MalformedTitleError(encoding)
    if text == "":
        raise EmptyTitleError()
    return MovieTitle(text)
