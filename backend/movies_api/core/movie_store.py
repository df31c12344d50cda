"""Movie Store: the authoritative in-memory list of movie titles.

Invariants:
    - titles always exists; created empty, only ever appended to
    - Insertion order is preserved; duplicates are permitted; no size limit
    - list() returns a snapshot, so callers can never mutate the store
    - Length is monotonically non-decreasing for the lifetime of the process

Design Decisions:
    - One threading.Lock around both list and append: handlers may run on the
      event loop or in the threadpool, and a snapshot must never observe a torn append
    - No validation here: decode_title() at the boundary owns that
"""

import threading

from movies_api.core.movie_title import MovieTitle


class MovieStore:
    """Process-wide list of titles: owned by the app, injected into handlers."""

    def __init__(self) -> None:
        self._titles: list[MovieTitle] = []
        self._lock = threading.Lock()

    def list(self) -> list[MovieTitle]:
        with self._lock:
            return list(self._titles)

    def append(self, title: MovieTitle) -> None:
        with self._lock:
            self._titles.append(title)

    def __len__(self) -> int:
        with self._lock:
            return len(self._titles)
