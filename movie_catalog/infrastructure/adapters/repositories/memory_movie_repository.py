from enum import Enum
from typing import Callable, ContextManager, Dict, List, Optional, Tuple

from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.models.movie import Movie, Query
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.concurrency.rw_lock import ReadWriteLock

Action = Callable[[Movie], bool]


class AccessMode(Enum):
    READ_ONLY = "read_only"
    READ_WRITE = "read_write"


class MemoryMovieRepository(MovieRepository):
    """Movies kept in a dict keyed by id, guarded by one reader/writer lock.

    The mapping is keyed by each record's own id, whatever keys the caller
    passed in. Records are copied on the way in and on the way out; the dict
    holds the only authoritative instance of each movie.
    """

    def __init__(self, source: Optional[Dict[int, Movie]] = None):
        self._source: Dict[int, Movie] = {
            movie.id: movie.model_copy(deep=True) for movie in (source or {}).values()
        }
        self._lock = ReadWriteLock()

    def _locked(self, mode: AccessMode) -> ContextManager[None]:
        if mode is AccessMode.READ_ONLY:
            return self._lock.read_locked()
        return self._lock.write_locked()

    def _exec(self, query: Query, action: Action, limit: int, mode: AccessMode) -> bool:
        acted = 0
        with self._locked(mode):
            # snapshot so actions may remove entries
            for movie in list(self._source.values()):
                if not query(movie):
                    continue
                if action(movie):
                    acted += 1
                    if 0 < limit <= acted:
                        break
        return acted > 0

    def select(self, query: Query) -> Tuple[Movie, bool]:
        found: List[Movie] = []

        def capture(movie: Movie) -> bool:
            found.append(movie.model_copy(deep=True))
            return True

        if self._exec(query, capture, 1, AccessMode.READ_ONLY):
            return found[0], True
        return Movie(), False

    def select_many(self, query: Query, limit: int) -> List[Movie]:
        results: List[Movie] = []

        def collect(movie: Movie) -> bool:
            results.append(movie.model_copy(deep=True))
            return True

        self._exec(query, collect, limit, AccessMode.READ_ONLY)
        return results

    def insert_or_update(self, movie: Movie) -> Movie:
        if movie.id == 0:
            return self._insert(movie)
        return self._update(movie)

    def _insert(self, movie: Movie) -> Movie:
        # id computation and write share one critical section
        with self._lock.write_locked():
            last_id = max([0, *self._source])
            stored = movie.model_copy(update={"id": last_id + 1}, deep=True)
            self._source[stored.id] = stored
            return stored.model_copy(deep=True)

    def _update(self, movie: Movie) -> Movie:
        with self._lock.write_locked():
            current = self._source.get(movie.id)
            if current is None:
                raise NotFoundError("failed to update nonexistent movie")

            changes = {}
            if movie.poster != "":
                changes["poster"] = movie.poster
            if movie.genre != "":
                changes["genre"] = movie.genre

            merged = current.model_copy(update=changes, deep=True)
            self._source[merged.id] = merged
            return merged.model_copy(deep=True)

    def delete(self, query: Query, limit: int) -> bool:
        def remove(movie: Movie) -> bool:
            del self._source[movie.id]
            return True

        return self._exec(query, remove, limit, AccessMode.READ_WRITE)

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._source)
