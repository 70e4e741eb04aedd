from abc import ABC, abstractmethod
from typing import List, Tuple

from movie_catalog.domain.models.movie import Movie, Query


class MovieRepository(ABC):
    """Predicate-driven store of movies.

    Every read, update and delete is expressed as a ``Query`` supplied by the
    caller, so backends only need to know how to visit their records.
    """

    @abstractmethod
    def select(self, query: Query) -> Tuple[Movie, bool]:
        """Return the first movie matching ``query`` and whether one was found"""
        pass

    @abstractmethod
    def select_many(self, query: Query, limit: int) -> List[Movie]:
        """Return up to ``limit`` matching movies, or all of them if ``limit <= 0``"""
        pass

    @abstractmethod
    def insert_or_update(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    def delete(self, query: Query, limit: int) -> bool:
        pass

    @abstractmethod
    def count(self) -> int:
        pass
