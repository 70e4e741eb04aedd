from abc import ABC, abstractmethod
from typing import List, Tuple

from movie_catalog.domain.models.movie import Movie


class MovieServicePort(ABC):
    """Port for CRUD operations over the movie catalog"""

    @abstractmethod
    def get_all(self) -> List[Movie]:
        pass

    @abstractmethod
    def get_by_id(self, movie_id: int) -> Tuple[Movie, bool]:
        pass

    @abstractmethod
    def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    def update_poster_and_genre_by_id(self, movie_id: int, poster: str, genre: str) -> Movie:
        """Overwrite the non-empty ones of ``poster`` and ``genre`` on an existing movie"""
        pass

    @abstractmethod
    def delete_by_id(self, movie_id: int) -> bool:
        pass
