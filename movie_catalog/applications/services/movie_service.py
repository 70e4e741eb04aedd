from typing import List, Tuple

from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort


class MovieService(MovieServicePort):
    """Translates catalog operations into repository queries.

    Keeps callers unaware of the predicate-based shape of ``MovieRepository``,
    so a different storage backend can be swapped in behind the same
    operations.
    """

    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    def get_all(self) -> List[Movie]:
        return self.movie_repository.select_many(lambda _: True, -1)

    def get_by_id(self, movie_id: int) -> Tuple[Movie, bool]:
        return self.movie_repository.select(lambda m: m.id == movie_id)

    def create(self, movie: Movie) -> Movie:
        created = self.movie_repository.insert_or_update(movie.model_copy(update={"id": 0}))
        self.logger.info("Created movie %s (%s)", created.id, created.title)
        return created

    def update_poster_and_genre_by_id(self, movie_id: int, poster: str, genre: str) -> Movie:
        try:
            updated = self.movie_repository.insert_or_update(Movie(id=movie_id, poster=poster, genre=genre))
        except NotFoundError:
            self.logger.warning("Update of nonexistent movie %s rejected", movie_id)
            raise
        self.logger.info("Updated movie %s", movie_id)
        return updated

    def delete_by_id(self, movie_id: int) -> bool:
        deleted = self.movie_repository.delete(lambda m: m.id == movie_id, 1)
        if deleted:
            self.logger.info("Deleted movie %s", movie_id)
        else:
            self.logger.debug("Nothing to delete for movie %s", movie_id)
        return deleted
