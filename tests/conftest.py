from unittest.mock import Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from movie_catalog.app import create_app
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.adapters.repositories.memory_movie_repository import MemoryMovieRepository
from movie_catalog.infrastructure.config.settings import Settings

ADMIN_AUTH = ("admin", "s3cret")


@pytest.fixture
def sample_movies():
    """Five movies keyed by id, three of them dramas"""
    movies = [
        Movie(id=1, title="Drama One", year=2001, genre="Drama", poster="a.jpg", cast=["Ann"]),
        Movie(id=2, title="Drama Two", year=2002, genre="Drama", poster="b.jpg"),
        Movie(id=3, title="Drama Three", year=2003, genre="Drama", poster="c.jpg"),
        Movie(id=4, title="Comedy", year=2004, genre="Comedy", poster="d.jpg"),
        Movie(id=5, title="Horror", year=2005, genre="Horror", poster="e.jpg", rating=6.5),
    ]
    return {movie.id: movie for movie in movies}


@pytest.fixture
def movie_repository(sample_movies):
    return MemoryMovieRepository(sample_movies)


@pytest.fixture
def empty_repository():
    return MemoryMovieRepository()


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for service testing"""
    return Mock(spec=MovieRepository)


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def settings():
    return Settings(
        LOG_LEVEL="WARNING",
        BASIC_AUTH_USERNAME=ADMIN_AUTH[0],
        BASIC_AUTH_PASSWORD=ADMIN_AUTH[1],
        SEED_MOVIES=True,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client bound to a freshly wired application"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth():
    return ADMIN_AUTH
