from typing import Optional

from fastapi import FastAPI

from movie_catalog.applications.services.movie_service import MovieService
from movie_catalog.infrastructure.adapters.repositories.memory_movie_repository import MemoryMovieRepository
from movie_catalog.infrastructure.adapters.services.basic_auth_service import BasicAuthService
from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.datasource.movies import seed_movies
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_catalog.presentation.routers import hello, movies


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own repository and service instances.

    Each call wires a fresh store, so tests and embedded servers never share
    state.
    """
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL)
    logger = StdLoggerAdapter("movie_catalog.app")

    movie_repository = MemoryMovieRepository(seed_movies() if settings.SEED_MOVIES else {})
    logger.info("Movie repository ready with %s movies", movie_repository.count())

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.auth_service = BasicAuthService(settings)
    app.state.movie_service = MovieService(movie_repository, StdLoggerAdapter("movie_catalog.movies"))

    app.include_router(movies.router)
    app.include_router(hello.router)

    return app


# uvicorn movie_catalog.app:app
app = create_app()
