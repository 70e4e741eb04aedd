from typing import Dict

from movie_catalog.domain.models.movie import Movie

POSTER_BASE_URL = "https://img.movie-catalog.local/posters"

_SEED = [
    Movie(
        id=1,
        title="Casablanca",
        year=1942,
        rating=8.5,
        genre="Romance",
        poster=f"{POSTER_BASE_URL}/1.jpg",
        cast=["Humphrey Bogart", "Ingrid Bergman"],
    ),
    Movie(
        id=2,
        title="Gone with the Wind",
        year=1939,
        rating=8.2,
        genre="Romance",
        poster=f"{POSTER_BASE_URL}/2.jpg",
        cast=["Clark Gable", "Vivien Leigh"],
    ),
    Movie(
        id=3,
        title="Citizen Kane",
        year=1941,
        rating=8.3,
        genre="Mystery",
        poster=f"{POSTER_BASE_URL}/3.jpg",
        cast=["Orson Welles"],
    ),
    Movie(
        id=4,
        title="The Wizard of Oz",
        year=1939,
        rating=8.1,
        genre="Fantasy",
        poster=f"{POSTER_BASE_URL}/4.jpg",
        cast=["Judy Garland"],
    ),
    Movie(
        id=5,
        title="North by Northwest",
        year=1959,
        rating=8.3,
        genre="Thriller",
        poster=f"{POSTER_BASE_URL}/5.jpg",
        cast=["Cary Grant", "Eva Marie Saint"],
    ),
]


def seed_movies() -> Dict[int, Movie]:
    """Return a fresh id -> movie mapping of the built-in catalog"""
    return {movie.id: movie.model_copy(deep=True) for movie in _SEED}
