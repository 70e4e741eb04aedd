from http import HTTPStatus
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from movie_catalog.applications.interfaces.dtos.movie import MovieDeleted, MoviePublic, MovieSchema
from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort
from movie_catalog.infrastructure.config.dependencies import get_movie_service, require_basic_auth

router = APIRouter(prefix="/movies", tags=["movies"])

MovieServiceDep = Annotated[MovieServicePort, Depends(get_movie_service)]
AuthenticatedUser = Annotated[str, Depends(require_basic_auth)]


@router.get("/", response_model=List[MoviePublic])
def read_movies(movie_service: MovieServiceDep):
    return movie_service.get_all()


@router.get("/{movie_id}", response_model=MoviePublic)
def read_movie(movie_id: int, movie_service: MovieServiceDep):
    movie, found = movie_service.get_by_id(movie_id)
    if not found:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=f"Movie with id {movie_id} not found")
    return movie


@router.post("/", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
def create_movie(movie: MovieSchema, movie_service: MovieServiceDep, _user: AuthenticatedUser):
    return movie_service.create(Movie(**movie.model_dump()))


# curl -i -X PUT -u admin:password -F "genre=Thriller" -F "poster=@/path/to/poster.jpg" http://localhost:8000/movies/1
@router.put("/{movie_id}", response_model=MoviePublic)
def update_movie(
    movie_id: int,
    movie_service: MovieServiceDep,
    _user: AuthenticatedUser,
    poster: Annotated[Optional[UploadFile], File()] = None,
    genre: Annotated[str, Form()] = "",
):
    if poster is None or not poster.filename:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail="failed due form file 'poster' missing")
    poster.file.close()

    try:
        return movie_service.update_poster_and_genre_by_id(movie_id, poster.filename, genre)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.delete("/{movie_id}", response_model=MovieDeleted)
def delete_movie(movie_id: int, movie_service: MovieServiceDep, _user: AuthenticatedUser):
    if not movie_service.delete_by_id(movie_id):
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=f"Movie with id {movie_id} was not deleted")
    return MovieDeleted(delete_id=movie_id)
