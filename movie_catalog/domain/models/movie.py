from typing import Callable, List

from pydantic import BaseModel, Field


class Movie(BaseModel):
    id: int = 0
    title: str = ""
    year: int = 0
    rating: float = 0.0
    genre: str = ""
    poster: str = ""
    cast: List[str] = Field(default_factory=list)


Query = Callable[[Movie], bool]
