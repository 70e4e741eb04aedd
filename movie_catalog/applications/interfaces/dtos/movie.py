from typing import List

from pydantic import BaseModel, ConfigDict, Field


class MovieSchema(BaseModel):
    title: str
    year: int = 0
    rating: float = 0.0
    genre: str = ""
    poster: str = ""
    cast: List[str] = Field(default_factory=list)


class MoviePublic(BaseModel):
    id: int
    title: str
    year: int
    rating: float
    genre: str
    poster: str
    cast: List[str]
    model_config = ConfigDict(from_attributes=True)


class MovieDeleted(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    delete_id: int = Field(alias="deleteId")
