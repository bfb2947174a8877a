from crud.base import CRUDBase
from model import Movie
from schemas.movie_schema import MovieCreate, MovieUpdate

class MovieCRUD(CRUDBase[Movie, MovieCreate, MovieUpdate]):
    pass

movie_crud = MovieCRUD(Movie)
