from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database import Base
from model.mixins import AuditMixin

class Movie(AuditMixin, Base):
    __tablename__="Movie"
    id=Column(Integer, primary_key=True, autoincrement=True)
    name=Column(String, nullable=True)

    displays = relationship("ShowsDisplay", back_populates="movie", cascade="all,delete-orphan", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Movie id={self.id} name={self.name!r}>"
