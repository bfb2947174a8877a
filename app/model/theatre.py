from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    String,
    TIMESTAMP,
)
from sqlalchemy.orm import relationship
from database import Base
from model.mixins import AuditMixin

#show_room
class ShowRoom(AuditMixin, Base):
    __tablename__="ShowRoom"
    id=Column(Integer, primary_key=True, autoincrement=True)
    name=Column(String, nullable=True)

    seats = relationship("ShowRoomSeat", back_populates="show_room", cascade="all,delete-orphan", passive_deletes=True)
    displays = relationship("ShowsDisplay", back_populates="show_room", cascade="all,delete-orphan", passive_deletes=True)


#shows_display
# One scheduled screening: one movie in one room at one time.
# Nothing stops two displays sharing a room and time.
class ShowsDisplay(AuditMixin, Base):
    __tablename__ = "ShowsDisplay"

    id = Column(Integer, primary_key=True, autoincrement=True)
    time = Column(TIMESTAMP, nullable=True)
    show_room_id = Column(Integer, ForeignKey("ShowRoom.id", ondelete="CASCADE"), nullable=True)
    movie_id = Column(Integer, ForeignKey("Movie.id", ondelete="CASCADE"), nullable=True)

    # Relations
    show_room = relationship("ShowRoom", back_populates="displays")
    movie = relationship("Movie", back_populates="displays")
    bookings = relationship("Booking", back_populates="show_display", cascade="all,delete-orphan", passive_deletes=True)
