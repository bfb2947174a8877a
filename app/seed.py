"""Load a small demo cinema: one movie, one room, one seat, one show, one booking.

Run after migrating:  alembic upgrade head && python -m seed
"""
import logging
from datetime import datetime

from sqlalchemy.orm import Session

from crud.booking_crud import booking_crud
from crud.movie_crud import movie_crud
from crud.seat_crud import show_room_seat_crud
from crud.seat_type_crud import seat_type_crud
from crud.show_crud import shows_display_crud
from crud.show_room_crud import show_room_crud
from database import SessionLocal
from model import SeatTypeEnum
from schemas.booking_schema import BookingCreate
from schemas.movie_schema import MovieCreate
from schemas.seat_schema import SeatTypeCreate, ShowRoomSeatCreate
from schemas.theatre_schema import ShowRoomCreate, ShowsDisplayCreate
from utils.config import settings
from utils.logger import setup_logging

logger = logging.getLogger("seed")

DEMO_SHOW_TIME = datetime(2022, 10, 1, 20, 0)


def seed_demo(db: Session, show_time: datetime = DEMO_SHOW_TIME) -> dict:
    movie = movie_crud.create(db, MovieCreate(name="Dune"))
    room = show_room_crud.create(db, ShowRoomCreate(name="Room A"))

    seat_type = seat_type_crud.get_by_name(db, SeatTypeEnum.NORMAL)
    if seat_type is None:
        seat_type = seat_type_crud.create(db, SeatTypeCreate(seat_type=SeatTypeEnum.NORMAL, premium_percentage=0))

    [seat] = show_room_seat_crud.create_many(
        db, [ShowRoomSeatCreate(show_room_id=room.id, seat_type_id=seat_type.id, seat_number="A1")]
    )
    display = shows_display_crud.create(
        db, ShowsDisplayCreate(movie_id=movie.id, show_room_id=room.id, time=show_time)
    )
    booking = booking_crud.create(
        db,
        BookingCreate(show_display_id=display.id, show_room_seat_id=seat.id, payment_method="CARD", paid=True),
    )
    logger.info("seeded movie=%s room=%s display=%s booking=%s", movie.id, room.id, display.id, booking.id)
    return {
        "movie": movie,
        "show_room": room,
        "seat_type": seat_type,
        "seat": seat,
        "show_display": display,
        "booking": booking,
    }


if __name__ == "__main__":
    setup_logging(getattr(logging, settings.LOG_LEVEL, logging.INFO))
    db = SessionLocal()
    try:
        seed_demo(db)
    finally:
        db.close()
