from datetime import datetime

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from model import Booking, Movie, SeatType, SeatTypeEnum, ShowRoom, ShowRoomSeat, ShowsDisplay

SHOW_TIME = datetime(2022, 10, 1, 20, 0)


def _dune_scenario(db):
    movie = Movie(id=1, name="Dune")
    room = ShowRoom(id=1, name="Room A")
    db.add_all([movie, room])
    db.flush()
    display = ShowsDisplay(id=1, movie_id=1, show_room_id=1, time=SHOW_TIME)
    seat = ShowRoomSeat(id=1, show_room_id=1, seat_number="A1")
    db.add_all([display, seat])
    db.flush()
    booking = Booking(id=1, show_display_id=1, show_room_seat_id=1, paid=True)
    db.add(booking)
    db.commit()
    return booking


def test_dune_scenario_inserts(db):
    booking = _dune_scenario(db)

    assert booking.show_display.movie.name == "Dune"
    assert booking.show_room_seat.show_room.name == "Room A"
    assert booking.show_room_seat.seat_type is None
    assert booking.paid is True


def test_audit_columns_default_to_insert_time(db):
    movie = Movie(name="Arrival")
    db.add(movie)
    db.commit()
    db.refresh(movie)

    assert isinstance(movie.created_at, datetime)
    assert isinstance(movie.updated_at, datetime)


def test_double_booking_same_seat_and_display_is_not_rejected(db):
    _dune_scenario(db)
    db.add(Booking(show_display_id=1, show_room_seat_id=1, paid=False))
    db.commit()

    count = db.execute(
        text('SELECT COUNT(*) FROM "Booking" WHERE show_display_id = 1 AND show_room_seat_id = 1')
    ).scalar_one()
    assert count == 2


@pytest.mark.parametrize("value", ["VIP", "Couple", "Super", "Normal"])
def test_seat_type_accepts_declared_values(db, value):
    db.execute(
        text('INSERT INTO "SeatType" (seat_type, premium_percentage) VALUES (:value, 50)'),
        {"value": value},
    )
    db.commit()

    stored = db.query(SeatType).one()
    assert stored.seat_type == SeatTypeEnum(value)
    assert stored.premium_percentage == 50


@pytest.mark.parametrize("value", ["Gold", "vip", ""])
def test_seat_type_rejects_other_values(db, value):
    with pytest.raises(IntegrityError):
        db.execute(
            text('INSERT INTO "SeatType" (seat_type, premium_percentage) VALUES (:value, 0)'),
            {"value": value},
        )
    db.rollback()


def test_seat_links_to_seat_type(db):
    vip = SeatType(seat_type=SeatTypeEnum.VIP, premium_percentage=50)
    room = ShowRoom(name="Room B")
    db.add_all([vip, room])
    db.flush()
    db.add(ShowRoomSeat(seat_number="B7", seat_type_id=vip.id, show_room_id=room.id))
    db.commit()

    seat = db.query(ShowRoomSeat).filter_by(seat_number="B7").one()
    assert seat.seat_type.seat_type is SeatTypeEnum.VIP
    assert vip.seats == [seat]


def test_foreign_keys_reject_missing_targets(db):
    db.add(Booking(show_display_id=42, show_room_seat_id=42, paid=False))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_deleting_show_room_cascades_to_seats_displays_and_bookings(db):
    _dune_scenario(db)

    db.execute(text('DELETE FROM "ShowRoom" WHERE id = 1'))
    db.commit()

    for table in ("ShowRoomSeat", "ShowsDisplay", "Booking"):
        assert db.execute(text(f'SELECT COUNT(*) FROM "{table}"')).scalar_one() == 0
    assert db.execute(text('SELECT COUNT(*) FROM "Movie"')).scalar_one() == 1


def test_deleting_movie_through_orm_removes_its_displays(db):
    _dune_scenario(db)

    db.delete(db.get(Movie, 1))
    db.commit()

    assert db.query(ShowsDisplay).count() == 0
    assert db.query(Booking).count() == 0
    assert db.query(ShowRoomSeat).count() == 1


def test_nullable_foreign_keys_allow_unlinked_rows(db):
    db.add_all([ShowRoomSeat(seat_number="Z9"), ShowsDisplay(time=SHOW_TIME), Booking(paid=False)])
    db.commit()

    assert db.query(Booking).one().show_display is None
