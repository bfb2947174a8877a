from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from crud.base import CRUDBase
from model import Booking, ShowRoomSeat, ShowsDisplay
from schemas.theatre_schema import ShowsDisplayCreate, ShowsDisplayUpdate


class ShowsDisplayCRUD(CRUDBase[ShowsDisplay, ShowsDisplayCreate, ShowsDisplayUpdate]):
    def upcoming(self, db: Session, now: Optional[datetime] = None) -> List[ShowsDisplay]:
        """Displays starting at or after ``now``, earliest first."""
        now = now or datetime.now()
        return (
            db.query(ShowsDisplay)
            .filter(ShowsDisplay.time >= now)
            .order_by(ShowsDisplay.time, ShowsDisplay.id)
            .all()
        )

    def available_seats(self, db: Session, show_display_id: int) -> List[ShowRoomSeat]:
        """Seats of the display's room that no booking holds for this display."""
        display = self.get(db, show_display_id)
        if display.show_room_id is None:
            return []
        booked = (
            select(Booking.show_room_seat_id)
            .where(Booking.show_display_id == display.id)
            .where(Booking.show_room_seat_id.is_not(None))
        )
        return (
            db.query(ShowRoomSeat)
            .filter(ShowRoomSeat.show_room_id == display.show_room_id)
            .filter(ShowRoomSeat.id.not_in(booked))
            .order_by(ShowRoomSeat.seat_number)
            .all()
        )

    def is_booked_out(self, db: Session, show_display_id: int) -> bool:
        # a room with no seats configured is not "booked out", just unseated
        display = self.get(db, show_display_id)
        if display.show_room_id is None:
            return False
        has_seats = (
            db.query(ShowRoomSeat.id)
            .filter(ShowRoomSeat.show_room_id == display.show_room_id)
            .first()
            is not None
        )
        return has_seats and not self.available_seats(db, show_display_id)


shows_display_crud = ShowsDisplayCRUD(ShowsDisplay, id_field="id")
