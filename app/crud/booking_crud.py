from sqlalchemy.orm import Session, joinedload

from crud.base import CRUDBase
from model import Booking, ShowRoomSeat, ShowsDisplay
from schemas.booking_schema import BookingCreate, BookingUpdate, TicketOut
from utils.errors import RecordNotFoundError


class BookingCRUD(CRUDBase[Booking, BookingCreate, BookingUpdate]):
    def ticket(self, db: Session, booking_id: int) -> TicketOut:
        """Everything printed on a ticket: movie, room, seat and show time."""
        pk_column = getattr(self.model, self.id_field)
        booking = (
            db.query(Booking)
            .options(
                joinedload(Booking.show_display).joinedload(ShowsDisplay.movie),
                joinedload(Booking.show_display).joinedload(ShowsDisplay.show_room),
                joinedload(Booking.show_room_seat).joinedload(ShowRoomSeat.seat_type),
            )
            .filter(pk_column == booking_id)
            .first()
        )
        if booking is None:
            raise RecordNotFoundError(self.model.__name__, self.id_field, booking_id)

        display = booking.show_display
        seat = booking.show_room_seat
        return TicketOut(
            booking_id=booking.id,
            movie_name=display.movie.name if display and display.movie else None,
            show_room_name=display.show_room.name if display and display.show_room else None,
            seat_number=seat.seat_number if seat else None,
            seat_type=seat.seat_type.seat_type if seat and seat.seat_type else None,
            time=display.time if display else None,
            paid=booking.paid,
        )


booking_crud = BookingCRUD(Booking, id_field="id")
