from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from . import AuditOut, ORMModel, SeatTypeEnum


# ---------------------------------------------------------------------------
# bookings
# ---------------------------------------------------------------------------

class BookingBase(ORMModel):
    show_display_id: int
    show_room_seat_id: int
    payment_method: Optional[str] = Field(None, max_length=50, description="e.g., CARD, CASH")
    paid: bool = False


class BookingCreate(BookingBase):
    pass


class BookingUpdate(ORMModel):
    payment_method: Optional[str] = Field(None, max_length=50)
    paid: Optional[bool] = None


class BookingOut(BookingBase, AuditOut):
    id: int


# ---------------------------------------------------------------------------
# ticket view: everything printed on a ticket for one booking
# ---------------------------------------------------------------------------

class TicketOut(ORMModel):
    booking_id: int
    movie_name: Optional[str] = None
    show_room_name: Optional[str] = None
    seat_number: Optional[str] = None
    seat_type: Optional[SeatTypeEnum] = None
    time: Optional[datetime] = None
    paid: Optional[bool] = None
