from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship
from database import Base
from model.mixins import AuditMixin


# ---------------------------------------------------------------------------
# BOOKING
# Note: no unique constraint on (show_display_id, show_room_seat_id); guarding
# against double booking belongs to whatever reserves seats.
# ---------------------------------------------------------------------------

class Booking(AuditMixin, Base):
    __tablename__ = "Booking"

    id = Column(Integer, primary_key=True, autoincrement=True)
    payment_method = Column(String, nullable=True)
    paid = Column(Boolean, nullable=True)
    show_display_id = Column(Integer, ForeignKey("ShowsDisplay.id", ondelete="CASCADE"), nullable=True)
    show_room_seat_id = Column(Integer, ForeignKey("ShowRoomSeat.id", ondelete="CASCADE"), nullable=True)

    # Relations
    show_display = relationship("ShowsDisplay", back_populates="bookings")
    show_room_seat = relationship("ShowRoomSeat", back_populates="bookings")
