from sqlalchemy import Column, Integer, String, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from database import Base
from enum import Enum
from model.mixins import AuditMixin

#seat_type
class SeatTypeEnum(str, Enum):
    VIP = "VIP"
    COUPLE = "Couple"
    SUPER = "Super"
    NORMAL = "Normal"


# Stored by value ("Couple", not "COUPLE"); create_constraint adds a CHECK on backends without native enums
seat_type_enum = SAEnum(
    SeatTypeEnum,
    name="seat_type_enum",
    values_callable=lambda members: [m.value for m in members],
    create_constraint=True,
)


class SeatType(AuditMixin, Base):
    __tablename__ = "SeatType"

    id = Column(Integer, primary_key=True, autoincrement=True)
    seat_type = Column(seat_type_enum, nullable=True)
    premium_percentage = Column(Integer, nullable=True)  # markup over the show price, 50 means +50%

    seats = relationship("ShowRoomSeat", back_populates="seat_type", cascade="all,delete-orphan", passive_deletes=True)

#show_room_seat
class ShowRoomSeat(AuditMixin, Base):
    __tablename__ = "ShowRoomSeat"

    id = Column(Integer, primary_key=True, autoincrement=True)
    seat_number = Column(String, nullable=True)
    seat_type_id = Column(Integer, ForeignKey("SeatType.id", ondelete="CASCADE"), nullable=True)
    show_room_id = Column(Integer, ForeignKey("ShowRoom.id", ondelete="CASCADE"), nullable=True)
    # Relations
    show_room = relationship("ShowRoom", back_populates="seats")
    seat_type = relationship("SeatType", back_populates="seats")
    bookings = relationship("Booking", back_populates="show_room_seat", cascade="all,delete-orphan", passive_deletes=True)
