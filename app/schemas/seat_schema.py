from __future__ import annotations

from typing import Optional

from pydantic import Field

from . import AuditOut, ORMModel, SeatTypeEnum


# SEAT_TYPE
class SeatTypeBase(ORMModel):
    seat_type: SeatTypeEnum
    premium_percentage: int = Field(0, ge=0, description="e.g., 50 for 50% over the show price")


class SeatTypeCreate(SeatTypeBase):
    pass


class SeatTypeUpdate(ORMModel):
    seat_type: Optional[SeatTypeEnum] = None
    premium_percentage: Optional[int] = Field(None, ge=0)


class SeatTypeOut(SeatTypeBase, AuditOut):
    id: int


# SHOW_ROOM_SEAT
class ShowRoomSeatBase(ORMModel):
    show_room_id: int
    seat_type_id: Optional[int] = None
    seat_number: str = Field(..., min_length=1, max_length=10, description="e.g., A1, B5")


class ShowRoomSeatCreate(ShowRoomSeatBase):
    pass


class ShowRoomSeatUpdate(ORMModel):
    show_room_id: Optional[int] = None
    seat_type_id: Optional[int] = None
    seat_number: Optional[str] = Field(None, min_length=1, max_length=10)


class ShowRoomSeatOut(ShowRoomSeatBase, AuditOut):
    id: int
