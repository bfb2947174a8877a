from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from . import AuditOut, ORMModel


# SHOW_ROOM
class ShowRoomBase(ORMModel):
    name: str = Field(..., min_length=1, max_length=100)


class ShowRoomCreate(ShowRoomBase):
    pass


class ShowRoomUpdate(ORMModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)


class ShowRoomOut(ShowRoomBase, AuditOut):
    id: int


# SHOWS_DISPLAY
class ShowsDisplayBase(ORMModel):
    movie_id: int
    show_room_id: int
    time: datetime


class ShowsDisplayCreate(ShowsDisplayBase):
    pass


class ShowsDisplayUpdate(ORMModel):
    movie_id: Optional[int] = None
    show_room_id: Optional[int] = None
    time: Optional[datetime] = None


class ShowsDisplayOut(ShowsDisplayBase, AuditOut):
    id: int
