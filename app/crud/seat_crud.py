from crud.base import CRUDBase
from model import ShowRoomSeat
from schemas.seat_schema import ShowRoomSeatCreate, ShowRoomSeatUpdate
from sqlalchemy.orm import Session
from typing import List
class ShowRoomSeatCRUD(CRUDBase[ShowRoomSeat, ShowRoomSeatCreate, ShowRoomSeatUpdate]):
    def create_many(self, db: Session, obj_in_list: List[ShowRoomSeatCreate]) -> List[ShowRoomSeat]:
        # a room's seating is configured once and reused by every display in it
        seats = [ShowRoomSeat(**item.model_dump()) for item in obj_in_list]
        db.add_all(seats)
        self._commit(db)
        for seat in seats:
            db.refresh(seat)
        return seats

    def for_room(self, db: Session, show_room_id: int) -> List[ShowRoomSeat]:
        return (
            db.query(ShowRoomSeat)
            .filter(ShowRoomSeat.show_room_id == show_room_id)
            .order_by(ShowRoomSeat.seat_number)
            .all()
        )


show_room_seat_crud = ShowRoomSeatCRUD(ShowRoomSeat, id_field="id")
