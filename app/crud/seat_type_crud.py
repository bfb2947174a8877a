from typing import Optional
from sqlalchemy.orm import Session
from crud.base import CRUDBase
from model import SeatType, SeatTypeEnum
from schemas.seat_schema import SeatTypeCreate, SeatTypeUpdate

class SeatTypeCRUD(CRUDBase[SeatType, SeatTypeCreate, SeatTypeUpdate]):
    def __init__(self):
        super().__init__(SeatType, id_field="id")

    def get_by_name(self, db: Session, seat_type: SeatTypeEnum) -> Optional[SeatType]:
        return db.query(SeatType).filter(SeatType.seat_type == seat_type).first()

seat_type_crud = SeatTypeCRUD()
