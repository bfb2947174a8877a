from crud.base import CRUDBase
from model import ShowRoom
from schemas.theatre_schema import ShowRoomCreate, ShowRoomUpdate

class ShowRoomCRUD(CRUDBase[ShowRoom, ShowRoomCreate, ShowRoomUpdate]):
    def __init__(self):
        super().__init__(ShowRoom, id_field="id")

show_room_crud = ShowRoomCRUD()
