from typing import Generic, TypeVar, Type
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from pydantic import BaseModel
from utils.errors import RecordNotFoundError

ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType], id_field: str = "id"):
        self.model = model
        self.id_field = id_field

    # ---------------- GET ----------------
    def get(self, db: Session, id: int) -> ModelType:
        pk_column = getattr(self.model, self.id_field)
        obj = db.query(self.model).filter(pk_column == id).first()
        if not obj:
            raise RecordNotFoundError(self.model.__name__, self.id_field, id)
        return obj

    # ---------------- GET ALL ----------------
    def get_all(self, db: Session, skip=0, limit=10, filters=None):
        query = db.query(self.model)
        if filters:
            for key, value in filters.items():
                if value is not None:
                    query = query.filter(getattr(self.model, key) == value)
        data = query.order_by(getattr(self.model, self.id_field)).offset(skip).limit(limit).all()
        return data

    # ---------------- CREATE ----------------
    def create(self, db: Session, obj_in: CreateSchemaType):
        obj = self.model(**obj_in.model_dump())
        db.add(obj)
        self._commit(db)
        db.refresh(obj)
        return obj

    # ---------------- UPDATE ----------------
    def update(self, db: Session, db_obj: ModelType, obj_in: UpdateSchemaType):
        update_data = obj_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(db_obj, key, value)
        db.add(db_obj)
        self._commit(db)
        db.refresh(db_obj)
        return db_obj

    # ---------------- DELETE ----------------
    def remove(self, db: Session, id: int):
        obj = self.get(db, id)
        db.delete(obj)
        self._commit(db)
        return obj

    @staticmethod
    def _commit(db: Session) -> None:
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
