from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

# Same enum the ORM column binds to, so validated values insert without conversion
from model.seat import SeatTypeEnum


# Shared Pydantic base with ORM support (Pydantic v2)
class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


# createdAt/updatedAt, present on every cinema table
class AuditOut(ORMModel):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


__all__ = ["ORMModel", "AuditOut", "SeatTypeEnum"]
