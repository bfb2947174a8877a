from __future__ import annotations

from typing import Optional

from pydantic import Field

from . import AuditOut, ORMModel


class MovieBase(ORMModel):
    name: str = Field(..., min_length=1, max_length=255)


class MovieCreate(MovieBase):
    pass


class MovieUpdate(ORMModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)


class MovieOut(MovieBase, AuditOut):
    id: int
