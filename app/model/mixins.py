from sqlalchemy import Column, TIMESTAMP, text
from sqlalchemy.sql import func


class AuditMixin:
    """createdAt/updatedAt columns shared by every cinema table."""

    created_at = Column("createdAt", TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"), nullable=True)
    updated_at = Column("updatedAt", TIMESTAMP, server_default=text("CURRENT_TIMESTAMP"), onupdate=func.now(), nullable=True)
