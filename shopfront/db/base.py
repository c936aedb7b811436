from sqlalchemy import Column, DateTime
from sqlalchemy.sql import func

from shopfront.core.db import Base


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


__all__ = ["Base", "TimestampMixin"]
