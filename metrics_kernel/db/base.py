"""
Module: metrics_kernel.db.base
Responsibility: Declarative base classes for all SQLAlchemy ORM models.
    Provides the integer surrogate key convention, the type annotation map
    for consistent column types, and the TrackedBase mixin for timestamps.
Architecture position: Kernel > DB. This is the lowest-level import target
    within the kernel. ALL model files import from here. This module MUST NOT
    import from models/, services/, domain/, or outer layers.

Invariants enforced:
    - Surrogate identity: every model gets an autoincrementing integer primary
      key owned by the database; callers never choose ids.
    - Timestamps: datetime maps to DateTime(timezone=True).
"""

from datetime import datetime
from typing import ClassVar

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Declarative base for all SQLAlchemy models.

    Guarantees:
        - id is an Integer primary key (Integer rather than BigInteger so
          SQLite treats it as ROWID and autoincrements).
        - datetime maps to DateTime(timezone=True).
    """

    type_annotation_map: ClassVar[dict] = {
        datetime: DateTime(timezone=True),
    }

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )


class TrackedBase(Base):
    """
    Abstract base with a creation timestamp.

    Guarantees:
        - created_at is set to server NOW() on INSERT and never changes.
    """

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
