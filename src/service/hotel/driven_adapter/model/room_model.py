from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, Float, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class RoomModel(Base):
    __tablename__ = 'rooms'
    __table_args__ = (
        CheckConstraint("status IN ('free', 'reserved')", name='ck_rooms_status'),
        CheckConstraint('price >= 0', name='ck_rooms_price_non_negative'),
        CheckConstraint('capacity > 0', name='ck_rooms_capacity_positive'),
    )

    # Insertion order; the UUID is the public identifier
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False, index=True)  # UUID7
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default='')
    price: Mapped[float] = mapped_column(Float, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='free')
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
