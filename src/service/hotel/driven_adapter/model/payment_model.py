from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Float, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class PaymentModel(Base):
    __tablename__ = 'payments'

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False)  # UUID7
    # Weak reference: payments outlive catalog resets, so no foreign key
    room_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
