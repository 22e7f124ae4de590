from datetime import timezone
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_payment_ledger_repo import IPaymentLedgerRepo
from src.service.hotel.domain.entity.payment_entity import Payment
from src.service.hotel.driven_adapter.model.payment_model import PaymentModel


class PaymentLedgerRepoImpl(IPaymentLedgerRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def append(self, *, payment: Payment) -> Payment:
        self.session.add(
            PaymentModel(
                id=payment.id,
                room_id=payment.room_id,
                amount=payment.amount,
                date=payment.date,
            )
        )
        await self.session.flush()
        return payment

    @Logger.io
    async def list_by_room(self, *, room_id: UUID) -> List[Payment]:
        result = await self.session.execute(
            select(PaymentModel).where(PaymentModel.room_id == room_id).order_by(PaymentModel.seq)
        )
        return [self._model_to_entity(payment_model) for payment_model in result.scalars().all()]

    def _model_to_entity(self, payment_model: PaymentModel) -> Payment:
        # SQLite drops the offset on read; stored values are always UTC
        date = payment_model.date
        if date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        return Payment(
            id=payment_model.id,
            room_id=payment_model.room_id,
            amount=payment_model.amount,
            date=date,
        )
