from typing import Callable, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import InvalidStateError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_event_sink import IEventSink
from src.service.hotel.domain.domain_event.room_events import RoomPaidEvent
from src.service.hotel.domain.entity.payment_entity import Payment
from src.service.hotel.domain.entity.room_entity import Room
from src.service.hotel.domain.reservation_state_machine import ROOM_NOT_AVAILABLE


MAX_STATUS_ATTEMPTS = 3


class PayForRoomUseCase:
    """
    Pay for a room: append a ledger entry and release the room

    Both writes share one unit of work, so a room never becomes FREE without
    its payment being recorded. The status flip is a conditional update keyed
    on the status read in the same transaction; if another request changed
    the room in between, the decision is taken again on the fresh status.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        event_sink: IEventSink,
        require_reserved: bool = False,
    ) -> None:
        self.uow_factory = uow_factory
        self.event_sink = event_sink
        self.require_reserved = require_reserved

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        event_sink: IEventSink = Depends(Provide[Container.event_sink]),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            uow_factory=uow_factory,
            event_sink=event_sink,
            require_reserved=config.REQUIRE_RESERVED_FOR_PAYMENT,
        )

    @Logger.io
    async def pay(self, *, room_id: UUID, amount: float) -> Payment:
        async with self.uow_factory() as uow:
            await self._release_room(uow=uow, room_id=room_id)

            payment = await uow.payment_ledger_repo.append(
                payment=Payment.create(room_id=room_id, amount=amount)
            )
            await uow.commit()

        Logger.base.info(f'💳 [PAY] Room {room_id} paid {amount}, payment {payment.id}')
        await self.event_sink.publish(
            event=RoomPaidEvent(room_id=room_id, payment_id=payment.id, amount=amount)
        )
        return payment

    async def _release_room(self, *, uow: AbstractUnitOfWork, room_id: UUID) -> Room:
        for _ in range(MAX_STATUS_ATTEMPTS):
            room = await uow.room_command_repo.get_by_id(room_id=room_id)
            if room is None:
                raise NotFoundError('Room not found')

            released = room.release_after_payment(require_reserved=self.require_reserved)
            updated_room = await uow.room_command_repo.update_status_if_equals(
                room_id=room_id, expected=room.status, next_status=released.status
            )
            if updated_room is not None:
                return updated_room

            Logger.base.warning(f'🔁 [PAY] Room {room_id} changed concurrently, retrying')

        raise InvalidStateError(ROOM_NOT_AVAILABLE)
