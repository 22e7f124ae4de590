from typing import Callable, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import InvalidStateError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_event_sink import IEventSink
from src.service.hotel.domain.domain_event.room_events import RoomReservedEvent
from src.service.hotel.domain.entity.room_entity import Room
from src.service.hotel.domain.enum.room_status import RoomStatus
from src.service.hotel.domain.reservation_state_machine import ROOM_NOT_AVAILABLE


class ReserveRoomUseCase:
    """
    Reserve a FREE room

    The FREE -> RESERVED flip is one conditional UPDATE, so among concurrent
    reservations of the same room exactly one wins. When the update matches
    nothing, the room is read back only to tell NotFound from InvalidState.
    """

    def __init__(
        self,
        *,
        uow_factory: Callable[[], AbstractUnitOfWork],
        event_sink: IEventSink,
    ) -> None:
        self.uow_factory = uow_factory
        self.event_sink = event_sink

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        event_sink: IEventSink = Depends(Provide[Container.event_sink]),
    ) -> Self:
        return cls(uow_factory=uow_factory, event_sink=event_sink)

    @Logger.io
    async def reserve(self, *, room_id: UUID) -> Room:
        async with self.uow_factory() as uow:
            reserved_room = await uow.room_command_repo.update_status_if_equals(
                room_id=room_id,
                expected=RoomStatus.FREE,
                next_status=RoomStatus.RESERVED,
            )
            if reserved_room is None:
                room = await uow.room_command_repo.get_by_id(room_id=room_id)
                if room is None:
                    raise NotFoundError('Room not found')
                raise InvalidStateError(ROOM_NOT_AVAILABLE)

            await uow.commit()

        Logger.base.info(f'🔒 [RESERVE] Room {room_id} reserved')
        await self.event_sink.publish(event=RoomReservedEvent(room_id=room_id))
        return reserved_room
