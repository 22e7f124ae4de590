from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_event_sink import IEventSink
from src.service.hotel.domain.domain_event.room_events import RoomCreatedEvent
from src.service.hotel.domain.entity.room_entity import Room


class CreateRoomUseCase:
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
    async def create(
        self,
        *,
        number: int,
        type: str,
        price: float,
        capacity: int,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Room:
        room = Room.create(
            number=number,
            type=type,
            price=price,
            capacity=capacity,
            description=description,
            status=status,
        )

        async with self.uow_factory() as uow:
            created_room = await uow.room_command_repo.create(room=room)
            await uow.commit()

        Logger.base.info(f'🏨 [CREATE_ROOM] Room {created_room.number} created as {created_room.id}')
        await self.event_sink.publish(event=RoomCreatedEvent(room_id=created_room.id))
        return created_room
