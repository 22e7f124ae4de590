"""
Room Command Repository Implementation

Runs on the session of the enclosing unit of work: flushes, never commits.
Status changes are single conditional UPDATE ... RETURNING statements, so the
check and the write cannot be interleaved by a concurrent request.
"""

from typing import List
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_room_command_repo import IRoomCommandRepo
from src.service.hotel.domain.entity.room_entity import Room
from src.service.hotel.domain.enum.room_status import RoomStatus
from src.service.hotel.driven_adapter.model.room_model import RoomModel
from src.service.hotel.driven_adapter.repo.room_mapper import room_to_entity, room_to_model


_rooms = RoomModel.__table__


class RoomCommandRepoImpl(IRoomCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, room: Room) -> Room:
        room_model = room_to_model(room)
        self.session.add(room_model)
        await self.session.flush()
        return room_to_entity(room_model)

    @Logger.io
    async def get_by_id(self, *, room_id: UUID) -> Room | None:
        result = await self.session.execute(select(_rooms).where(_rooms.c.id == room_id))
        row = result.one_or_none()
        return room_to_entity(row) if row else None

    @Logger.io
    async def update(self, *, room: Room) -> Room:
        result = await self.session.execute(
            update(_rooms)
            .where(_rooms.c.id == room.id)
            .values(
                number=room.number,
                type=room.type,
                description=room.description,
                price=room.price,
                capacity=room.capacity,
                status=room.status.value,
                updated_at=func.now(),
            )
            .returning(*_rooms.c)
        )
        row = result.one_or_none()
        if not row:
            raise NotFoundError('Room not found')
        return room_to_entity(row)

    @Logger.io
    async def update_status_if_equals(
        self, *, room_id: UUID, expected: RoomStatus, next_status: RoomStatus
    ) -> Room | None:
        result = await self.session.execute(
            update(_rooms)
            .where(_rooms.c.id == room_id, _rooms.c.status == expected.value)
            .values(status=next_status.value, updated_at=func.now())
            .returning(*_rooms.c)
        )
        row = result.one_or_none()
        return room_to_entity(row) if row else None

    @Logger.io
    async def replace_all(self, *, rooms: List[Room]) -> List[Room]:
        await self.session.execute(delete(_rooms))
        room_models = [room_to_model(room) for room in rooms]
        self.session.add_all(room_models)
        await self.session.flush()

        Logger.base.info(f'🧹 [CATALOG] Replaced catalog with {len(room_models)} rooms')
        return [room_to_entity(room_model) for room_model in room_models]
