from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.hotel.domain.entity.room_entity import Room
from src.service.hotel.driven_adapter.model.room_model import RoomModel
from src.service.hotel.driven_adapter.repo.room_mapper import room_to_entity


class RoomQueryRepoImpl(IRoomQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_all(self) -> List[Room]:
        async with self.session_factory() as session:
            result = await session.execute(select(RoomModel).order_by(RoomModel.seq))
            return [room_to_entity(room_model) for room_model in result.scalars().all()]
