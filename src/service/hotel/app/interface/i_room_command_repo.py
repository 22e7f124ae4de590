"""
Room Command Repository Interface

Write side of the room catalog. Implementations run inside a unit of work and
never commit on their own.
"""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.service.hotel.domain.entity.room_entity import Room
from src.service.hotel.domain.enum.room_status import RoomStatus


class IRoomCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, room: Room) -> Room:
        pass

    @abstractmethod
    async def get_by_id(self, *, room_id: UUID) -> Room | None:
        """Read a room inside the current transaction (None if missing)"""
        pass

    @abstractmethod
    async def update(self, *, room: Room) -> Room:
        """Persist every mutable field of an existing room"""
        pass

    @abstractmethod
    async def update_status_if_equals(
        self, *, room_id: UUID, expected: RoomStatus, next_status: RoomStatus
    ) -> Room | None:
        """
        Atomically set status to `next_status` only if it currently equals `expected`

        Returns:
            Updated room, or None when no room with that id has status `expected`
        """
        pass

    @abstractmethod
    async def replace_all(self, *, rooms: List[Room]) -> List[Room]:
        """Delete every room, then insert `rooms`"""
        pass
