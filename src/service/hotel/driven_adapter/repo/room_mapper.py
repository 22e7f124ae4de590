from typing import Any

from src.service.hotel.domain.entity.room_entity import Room
from src.service.hotel.domain.enum.room_status import RoomStatus
from src.service.hotel.driven_adapter.model.room_model import RoomModel


def room_to_entity(row: Any) -> Room:
    """Map a RoomModel instance or a RETURNING row of the rooms table to a Room"""
    return Room(
        id=row.id,
        number=row.number,
        type=row.type,
        description=row.description or '',
        price=row.price,
        capacity=row.capacity,
        status=RoomStatus(row.status),
    )


def room_to_model(room: Room) -> RoomModel:
    return RoomModel(
        id=room.id,
        number=room.number,
        type=room.type,
        description=room.description,
        price=room.price,
        capacity=room.capacity,
        status=room.status.value,
    )
