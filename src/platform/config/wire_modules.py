"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.hotel.app.command import (
    create_room_use_case,
    pay_for_room_use_case,
    reserve_room_use_case,
)
from src.service.hotel.app.query import list_rooms_use_case
from src.service.hotel.driving_adapter.http_controller import room_controller


WIRE_MODULES: list[ModuleType] = [
    create_room_use_case,
    reserve_room_use_case,
    pay_for_room_use_case,
    list_rooms_use_case,
    room_controller,
]
