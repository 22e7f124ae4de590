"""
Room reservation lifecycle

    FREE --reserve--> RESERVED --pay--> FREE

Rooms are never retired, so there is no terminal state. Every status change of
a room goes through this module; persistence only applies what it decides.
"""

from src.platform.exception.exceptions import InvalidStateError
from src.service.hotel.domain.enum.room_status import RoomStatus


ROOM_NOT_AVAILABLE = 'Room is not available'
ROOM_NOT_RESERVED = 'Room is not reserved'

_ALLOWED_TRANSITIONS: dict[RoomStatus, frozenset[RoomStatus]] = {
    RoomStatus.FREE: frozenset({RoomStatus.RESERVED}),
    RoomStatus.RESERVED: frozenset({RoomStatus.FREE}),
}


def is_allowed_transition(current: RoomStatus, target: RoomStatus) -> bool:
    return target in _ALLOWED_TRANSITIONS[current]


def next_status_for_reserve(current: RoomStatus) -> RoomStatus:
    if not is_allowed_transition(current, RoomStatus.RESERVED):
        raise InvalidStateError(ROOM_NOT_AVAILABLE)
    return RoomStatus.RESERVED


def next_status_for_payment(current: RoomStatus, *, require_reserved: bool) -> RoomStatus:
    """
    Paying always leaves the room FREE.

    Unless `require_reserved` is set, a FREE room may be paid for as well and
    simply stays FREE.
    """
    if require_reserved and not is_allowed_transition(current, RoomStatus.FREE):
        raise InvalidStateError(ROOM_NOT_RESERVED)
    return RoomStatus.FREE
