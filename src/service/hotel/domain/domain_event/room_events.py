"""
Room domain events

Each successful business operation produces exactly one event. The event
knows its log level, message and metadata, which is all an event sink needs.
"""

from typing import Any, ClassVar
from uuid import UUID

import attrs


@attrs.frozen
class RoomDomainEvent:
    level: ClassVar[str] = 'info'
    message: ClassVar[str] = ''
    action: ClassVar[str] = ''

    def metadata(self) -> dict[str, Any]:
        return {'action': self.action}


@attrs.frozen
class RoomCreatedEvent(RoomDomainEvent):
    message: ClassVar[str] = 'Room created'
    action: ClassVar[str] = 'created'

    room_id: UUID

    def metadata(self) -> dict[str, Any]:
        return super().metadata() | {'room_id': str(self.room_id)}


@attrs.frozen
class RoomReservedEvent(RoomDomainEvent):
    message: ClassVar[str] = 'Room reserved'
    action: ClassVar[str] = 'reserved'

    room_id: UUID

    def metadata(self) -> dict[str, Any]:
        return super().metadata() | {'room_id': str(self.room_id)}


@attrs.frozen
class RoomPaidEvent(RoomDomainEvent):
    message: ClassVar[str] = 'Payment processed'
    action: ClassVar[str] = 'paid'

    room_id: UUID
    payment_id: UUID
    amount: float

    def metadata(self) -> dict[str, Any]:
        return super().metadata() | {
            'room_id': str(self.room_id),
            'payment_id': str(self.payment_id),
            'amount': self.amount,
        }


@attrs.frozen
class RoomsPreloadedEvent(RoomDomainEvent):
    message: ClassVar[str] = 'Rooms preloaded'
    action: ClassVar[str] = 'preloaded'

    count: int

    def metadata(self) -> dict[str, Any]:
        return super().metadata() | {'count': self.count}
