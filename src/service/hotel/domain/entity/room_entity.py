import math
from numbers import Real
from typing import Any, Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.domain.enum.room_status import RoomStatus
from src.service.hotel.domain.reservation_state_machine import (
    next_status_for_payment,
    next_status_for_reserve,
)


# Integer columns are 32-bit
INT32_MAX = 2**31 - 1


def _is_int(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and -INT32_MAX - 1 <= value <= INT32_MAX
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


@attrs.define
class Room:
    id: UUID
    number: int
    type: str
    price: float
    capacity: int
    description: str = ''
    status: RoomStatus = RoomStatus.FREE

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        number: int,
        type: str,
        price: float,
        capacity: int,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> 'Room':
        if not _is_int(number):
            raise ValidationError('number must be an integer')
        if not isinstance(type, str) or not type.strip():
            raise ValidationError('type is required')
        if not _is_number(price) or price < 0:
            raise ValidationError('price must be a non-negative number')
        if not _is_int(capacity) or capacity <= 0:
            raise ValidationError('capacity must be a positive integer')
        if description is not None and not isinstance(description, str):
            raise ValidationError('description must be a string')

        try:
            room_status = RoomStatus(status) if status is not None else RoomStatus.FREE
        except ValueError:
            raise ValidationError(
                f'status must be one of: {", ".join(s.value for s in RoomStatus)}'
            )

        return cls(
            id=uuid7(),
            number=number,
            type=type,
            description=description or '',
            price=float(price),
            capacity=capacity,
            status=room_status,
        )

    def reserve(self) -> 'Room':
        return attrs.evolve(self, status=next_status_for_reserve(self.status))

    def release_after_payment(self, *, require_reserved: bool) -> 'Room':
        return attrs.evolve(
            self, status=next_status_for_payment(self.status, require_reserved=require_reserved)
        )
