import pytest

from src.platform.exception.exceptions import InvalidStateError
from src.service.hotel.domain.enum.room_status import RoomStatus
from src.service.hotel.domain.reservation_state_machine import (
    is_allowed_transition,
    next_status_for_payment,
    next_status_for_reserve,
)


@pytest.mark.unit
class TestReservationStateMachine:
    @pytest.mark.parametrize(
        'current, target, allowed',
        [
            (RoomStatus.FREE, RoomStatus.RESERVED, True),
            (RoomStatus.RESERVED, RoomStatus.FREE, True),
            (RoomStatus.FREE, RoomStatus.FREE, False),
            (RoomStatus.RESERVED, RoomStatus.RESERVED, False),
        ],
    )
    def test_allowed_transitions(self, current, target, allowed):
        assert is_allowed_transition(current, target) is allowed

    def test_reserve_from_free(self):
        assert next_status_for_reserve(RoomStatus.FREE) == RoomStatus.RESERVED

    def test_reserve_from_reserved_is_rejected(self):
        with pytest.raises(InvalidStateError) as exc_info:
            next_status_for_reserve(RoomStatus.RESERVED)

        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize('current', list(RoomStatus))
    def test_payment_always_ends_free_when_permissive(self, current):
        assert next_status_for_payment(current, require_reserved=False) == RoomStatus.FREE

    def test_payment_requires_reserved_when_hardened(self):
        assert (
            next_status_for_payment(RoomStatus.RESERVED, require_reserved=True) == RoomStatus.FREE
        )
        with pytest.raises(InvalidStateError, match='Room is not reserved'):
            next_status_for_payment(RoomStatus.FREE, require_reserved=True)

    def test_status_serializes_lowercase(self):
        assert RoomStatus.FREE == 'free'
        assert RoomStatus.RESERVED == 'reserved'
