import pytest

from src.platform.exception.exceptions import StoreUnavailableError
from src.service.hotel.app.command.preload_rooms_use_case import (
    DEMO_ROOMS,
    PreloadRoomsUseCase,
)


def _echo_rooms(*, rooms):
    return rooms


@pytest.mark.unit
class TestPreloadRoomsUseCase:
    @pytest.fixture
    def use_case(self, fake_uow, recording_sink):
        return PreloadRoomsUseCase(uow_factory=lambda: fake_uow, event_sink=recording_sink)

    async def test_preload_replaces_catalog_with_demo_rooms(
        self, use_case, fake_uow, recording_sink
    ):
        fake_uow.room_command_repo.replace_all.side_effect = _echo_rooms

        rooms = await use_case.preload()

        assert [(r.number, r.type, r.price, r.capacity) for r in rooms] == [
            (101, 'personal', 50.0, 1),
            (102, 'doble', 100.0, 2),
            (103, 'matrimonial', 150.0, 2),
            (104, 'quin', 200.0, 5),
        ]
        assert len(DEMO_ROOMS) == 4
        assert fake_uow.committed
        assert recording_sink.events[-1]['action'] == 'preloaded'
        assert recording_sink.events[-1]['count'] == 4

    async def test_store_failure_is_reported_not_raised(self, use_case, fake_uow, recording_sink):
        fake_uow.room_command_repo.replace_all.side_effect = StoreUnavailableError(
            'OperationalError: connection refused'
        )

        rooms = await use_case.preload()

        assert rooms == []
        assert not fake_uow.committed
        assert recording_sink.events == [
            {
                'level': 'error',
                'message': 'Error loading rooms',
                'action': 'preload_failed',
                'error': 'OperationalError: connection refused',
            }
        ]
