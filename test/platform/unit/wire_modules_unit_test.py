import pytest

from src.platform.config.wire_modules import WIRE_MODULES
from src.service.hotel.app.command import (
    create_room_use_case,
    pay_for_room_use_case,
    preload_rooms_use_case,
    reserve_room_use_case,
)
from src.service.hotel.app.query import list_rooms_use_case


@pytest.mark.unit
class TestWireModules:
    @pytest.mark.parametrize(
        'module, use_case_name',
        [
            (create_room_use_case, 'CreateRoomUseCase'),
            (reserve_room_use_case, 'ReserveRoomUseCase'),
            (pay_for_room_use_case, 'PayForRoomUseCase'),
            (list_rooms_use_case, 'ListRoomsUseCase'),
        ],
    )
    def test_wired_use_cases_resolve_through_depends(self, module, use_case_name):
        assert module in WIRE_MODULES
        assert callable(getattr(getattr(module, use_case_name), 'depends', None))

    def test_preload_is_built_directly_by_lifespan(self):
        assert preload_rooms_use_case not in WIRE_MODULES
        assert not hasattr(preload_rooms_use_case.PreloadRoomsUseCase, 'depends')
