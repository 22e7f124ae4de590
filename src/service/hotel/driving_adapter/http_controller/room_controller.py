from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.command.create_room_use_case import CreateRoomUseCase
from src.service.hotel.app.command.pay_for_room_use_case import PayForRoomUseCase
from src.service.hotel.app.command.reserve_room_use_case import ReserveRoomUseCase
from src.service.hotel.app.query.list_rooms_use_case import ListRoomsUseCase
from src.service.hotel.driving_adapter.http_controller.schema.room_schema import (
    PaymentEnvelopeResponse,
    PaymentRequest,
    PaymentResponse,
    RoomCreateRequest,
    RoomEnvelopeResponse,
    RoomResponse,
)


router = APIRouter()


def _parse_room_id(room_id: str) -> UUID:
    """A malformed id can never match a room"""
    try:
        return UUID(room_id)
    except ValueError:
        raise NotFoundError('Room not found') from None


@router.get('', response_model=List[RoomResponse])
@Logger.io
async def list_rooms(
    use_case: ListRoomsUseCase = Depends(ListRoomsUseCase.depends),
) -> List[RoomResponse]:
    rooms = await use_case.list_all()
    return [RoomResponse.from_entity(room) for room in rooms]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_room(
    request: RoomCreateRequest,
    use_case: CreateRoomUseCase = Depends(CreateRoomUseCase.depends),
) -> RoomEnvelopeResponse:
    room = await use_case.create(
        number=request.number,
        type=request.type,
        description=request.description,
        price=request.price,
        capacity=request.capacity,
        status=request.status,
    )
    return RoomEnvelopeResponse(
        message='Room created successfully', room=RoomResponse.from_entity(room)
    )


@router.post('/{room_id}/reserve')
@Logger.io
async def reserve_room(
    room_id: str,
    use_case: ReserveRoomUseCase = Depends(ReserveRoomUseCase.depends),
) -> RoomEnvelopeResponse:
    room = await use_case.reserve(room_id=_parse_room_id(room_id))
    return RoomEnvelopeResponse(
        message='Room reserved successfully', room=RoomResponse.from_entity(room)
    )


@router.post('/{room_id}/pay')
@Logger.io
async def pay_for_room(
    room_id: str,
    request: PaymentRequest,
    use_case: PayForRoomUseCase = Depends(PayForRoomUseCase.depends),
) -> PaymentEnvelopeResponse:
    payment = await use_case.pay(room_id=_parse_room_id(room_id), amount=request.amount)
    return PaymentEnvelopeResponse(
        message='Payment successful', payment=PaymentResponse.from_entity(payment)
    )
