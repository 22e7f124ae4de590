from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.service.hotel.domain.entity.payment_entity import Payment
from src.service.hotel.domain.entity.room_entity import INT32_MAX, Room


class RoomCreateRequest(BaseModel):
    number: int = Field(ge=-INT32_MAX - 1, le=INT32_MAX)
    type: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0, allow_inf_nan=False)
    capacity: int = Field(gt=0, le=INT32_MAX)
    status: Optional[str] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'number': 101,
                'type': 'personal',
                'description': 'Habitación individual',
                'price': 50,
                'capacity': 1,
            }
        }
    }


class RoomResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'number': 101,
                'type': 'personal',
                'description': 'Habitación individual',
                'price': 50.0,
                'capacity': 1,
                'status': 'free',
            }
        },
    }

    id: UUID
    number: int
    type: str
    description: str
    price: float
    capacity: int
    status: str

    @classmethod
    def from_entity(cls, room: Room) -> 'RoomResponse':
        return cls(
            id=room.id,
            number=room.number,
            type=room.type,
            description=room.description,
            price=room.price,
            capacity=room.capacity,
            status=room.status.value,
        )


class RoomEnvelopeResponse(BaseModel):
    message: str
    room: RoomResponse


class PaymentRequest(BaseModel):
    amount: float = Field(allow_inf_nan=False)

    model_config = {'json_schema_extra': {'example': {'amount': 50}}}


class PaymentResponse(BaseModel):
    id: UUID
    room_id: UUID
    amount: float
    date: datetime

    @classmethod
    def from_entity(cls, payment: Payment) -> 'PaymentResponse':
        return cls(
            id=payment.id,
            room_id=payment.room_id,
            amount=payment.amount,
            date=payment.date,
        )


class PaymentEnvelopeResponse(BaseModel):
    message: str
    payment: PaymentResponse
