from enum import StrEnum


class RoomStatus(StrEnum):
    FREE = 'free'
    RESERVED = 'reserved'
