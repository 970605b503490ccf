"""Domain Enums"""
from enum import Enum


class RoomType(str, Enum):
    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    SUITE = "SUITE"


class RoomStatus(str, Enum):
    READY = "READY"
    BOOKED = "BOOKED"
    OCCUPIED = "OCCUPIED"
    UNAVAILABLE = "UNAVAILABLE"


class SubmissionStatus(str, Enum):
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class RejectionReason(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    NO_ROOM_AVAILABLE = "NO_ROOM_AVAILABLE"


class ProcessingStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    FAILED = "FAILED"


class UndoStatus(str, Enum):
    REVERTED = "REVERTED"
    EMPTY = "EMPTY"


class CheckInStatus(str, Enum):
    SUCCESS = "SUCCESS"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_OCCUPIED = "ALREADY_OCCUPIED"
