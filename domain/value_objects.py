"""Domain Value Objects"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from domain.enums import (
    RoomType, SubmissionStatus, RejectionReason, ProcessingStatus, UndoStatus, CheckInStatus
)


class HotelConfig(BaseModel):
    """Value Object for the fixed shape of the hotel"""
    horizon_days: int = Field(default=30, ge=1)
    floor_count: int = Field(default=5, ge=1)
    rooms_per_floor: int = Field(default=10, ge=1)
    batch_limit: int = Field(default=10, ge=1)

    @property
    def total_rooms(self) -> int:
        return self.floor_count * self.rooms_per_floor

    class Config:
        frozen = True


class BookingIntent(BaseModel):
    """Value Object for a guest's booking request before it is queued.

    Field constraints cover what can be checked without knowing the hotel;
    horizon and floor-count bounds are checked by the engine.
    """
    customer_name: str
    room_type: RoomType
    floor: int = Field(ge=1)
    check_in_day: int = Field(ge=0)
    nights: int = Field(gt=0)
    priority: bool = False

    @field_validator('customer_name')
    @classmethod
    def customer_name_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Customer name must not be empty')
        return v

    @property
    def check_out_day(self) -> int:
        """First day after the stay"""
        return self.check_in_day + self.nights

    class Config:
        frozen = True


# ============================================================================
# ENGINE RESULTS
# ============================================================================

class SubmissionResult(BaseModel):
    """Outcome of submitting a booking intent"""
    status: SubmissionStatus
    customer_name: str
    reason: Optional[RejectionReason] = None
    room_id: Optional[int] = None
    floor: Optional[int] = None
    room_type: Optional[RoomType] = None
    detail: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status == SubmissionStatus.ACCEPTED

    class Config:
        frozen = True


class ProcessingResult(BaseModel):
    """Outcome of processing one queued request"""
    status: ProcessingStatus
    customer_name: str
    floor: int
    room_id: Optional[int] = None
    check_in_day: Optional[int] = None
    nights: Optional[int] = None

    @property
    def confirmed(self) -> bool:
        return self.status == ProcessingStatus.CONFIRMED

    class Config:
        frozen = True


class BatchReport(BaseModel):
    """Outcome of one processing pass"""
    results: List[ProcessingResult] = []
    nothing_to_process: bool = False
    remaining: int = 0

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def confirmed(self) -> List[ProcessingResult]:
        return [r for r in self.results if r.confirmed]

    @property
    def failed(self) -> List[ProcessingResult]:
        return [r for r in self.results if not r.confirmed]

    class Config:
        frozen = True


class UndoResult(BaseModel):
    """Outcome of reverting the most recent commit"""
    status: UndoStatus
    customer_name: Optional[str] = None
    room_id: Optional[int] = None
    check_in_day: Optional[int] = None
    nights: Optional[int] = None
    warning: Optional[str] = None

    class Config:
        frozen = True


class CheckInResult(BaseModel):
    """Outcome of checking a guest in"""
    status: CheckInStatus
    customer_name: str
    room_id: Optional[int] = None
    floor: Optional[int] = None
    room_type: Optional[RoomType] = None
    nights: Optional[int] = None

    class Config:
        frozen = True
