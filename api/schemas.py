"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from datetime import datetime
from uuid import UUID
from typing import List, Optional

from domain.enums import RoomType


# ============================================================================
# BOOKING SCHEMAS
# ============================================================================

class SubmitBookingRequest(BaseModel):
    """Submit booking request DTO"""
    customer_name: str
    room_type: RoomType
    nights: int
    check_in_day: int
    priority: bool = False
    floor: int = 1


class SubmissionResponse(BaseModel):
    """Submission response DTO"""
    status: str
    customer_name: str
    reason: Optional[str] = None
    room_id: Optional[int] = None
    floor: Optional[int] = None
    room_type: Optional[str] = None
    detail: Optional[str] = None


class ProcessingResultResponse(BaseModel):
    """Single processed request DTO"""
    status: str
    customer_name: str
    floor: int
    room_id: Optional[int] = None
    check_in_day: Optional[int] = None
    nights: Optional[int] = None


class BatchReportResponse(BaseModel):
    """Batch processing response DTO"""
    results: List[ProcessingResultResponse]
    processed: int
    nothing_to_process: bool
    remaining: int


class UndoResponse(BaseModel):
    """Undo response DTO"""
    status: str
    customer_name: Optional[str] = None
    room_id: Optional[int] = None
    check_in_day: Optional[int] = None
    nights: Optional[int] = None
    warning: Optional[str] = None


class CheckInRequest(BaseModel):
    """Check-in request DTO"""
    customer_name: str = Field(min_length=1)


class CheckInResponse(BaseModel):
    """Check-in response DTO"""
    status: str
    customer_name: str
    room_id: int
    floor: int
    room_type: str
    nights: Optional[int] = None


# ============================================================================
# REPORTING SCHEMAS
# ============================================================================

class RoomResponse(BaseModel):
    """Room response DTO"""
    room_id: int
    room_type: str
    floor: int
    status: str
    free_days: int
    calendar: List[bool]


class QueuedRequestResponse(BaseModel):
    """Queued request response DTO"""
    request_id: UUID
    customer_name: str
    room_type: str
    floor: int
    check_in_day: int
    nights: int
    priority: bool
    queued_at: datetime


class QueueResponse(BaseModel):
    """Both request queues, head first"""
    priority: List[QueuedRequestResponse]
    regular: List[QueuedRequestResponse]


class HistoryEntryResponse(BaseModel):
    """History entry response DTO"""
    entry_id: UUID
    customer_name: str
    room_id: int
    room_type: str
    check_in_day: int
    nights: int
    committed_at: datetime
