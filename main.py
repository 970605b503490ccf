from fastapi import FastAPI, HTTPException, Depends, Query
from typing import List, Optional

from api.schemas import (
    # Bookings
    SubmitBookingRequest, SubmissionResponse, BatchReportResponse, ProcessingResultResponse,
    UndoResponse, CheckInRequest, CheckInResponse,
    # Reporting
    RoomResponse, QueueResponse, QueuedRequestResponse, HistoryEntryResponse
)
from api.dependencies import get_reservation_engine
from application.services import ReservationEngine
from domain.enums import RoomType, RoomStatus, RejectionReason, CheckInStatus
from infrastructure.logger import configure_logging

configure_logging()

app = FastAPI(
    title="Hotel Reservation Engine",
    description="Room inventory search, booking queues and undoable commits",
    version="1.0.0"
)

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check(engine: ReservationEngine = Depends(get_reservation_engine)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "message": "API is running",
        "config": engine.config.model_dump(),
        "pending_requests": engine.pending_count
    }

@app.get("/api/enums/room-type", tags=["Enum Reference"])
async def get_room_types():
    """Get all RoomType enum values"""
    return {
        "values": [item.name for item in RoomType],
        "description": "Room type values: SINGLE, DOUBLE, SUITE"
    }

@app.get("/api/enums/room-status", tags=["Enum Reference"])
async def get_room_statuses():
    """Get all RoomStatus enum values"""
    return {
        "values": [item.name for item in RoomStatus],
        "description": "Room status values: READY, BOOKED, OCCUPIED, UNAVAILABLE"
    }

# ============================================================================
# BOOKING ENDPOINTS
# ============================================================================

@app.post("/api/bookings", response_model=SubmissionResponse, status_code=201, tags=["Bookings"])
async def submit_booking(
    request: SubmitBookingRequest,
    engine: ReservationEngine = Depends(get_reservation_engine)
):
    """Submit a booking request into the priority or regular queue"""
    result = engine.submit(
        customer_name=request.customer_name,
        room_type=request.room_type,
        nights=request.nights,
        check_in_day=request.check_in_day,
        priority=request.priority,
        floor=request.floor
    )
    if result.reason == RejectionReason.INVALID_REQUEST:
        raise HTTPException(status_code=400, detail=result.detail)
    if result.reason == RejectionReason.NO_ROOM_AVAILABLE:
        raise HTTPException(status_code=409, detail=result.detail)
    return SubmissionResponse(
        status=result.status.value,
        customer_name=result.customer_name,
        room_id=result.room_id,
        floor=result.floor,
        room_type=result.room_type.value
    )

@app.post("/api/bookings/process", response_model=BatchReportResponse, tags=["Bookings"])
async def process_bookings(
    limit: Optional[int] = Query(None, ge=1),
    engine: ReservationEngine = Depends(get_reservation_engine)
):
    """Process queued booking requests, priority first"""
    try:
        report = engine.process_batch(limit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return BatchReportResponse(
        results=[
            ProcessingResultResponse(
                status=r.status.value,
                customer_name=r.customer_name,
                floor=r.floor,
                room_id=r.room_id,
                check_in_day=r.check_in_day,
                nights=r.nights
            )
            for r in report.results
        ],
        processed=report.processed,
        nothing_to_process=report.nothing_to_process,
        remaining=report.remaining
    )

@app.post("/api/bookings/undo", response_model=UndoResponse, tags=["Bookings"])
async def undo_last_booking(engine: ReservationEngine = Depends(get_reservation_engine)):
    """Cancel the most recent committed booking"""
    result = engine.undo_last()
    return UndoResponse(
        status=result.status.value,
        customer_name=result.customer_name,
        room_id=result.room_id,
        check_in_day=result.check_in_day,
        nights=result.nights,
        warning=result.warning
    )

@app.post("/api/check-in", response_model=CheckInResponse, tags=["Bookings"])
async def check_in_customer(
    request: CheckInRequest,
    engine: ReservationEngine = Depends(get_reservation_engine)
):
    """Check a customer into the room of their most recent booking"""
    result = engine.check_in(request.customer_name)
    if result.status == CheckInStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"No booking found for {request.customer_name}")
    if result.status == CheckInStatus.ALREADY_OCCUPIED:
        raise HTTPException(status_code=409, detail=f"Room {result.room_id} is already occupied")
    return CheckInResponse(
        status=result.status.value,
        customer_name=result.customer_name,
        room_id=result.room_id,
        floor=result.floor,
        room_type=result.room_type.value,
        nights=result.nights
    )

# ============================================================================
# REPORTING ENDPOINTS
# ============================================================================

@app.get("/api/rooms", response_model=List[RoomResponse], tags=["Rooms"])
async def list_rooms(engine: ReservationEngine = Depends(get_reservation_engine)):
    """List every room in id order"""
    return [_room_to_response(room) for room in engine.list_rooms_in_order()]

@app.get("/api/rooms/floor/{floor}", response_model=List[RoomResponse], tags=["Rooms"])
async def list_rooms_on_floor(floor: int, engine: ReservationEngine = Depends(get_reservation_engine)):
    """List rooms on one floor in id order"""
    return [_room_to_response(room) for room in engine.list_rooms_on_floor(floor)]

@app.get("/api/rooms/{room_id}", response_model=RoomResponse, tags=["Rooms"])
async def get_room(room_id: int, engine: ReservationEngine = Depends(get_reservation_engine)):
    """Get room by ID"""
    room = engine.get_room(room_id)
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return _room_to_response(room)

@app.get("/api/queue", response_model=QueueResponse, tags=["Bookings"])
async def list_queued_requests(engine: ReservationEngine = Depends(get_reservation_engine)):
    """List pending requests in both queues"""
    queued = engine.list_queued()
    return QueueResponse(
        priority=[_queued_to_response(r) for r in queued["priority"]],
        regular=[_queued_to_response(r) for r in queued["regular"]]
    )

@app.get("/api/history", response_model=List[HistoryEntryResponse], tags=["Bookings"])
async def list_history(engine: ReservationEngine = Depends(get_reservation_engine)):
    """List committed bookings, most recent first"""
    return [
        HistoryEntryResponse(
            entry_id=entry.entry_id,
            customer_name=entry.customer_name,
            room_id=entry.room_id,
            room_type=entry.room_type.value,
            check_in_day=entry.check_in_day,
            nights=entry.nights,
            committed_at=entry.committed_at
        )
        for entry in engine.list_history()
    ]

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _room_to_response(room) -> RoomResponse:
    """Convert Room entity to RoomResponse"""
    return RoomResponse(
        room_id=room.room_id,
        room_type=room.room_type.value,
        floor=room.floor,
        status=room.status.value,
        free_days=room.calendar.free_days(),
        calendar=list(room.calendar.slots)
    )

def _queued_to_response(request) -> QueuedRequestResponse:
    """Convert QueuedRequest entity to QueuedRequestResponse"""
    return QueuedRequestResponse(
        request_id=request.request_id,
        customer_name=request.intent.customer_name,
        room_type=request.intent.room_type.value,
        floor=request.intent.floor,
        check_in_day=request.intent.check_in_day,
        nights=request.intent.nights,
        priority=request.intent.priority,
        queued_at=request.queued_at
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
