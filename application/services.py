"""Application Services - Reservation use cases"""
import threading
from typing import Dict, List, Optional

from pydantic import ValidationError

from domain.repositories import RoomIndex, RequestQueue, HistoryLedger
from domain.entities import Room, QueuedRequest, HistoryEntry
from domain.enums import (
    RoomType, RoomStatus, SubmissionStatus, RejectionReason,
    ProcessingStatus, UndoStatus, CheckInStatus
)
from domain.value_objects import (
    HotelConfig, BookingIntent, SubmissionResult, ProcessingResult,
    BatchReport, UndoResult, CheckInResult
)
from infrastructure.repositories.in_memory_repositories import (
    BinaryTreeRoomIndex, InMemoryRequestQueue, InMemoryHistoryLedger
)
from infrastructure.logger import get_logger

logger = get_logger(__name__)


def build_inventory(config: HotelConfig, index: RoomIndex) -> RoomIndex:
    """Create every room of the hotel and insert it into the index.

    Each floor gets rooms_per_floor // 3 singles, the same number of doubles
    and the remainder as suites, with ids numbered 1..N across floors.
    """
    room_id = 1
    for floor in range(1, config.floor_count + 1):
        singles = config.rooms_per_floor // 3
        doubles = config.rooms_per_floor // 3
        suites = config.rooms_per_floor - singles - doubles

        for room_type, count in (
            (RoomType.SINGLE, singles),
            (RoomType.DOUBLE, doubles),
            (RoomType.SUITE, suites),
        ):
            for _ in range(count):
                index.insert(Room.create(room_id, room_type, floor, config.horizon_days))
                room_id += 1

    logger.info(
        "Built inventory of %d rooms on %d floors (%d-day horizon)",
        len(index), config.floor_count, config.horizon_days
    )
    return index


class ReservationEngine:
    """Accepts booking intents, commits them against room calendars and undoes them.

    Every public method runs under one lock, so the engine boundary is the
    only point of mutual exclusion between callers.
    """

    def __init__(self,
                 config: HotelConfig,
                 room_index: RoomIndex,
                 priority_queue: RequestQueue,
                 regular_queue: RequestQueue,
                 ledger: HistoryLedger):
        self.config = config
        self.room_index = room_index
        self.priority_queue = priority_queue
        self.regular_queue = regular_queue
        self.ledger = ledger
        self._lock = threading.RLock()

    @classmethod
    def create(cls, config: HotelConfig, room_index: Optional[RoomIndex] = None) -> "ReservationEngine":
        """Build an engine over a freshly populated hotel"""
        if room_index is None:
            room_index = BinaryTreeRoomIndex()
        build_inventory(config, room_index)
        return cls(
            config=config,
            room_index=room_index,
            priority_queue=InMemoryRequestQueue(),
            regular_queue=InMemoryRequestQueue(),
            ledger=InMemoryHistoryLedger()
        )

    # ==================== SUBMISSION ====================
    def submit(
        self,
        customer_name: str,
        room_type: RoomType,
        nights: int,
        check_in_day: int,
        priority: bool = False,
        floor: int = 1
    ) -> SubmissionResult:
        """Queue a booking intent if a matching room is currently free"""
        with self._lock:
            try:
                intent = BookingIntent(
                    customer_name=customer_name,
                    room_type=room_type,
                    floor=floor,
                    check_in_day=check_in_day,
                    nights=nights,
                    priority=priority
                )
                self._validate_against_hotel(intent)
            except (ValidationError, ValueError) as e:
                logger.warning("Rejected invalid booking request for %r: %s", customer_name, e)
                return SubmissionResult(
                    status=SubmissionStatus.REJECTED,
                    customer_name=str(customer_name),
                    reason=RejectionReason.INVALID_REQUEST,
                    detail=str(e)
                )

            room = self.room_index.find_available(
                intent.room_type, intent.floor, intent.check_in_day, intent.nights
            )
            if room is None:
                logger.warning(
                    "No %s room on floor %d for %s (day %d, %d nights)",
                    intent.room_type.value, intent.floor, intent.customer_name,
                    intent.check_in_day, intent.nights
                )
                return SubmissionResult(
                    status=SubmissionStatus.REJECTED,
                    customer_name=intent.customer_name,
                    reason=RejectionReason.NO_ROOM_AVAILABLE,
                    floor=intent.floor,
                    room_type=intent.room_type,
                    detail="No room available for the specified dates"
                )

            queue = self.priority_queue if intent.priority else self.regular_queue
            queue.enqueue(QueuedRequest(intent=intent))
            logger.info(
                "Queued %s request for %s (room %d available)",
                "priority" if intent.priority else "regular", intent.customer_name, room.room_id
            )
            return SubmissionResult(
                status=SubmissionStatus.ACCEPTED,
                customer_name=intent.customer_name,
                room_id=room.room_id,
                floor=room.floor,
                room_type=room.room_type
            )

    def _validate_against_hotel(self, intent: BookingIntent) -> None:
        horizon = self.config.horizon_days
        if intent.check_in_day >= horizon:
            raise ValueError(f"Check-in day must be between 0 and {horizon - 1}")
        if intent.check_out_day > horizon:
            raise ValueError(f"Stay must end within the {horizon}-day horizon")
        if intent.floor > self.config.floor_count:
            raise ValueError(f"Floor must be between 1 and {self.config.floor_count}")

    # ==================== PROCESSING ====================
    def process_batch(self, limit: Optional[int] = None) -> BatchReport:
        """Commit queued requests, priority queue first, up to limit requests"""
        if limit is None:
            limit = self.config.batch_limit
        if limit < 1:
            raise ValueError("Batch limit must be at least 1")

        with self._lock:
            if self.priority_queue.is_empty() and self.regular_queue.is_empty():
                logger.info("No booking requests to process")
                return BatchReport(results=[], nothing_to_process=True)

            results: List[ProcessingResult] = []
            while len(results) < limit:
                request = self.priority_queue.dequeue()
                if request is None:
                    request = self.regular_queue.dequeue()
                if request is None:
                    break
                results.append(self._commit(request))

            return BatchReport(
                results=results,
                nothing_to_process=False,
                remaining=len(self.priority_queue) + len(self.regular_queue)
            )

    def _commit(self, request: QueuedRequest) -> ProcessingResult:
        intent = request.intent
        room = self.room_index.find_available(
            intent.room_type, intent.floor, intent.check_in_day, intent.nights
        )
        if room is None:
            logger.warning(
                "Booking for %s on floor %d failed: room no longer available",
                intent.customer_name, intent.floor
            )
            return ProcessingResult(
                status=ProcessingStatus.FAILED,
                customer_name=intent.customer_name,
                floor=intent.floor
            )

        room.calendar.hold(intent.check_in_day, intent.nights)
        room.mark_booked()
        self.ledger.push(HistoryEntry.record(request, room))

        logger.info(
            "Confirmed room %d (floor %d) for %s: day %d, %d nights",
            room.room_id, room.floor, intent.customer_name, intent.check_in_day, intent.nights
        )
        return ProcessingResult(
            status=ProcessingStatus.CONFIRMED,
            customer_name=intent.customer_name,
            floor=room.floor,
            room_id=room.room_id,
            check_in_day=intent.check_in_day,
            nights=intent.nights
        )

    # ==================== UNDO ====================
    def undo_last(self) -> UndoResult:
        """Revert the most recent commit"""
        with self._lock:
            entry = self.ledger.pop()
            if entry is None:
                logger.info("Nothing to undo")
                return UndoResult(status=UndoStatus.EMPTY)

            warning = None
            room = self.room_index.find_by_id(entry.room_id)
            if room is None:
                warning = f"Room {entry.room_id} not found; history entry discarded"
                logger.warning(
                    "Undo for %s: room %d not found, entry discarded",
                    entry.customer_name, entry.room_id
                )
            else:
                room.calendar.release(entry.check_in_day, entry.nights)
                room.mark_ready()
                logger.info(
                    "Reverted booking for %s: room %d, %d nights",
                    entry.customer_name, entry.room_id, entry.nights
                )

            return UndoResult(
                status=UndoStatus.REVERTED,
                customer_name=entry.customer_name,
                room_id=entry.room_id,
                check_in_day=entry.check_in_day,
                nights=entry.nights,
                warning=warning
            )

    # ==================== CHECK-IN ====================
    def check_in(self, customer_name: str) -> CheckInResult:
        """Mark the room of the customer's most recent booking as occupied"""
        customer_name = customer_name.strip()
        with self._lock:
            entry = self.ledger.find_latest(customer_name) if customer_name else None
            room = self.room_index.find_by_id(entry.room_id) if entry is not None else None
            if entry is None or room is None:
                logger.warning("No booking found for %s", customer_name)
                return CheckInResult(status=CheckInStatus.NOT_FOUND, customer_name=customer_name)

            if room.status == RoomStatus.OCCUPIED:
                logger.warning("Room %d for %s is already occupied", room.room_id, customer_name)
                return CheckInResult(
                    status=CheckInStatus.ALREADY_OCCUPIED,
                    customer_name=customer_name,
                    room_id=room.room_id,
                    floor=room.floor,
                    room_type=room.room_type
                )

            room.mark_occupied()
            logger.info("Checked in %s to room %d", customer_name, room.room_id)
            return CheckInResult(
                status=CheckInStatus.SUCCESS,
                customer_name=customer_name,
                room_id=room.room_id,
                floor=room.floor,
                room_type=room.room_type,
                nights=entry.nights
            )

    # ==================== REPORTING ====================
    def get_room(self, room_id: int) -> Optional[Room]:
        with self._lock:
            room = self.room_index.find_by_id(room_id)
            return room.model_copy(deep=True) if room is not None else None

    def list_rooms_in_order(self) -> List[Room]:
        with self._lock:
            return [room.model_copy(deep=True) for room in self.room_index.in_order()]

    def list_rooms_on_floor(self, floor: int) -> List[Room]:
        with self._lock:
            rooms: List[Room] = []
            self.room_index.for_each_on_floor(floor, lambda room: rooms.append(room.model_copy(deep=True)))
            return rooms

    def list_queued(self) -> Dict[str, List[QueuedRequest]]:
        """Pending requests per queue, head first"""
        with self._lock:
            return {
                "priority": [r.model_copy() for r in self.priority_queue.peek_all()],
                "regular": [r.model_copy() for r in self.regular_queue.peek_all()]
            }

    def list_history(self) -> List[HistoryEntry]:
        """Committed bookings, most recent first"""
        with self._lock:
            return [entry.model_copy() for entry in self.ledger.peek_all()]

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self.priority_queue) + len(self.regular_queue)
