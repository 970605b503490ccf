"""Domain Entities"""
from pydantic import BaseModel, Field
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import List

from domain.enums import RoomType, RoomStatus
from domain.value_objects import BookingIntent


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RoomCalendar(BaseModel):
    """Per-day occupancy of one room; True means the day is free"""

    slots: List[bool]

    class Config:
        from_attributes = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def empty(horizon_days: int) -> "RoomCalendar":
        """Create a calendar with every day free"""
        if horizon_days < 1:
            raise ValueError("Calendar horizon must be at least 1 day")
        return RoomCalendar(slots=[True] * horizon_days)

    @property
    def horizon_days(self) -> int:
        return len(self.slots)

    # ==================== QUERY METHODS ====================
    def is_available(self, check_in_day: int, nights: int) -> bool:
        """Check every day of the stay is free; out-of-horizon stays are never available"""
        if check_in_day < 0 or nights <= 0:
            return False
        if check_in_day + nights > self.horizon_days:
            return False
        return all(self.slots[check_in_day:check_in_day + nights])

    def is_held(self, day: int) -> bool:
        return not self.slots[day]

    def free_days(self) -> int:
        return sum(1 for slot in self.slots if slot)

    # ==================== MUTATION METHODS ====================
    def hold(self, check_in_day: int, nights: int) -> None:
        """Mark the stay as held. Availability is the caller's responsibility."""
        self._validate_range(check_in_day, nights)
        for day in range(check_in_day, check_in_day + nights):
            self.slots[day] = False

    def release(self, check_in_day: int, nights: int) -> None:
        """Free exactly the given stay"""
        self._validate_range(check_in_day, nights)
        for day in range(check_in_day, check_in_day + nights):
            self.slots[day] = True

    def _validate_range(self, check_in_day: int, nights: int) -> None:
        if check_in_day < 0 or nights <= 0 or check_in_day + nights > self.horizon_days:
            raise ValueError(
                f"Stay [{check_in_day}, {check_in_day + nights}) is outside the "
                f"{self.horizon_days}-day horizon"
            )


class Room(BaseModel):
    """Room Entity - identity, type and floor never change after creation"""

    room_id: int = Field(ge=1, frozen=True)
    room_type: RoomType = Field(frozen=True)
    floor: int = Field(ge=1, frozen=True)
    status: RoomStatus = RoomStatus.READY
    calendar: RoomCalendar

    class Config:
        from_attributes = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def create(room_id: int, room_type: RoomType, floor: int, horizon_days: int) -> "Room":
        """Create a ready room with an empty calendar"""
        return Room(
            room_id=room_id,
            room_type=room_type,
            floor=floor,
            status=RoomStatus.READY,
            calendar=RoomCalendar.empty(horizon_days)
        )

    # ==================== QUERY METHODS ====================
    def can_host(self, room_type: RoomType, floor: int, check_in_day: int, nights: int) -> bool:
        """Check the room matches the request and is free for the whole stay"""
        return (
            self.floor == floor
            and self.room_type == room_type
            and self.status == RoomStatus.READY
            and self.calendar.is_available(check_in_day, nights)
        )

    # ==================== STATE TRANSITION METHODS ====================
    def mark_booked(self) -> None:
        if self.status != RoomStatus.READY:
            raise ValueError(f"Cannot book room {self.room_id} with status {self.status.value}")
        self.status = RoomStatus.BOOKED

    def mark_occupied(self) -> None:
        if self.status in [RoomStatus.OCCUPIED, RoomStatus.UNAVAILABLE]:
            raise ValueError(f"Cannot occupy room {self.room_id} with status {self.status.value}")
        self.status = RoomStatus.OCCUPIED

    def mark_ready(self) -> None:
        if self.status == RoomStatus.UNAVAILABLE:
            raise ValueError(f"Room {self.room_id} is unavailable")
        self.status = RoomStatus.READY


class QueuedRequest(BaseModel):
    """A booking intent waiting in a request queue"""

    request_id: UUID = Field(default_factory=uuid4)
    intent: BookingIntent
    queued_at: datetime = Field(default_factory=_utcnow)

    class Config:
        from_attributes = True

    @property
    def customer_name(self) -> str:
        return self.intent.customer_name

    @property
    def is_priority(self) -> bool:
        return self.intent.priority


class HistoryEntry(BaseModel):
    """A committed booking, kept so it can be undone"""

    entry_id: UUID = Field(default_factory=uuid4)
    customer_name: str
    room_id: int
    room_type: RoomType
    check_in_day: int = Field(ge=0)
    nights: int = Field(gt=0)
    committed_at: datetime = Field(default_factory=_utcnow)

    class Config:
        from_attributes = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def record(request: QueuedRequest, room: Room) -> "HistoryEntry":
        """Create the history entry for a request committed to a room"""
        return HistoryEntry(
            customer_name=request.intent.customer_name,
            room_id=room.room_id,
            room_type=room.room_type,
            check_in_day=request.intent.check_in_day,
            nights=request.intent.nights
        )

    def covers(self, room_id: int, day: int) -> bool:
        return self.room_id == room_id and self.check_in_day <= day < self.check_in_day + self.nights
