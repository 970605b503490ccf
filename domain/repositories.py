"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional

from domain.entities import Room, QueuedRequest, HistoryEntry
from domain.enums import RoomType


class RoomIndex(ABC):
    """Ordered collection of rooms keyed by room id"""

    @abstractmethod
    def insert(self, room: Room) -> None:
        """Add a room; ids must be unique"""
        pass

    @abstractmethod
    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        pass

    @abstractmethod
    def in_order(self) -> Iterator[Room]:
        """Iterate rooms in ascending id order"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def find_available(
        self,
        room_type: RoomType,
        floor: int,
        check_in_day: int,
        nights: int
    ) -> Optional[Room]:
        """Find the lowest-id ready room of that type on that floor free for the stay"""
        for room in self.in_order():
            if room.can_host(room_type, floor, check_in_day, nights):
                return room
        return None

    def for_each_on_floor(self, floor: int, visitor: Callable[[Room], None]) -> None:
        """Visit rooms on a floor in ascending id order"""
        for room in self.in_order():
            if room.floor == floor:
                visitor(room)


class RequestQueue(ABC):
    """FIFO queue of pending booking requests"""

    @abstractmethod
    def enqueue(self, request: QueuedRequest) -> None:
        pass

    @abstractmethod
    def dequeue(self) -> Optional[QueuedRequest]:
        """Remove and return the oldest request"""
        pass

    @abstractmethod
    def peek_all(self) -> List[QueuedRequest]:
        """Pending requests from head to tail"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0


class HistoryLedger(ABC):
    """LIFO stack of committed bookings"""

    @abstractmethod
    def push(self, entry: HistoryEntry) -> None:
        pass

    @abstractmethod
    def pop(self) -> Optional[HistoryEntry]:
        """Remove and return the most recent entry"""
        pass

    @abstractmethod
    def peek_all(self) -> List[HistoryEntry]:
        """Entries from most recent to oldest"""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0

    def find_latest(self, customer_name: str) -> Optional[HistoryEntry]:
        """Find the most recent entry for a customer"""
        for entry in self.peek_all():
            if entry.customer_name == customer_name:
                return entry
        return None
