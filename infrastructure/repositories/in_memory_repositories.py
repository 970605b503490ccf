"""In-Memory Repository Implementations"""
from collections import deque
from typing import Deque, Iterator, List, Optional

from domain.repositories import RoomIndex, RequestQueue, HistoryLedger
from domain.entities import Room, QueuedRequest, HistoryEntry


class _RoomNode:
    __slots__ = ("room", "left", "right")

    def __init__(self, room: Room):
        self.room = room
        self.left: Optional["_RoomNode"] = None
        self.right: Optional["_RoomNode"] = None


class BinaryTreeRoomIndex(RoomIndex):
    """Unbalanced binary search tree of rooms keyed by room id.

    Rooms are created in ascending id order, so the tree degenerates into a
    right-leaning chain. Traversals are iterative to stay clear of the
    recursion limit on large hotels.
    """

    def __init__(self):
        self._root: Optional[_RoomNode] = None
        self._size = 0

    def insert(self, room: Room) -> None:
        """Insert room: left if its id is smaller, right otherwise"""
        new_node = _RoomNode(room)
        if self._root is None:
            self._root = new_node
            self._size += 1
            return

        node = self._root
        while True:
            if room.room_id == node.room.room_id:
                raise ValueError(f"Room {room.room_id} already exists")
            if room.room_id < node.room.room_id:
                if node.left is None:
                    node.left = new_node
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    break
                node = node.right
        self._size += 1

    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        node = self._root
        while node is not None:
            if room_id == node.room.room_id:
                return node.room
            node = node.left if room_id < node.room.room_id else node.right
        return None

    def in_order(self) -> Iterator[Room]:
        """Iterate rooms left, self, right"""
        stack: List[_RoomNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.room
            node = node.right

    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path"""
        deepest = 0
        stack = [(self._root, 1)] if self._root else []
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest

    def __len__(self) -> int:
        return self._size


class ArrayRoomIndex(RoomIndex):
    """Flat list of rooms addressed by room id; ids are expected to be dense"""

    def __init__(self):
        self._slots: List[Optional[Room]] = []
        self._size = 0

    def insert(self, room: Room) -> None:
        """Store room at position room_id - 1"""
        position = room.room_id - 1
        if position < len(self._slots) and self._slots[position] is not None:
            raise ValueError(f"Room {room.room_id} already exists")
        if position >= len(self._slots):
            self._slots.extend([None] * (position + 1 - len(self._slots)))
        self._slots[position] = room
        self._size += 1

    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        if 1 <= room_id <= len(self._slots):
            return self._slots[room_id - 1]
        return None

    def in_order(self) -> Iterator[Room]:
        return (room for room in self._slots if room is not None)

    def __len__(self) -> int:
        return self._size


class InMemoryRequestQueue(RequestQueue):
    """In-memory implementation of RequestQueue"""

    def __init__(self):
        self._requests: Deque[QueuedRequest] = deque()

    def enqueue(self, request: QueuedRequest) -> None:
        """Append request at the tail"""
        self._requests.append(request)

    def dequeue(self) -> Optional[QueuedRequest]:
        """Remove request from the head"""
        if not self._requests:
            return None
        return self._requests.popleft()

    def peek_all(self) -> List[QueuedRequest]:
        return list(self._requests)

    def __len__(self) -> int:
        return len(self._requests)


class InMemoryHistoryLedger(HistoryLedger):
    """In-memory implementation of HistoryLedger"""

    def __init__(self):
        self._entries: List[HistoryEntry] = []

    def push(self, entry: HistoryEntry) -> None:
        """Place entry on top"""
        self._entries.append(entry)

    def pop(self) -> Optional[HistoryEntry]:
        """Remove entry from the top"""
        if not self._entries:
            return None
        return self._entries.pop()

    def peek_all(self) -> List[HistoryEntry]:
        return list(reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
