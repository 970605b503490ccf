"""API Dependencies - Engine wiring"""
import threading
from typing import Optional

from application.services import ReservationEngine
from infrastructure.config import get_settings

# One engine per process; the presentation layer holds the only reference
_engine: Optional[ReservationEngine] = None
_engine_lock = threading.Lock()


def get_reservation_engine() -> ReservationEngine:
    """Return the process-wide engine, building the hotel on first access"""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = ReservationEngine.create(get_settings())
    return _engine


def reset_reservation_engine() -> None:
    """Drop the current engine so the next request starts from an empty hotel"""
    global _engine
    with _engine_lock:
        _engine = None
