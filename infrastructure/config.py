"""Hotel configuration loaded from the environment"""
import os
from functools import lru_cache

from domain.value_objects import HotelConfig

# Defaults, overridable through HOTEL_* environment variables
HORIZON_DAYS = 30
FLOOR_COUNT = 5
ROOMS_PER_FLOOR = 10
BATCH_LIMIT = 10
LOG_LEVEL = "INFO"

ENV_PREFIX = "HOTEL_"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")


def get_log_level() -> str:
    return os.getenv(ENV_PREFIX + "LOG_LEVEL", LOG_LEVEL).upper()


@lru_cache(maxsize=1)
def get_settings() -> HotelConfig:
    """Build the hotel configuration once per process"""
    return HotelConfig(
        horizon_days=_env_int("HORIZON_DAYS", HORIZON_DAYS),
        floor_count=_env_int("FLOOR_COUNT", FLOOR_COUNT),
        rooms_per_floor=_env_int("ROOMS_PER_FLOOR", ROOMS_PER_FLOOR),
        batch_limit=_env_int("BATCH_LIMIT", BATCH_LIMIT),
    )
