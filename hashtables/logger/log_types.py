from enum import Enum
from typing import Dict


class LogEvent(str, Enum):
    TABLE_CREATED = "table_created"
    TABLE_RESIZED = "table_resized"
    TABLE_CLEARED = "table_cleared"
    INVALID_CONFIG = "invalid_config"


class TableLog(Dict):
    event: LogEvent
    container: str
    capacity: int
    load_factor: float


class ResizeLog(Dict):
    event: LogEvent
    container: str
    old_capacity: int
    new_capacity: int
    size: int
    memory_rss: int


class ErrorLog(Dict):
    event: LogEvent
    container: str
    error: str
