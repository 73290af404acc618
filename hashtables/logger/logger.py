import json
import logging

from hashtables.config import LOGGER_NAME
from hashtables.logger.log_types import ErrorLog, LogEvent, ResizeLog, TableLog
from hashtables.memory import get_memory_usage

# Configured through hashtables.config.configure_logging
logger = logging.getLogger(LOGGER_NAME)


def log_table_event(event: LogEvent, container: str, capacity: int, load_factor: float):
    """Log a table lifecycle event (creation, clear)"""
    log_data: TableLog = {
        "event": event,
        "container": container,
        "capacity": capacity,
        "load_factor": load_factor
    }
    logger.debug(json.dumps(log_data))


def log_resize_event(container: str, old_capacity: int, new_capacity: int, size: int):
    """Log a capacity growth, with process memory when debugging"""
    log_data: ResizeLog = {
        "event": LogEvent.TABLE_RESIZED,
        "container": container,
        "old_capacity": old_capacity,
        "new_capacity": new_capacity,
        "size": size
    }
    if logger.isEnabledFor(logging.DEBUG):
        log_data["memory_rss"] = get_memory_usage()

    logger.info(json.dumps(log_data))


def log_error_event(event: LogEvent, container: str, error: str):
    """Log an error event"""
    log_data: ErrorLog = {
        "event": event,
        "container": container,
        "error": error
    }
    logger.error(json.dumps(log_data))
