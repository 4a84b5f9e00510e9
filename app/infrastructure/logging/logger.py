"""Structured logger for observability."""

import logging
from typing import Any

from app.infrastructure.config.settings import settings

# Configure application logger with key=value structured format
_logger = logging.getLogger("dealership_car_manager")
_logger.setLevel(logging.DEBUG if settings.debug_mode else settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_operation(
    component: str,
    operation: str,
    level: int = logging.DEBUG,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a car management operation.

    Args:
        component: Component name (e.g., 'use_case', 'repository', 'storage')
        operation: Operation name (e.g., 'create_car', 'select_car')
        level: Log level (default: DEBUG)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "component": component,
        "operation": operation,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_bulk_transfer(
    operation: str,
    file: Any,
    cars_count: int,
    **kwargs: Any,
) -> None:
    """
    Log JSON/ZIP import or export.

    Args:
        operation: Operation name (e.g., 'export_json', 'import_zip')
        file: File read or written
        cars_count: Number of cars transferred
        **kwargs: Additional fields
    """
    log_operation(
        component="bulk_transfer",
        operation=operation,
        level=logging.INFO,
        file=str(file),
        cars_count=cars_count,
        **kwargs,
    )


logger = _logger
