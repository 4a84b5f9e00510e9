"""Car storage adapters."""

from app.adapters.outbound.storage.local_car_storage import LocalCarStorage

__all__ = [
    "LocalCarStorage",
]
