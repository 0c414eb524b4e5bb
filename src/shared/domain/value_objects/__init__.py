"""
Value objects общего назначения.
"""

from src.shared.domain.value_objects.uuid_vo import InvalidUuidError, Uuid, is_valid_uuid

__all__ = [
    "Uuid",
    "InvalidUuidError",
    "is_valid_uuid",
]
