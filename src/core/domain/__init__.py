"""
Domain models and value objects.

Contains plain value types used as Option payloads.
"""

from src.core.domain.point import U32_MAX, Point, validate_coordinate

__all__ = [
    # Constants
    "U32_MAX",
    # Point model
    "Point",
    "validate_coordinate",
]
