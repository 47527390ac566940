"""
Contract Validation Module

Модуль для валидации JSON контрактов (point, option).
"""

from .validators import (
    OPTION_SCHEMA,
    POINT_SCHEMA,
    ContractValidator,
    OptionValidator,
    PointValidator,
    SchemaLoader,
    validate_option,
    validate_point,
)

__all__ = [
    # Schema names
    "POINT_SCHEMA",
    "OPTION_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PointValidator",
    "OptionValidator",
    # Functions
    "validate_point",
    "validate_option",
]
