"""
Point — Координата как пример полезной нагрузки Option

Immutable Pydantic модель: пара неотрицательных целых x, y
в диапазоне unsigned 32-bit.

Plain data: без identity, без мутаций после создания.
Все "изменения" создают новый экземпляр.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Верхняя граница координаты (u32)
U32_MAX: Final[int] = 2**32 - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_coordinate(value: int) -> None:
    """
    Проверка, что координата лежит в домене u32.

    Args:
        value: Значение координаты

    Raises:
        ValueError: Если значение не целое, отрицательное или больше U32_MAX
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Coordinate must be an integer, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Coordinate cannot be negative: {value}")

    if value > U32_MAX:
        raise ValueError(f"Coordinate {value} exceeds u32 maximum {U32_MAX}")


# =============================================================================
# POINT MODEL
# =============================================================================


class Point(BaseModel):
    """
    Координата (x, y).

    Immutable модель (frozen=True): равенство и hash по значению.
    """

    x: int = Field(..., ge=0, le=U32_MAX, description="Координата X (u32)")
    y: int = Field(..., ge=0, le=U32_MAX, description="Координата Y (u32)")

    model_config = {"frozen": True}

    @field_validator("x", "y", mode="before")
    @classmethod
    def validate_u32(cls, v: int) -> int:
        """
        Строгая проверка координаты до коэрсии pydantic.

        bool, str и float отвергаются, даже если их можно привести к int.
        """
        validate_coordinate(v)
        return v

    def swapped(self) -> "Point":
        """
        Новая точка с переставленными координатами.

        Returns:
            Экземпляр того же класса с x=self.y, y=self.x
        """
        return type(self)(x=self.y, y=self.x)
