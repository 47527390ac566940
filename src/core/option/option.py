"""
Option — Опциональное значение (tagged union из двух вариантов)

Option[T] находится ровно в одном из двух состояний:
- Nothing — значения нет, payload отсутствует
- Some(value) — ровно одно значение типа T

Оба варианта — frozen dataclasses: мутаций нет, любые преобразования
создают новый экземпляр. Извлечь значение из Nothing нельзя, вместо
этого используется исчерпывающий разбор через fold() или match.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Третьего состояния нет (fold отвергает любой другой объект)
2. Конструирование Some/Nothing никогда не падает
3. Ветвление по вариантам выполняется только через fold()
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


# =============================================================================
# ВАРИАНТЫ
# =============================================================================


@dataclass(frozen=True)
class Some(Generic[T]):
    """Вариант "значение есть". Владеет ровно одним payload."""

    value: T


@dataclass(frozen=True)
class Nothing(Generic[T]):
    """Вариант "значения нет". Все экземпляры равны между собой."""


Option = Union[Some[T], Nothing[T]]


# =============================================================================
# РАЗБОР ВАРИАНТОВ
# =============================================================================


def fold(
    opt: Option[T],
    on_nothing: Callable[[], R],
    on_some: Callable[[T], R],
) -> R:
    """
    Исчерпывающий разбор Option.

    Единственная точка ветвления по вариантам: обе ветки обязательны,
    default/fallthrough нет. Вызывается ровно одна из веток.

    Args:
        opt: Опциональное значение
        on_nothing: Вызывается без аргументов для Nothing
        on_some: Вызывается с payload для Some

    Returns:
        Результат вызванной ветки

    Raises:
        TypeError: Если opt не является ни Some, ни Nothing

    Examples:
        >>> fold(Some(2), lambda: 0, lambda v: v * 10)
        20
        >>> fold(Nothing(), lambda: 0, lambda v: v * 10)
        0
    """
    match opt:
        case Some(value):
            return on_some(value)
        case Nothing():
            return on_nothing()
        case _:
            raise TypeError(
                f"Expected Some or Nothing, got {type(opt).__name__}"
            )


def is_some(opt: Option[T]) -> bool:
    """True для Some, False для Nothing."""
    return fold(opt, lambda: False, lambda _: True)


def is_nothing(opt: Option[T]) -> bool:
    """True для Nothing, False для Some."""
    return fold(opt, lambda: True, lambda _: False)


def unwrap_or(opt: Option[T], default: T) -> T:
    """
    Значение из Some или default для Nothing.

    Безопасная альтернатива извлечению: fallback задаётся явно.

    Args:
        opt: Опциональное значение
        default: Значение для Nothing

    Returns:
        payload или default
    """
    return fold(opt, lambda: default, lambda value: value)


# =============================================================================
# МОСТ К None
# =============================================================================


def from_nullable(value: Optional[T]) -> Option[T]:
    """
    Конверсия nullable значения в Option.

    None → Nothing(), любое другое значение → Some(value).
    """
    if value is None:
        return Nothing()
    return Some(value)


def to_nullable(opt: Option[T]) -> Optional[T]:
    """
    Конверсия Option в nullable значение.

    Some(None) тоже даёт None: различие теряется.
    """
    return unwrap_or(opt, None)
