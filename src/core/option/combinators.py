"""
Combinators — Структурные преобразования над Option

map_option сохраняет форму контейнера:
- Nothing → Nothing, функция не вызывается (short-circuit)
- Some(s) → Some(f(s)), функция вызывается ровно один раз

Законы функтора:
1. Identity: map_option(opt, identity) == opt
2. Composition: map_option(map_option(opt, f), g) == map_option(opt, compose(g, f))

Исключения из пользовательской функции не перехватываются
и не оборачиваются.
"""

from typing import Callable, TypeVar

from src.core.option.option import Nothing, Option, Some, fold

S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# БАЗОВЫЕ ФУНКЦИИ
# =============================================================================


def identity(x: T) -> T:
    return x


def compose(g: Callable[[T], U], f: Callable[[S], T]) -> Callable[[S], U]:
    """
    Композиция функций: compose(g, f)(x) == g(f(x)).

    Args:
        g: Внешняя функция (применяется второй)
        f: Внутренняя функция (применяется первой)

    Returns:
        Унарная функция x -> g(f(x))
    """

    def composed(x: S) -> U:
        return g(f(x))

    return composed


# =============================================================================
# MAP
# =============================================================================


def map_option(opt: Option[S], f: Callable[[S], T]) -> Option[T]:
    """
    Применение f к payload с сохранением варианта.

    Args:
        opt: Опциональное значение над S
        f: Унарная функция S -> T

    Returns:
        Новый Nothing для Nothing (f не вызывается),
        Some(f(s)) для Some(s) (f вызывается ровно один раз)

    Examples:
        >>> map_option(Some(5), lambda x: x + 1)
        Some(value=6)
        >>> map_option(Nothing(), lambda x: x + 1)
        Nothing()
    """
    return fold(opt, Nothing, lambda value: Some(f(value)))


# =============================================================================
# AND_THEN
# =============================================================================


def and_then(opt: Option[S], f: Callable[[S], Option[T]]) -> Option[T]:
    """
    Цепочка вычислений, каждое из которых может вернуть Nothing.

    Args:
        opt: Опциональное значение над S
        f: Функция S -> Option[T]

    Returns:
        Новый Nothing для Nothing (f не вызывается), f(s) для Some(s)

    Raises:
        TypeError: Если f вернула не Option
    """
    return fold(opt, Nothing, lambda value: _require_option(f(value)))


def _require_option(result: object) -> Option[T]:
    if not isinstance(result, (Some, Nothing)):
        raise TypeError(
            f"and_then function must return Some or Nothing, got {type(result).__name__}"
        )
    return result
