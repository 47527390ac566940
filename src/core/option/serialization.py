"""
Serialization — Tagged-dict представление Option

Формат (контракт option.json):
- Nothing → {"kind": "nothing"}
- Some(v) → {"kind": "some", "value": <v>}

Pydantic модели в payload сериализуются через model_dump(mode="json").
Обратное преобразование проверяет данные по JSON Schema до сборки варианта.
"""

from typing import Any, Callable, Dict, Final, TypeVar

from pydantic import BaseModel

from src.core.contracts.validators import validate_option
from src.core.option.combinators import identity
from src.core.option.option import Nothing, Option, Some, fold

T = TypeVar("T")

KIND_NOTHING: Final[str] = "nothing"
KIND_SOME: Final[str] = "some"


def _dump_value(value: Any) -> Any:
    # вложенный Option тоже в tagged-dict форме
    if isinstance(value, (Some, Nothing)):
        return option_to_dict(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


def option_to_dict(opt: Option[Any]) -> Dict[str, Any]:
    """
    Option → tagged dict.

    Args:
        opt: Опциональное значение

    Returns:
        {"kind": "nothing"} или {"kind": "some", "value": ...}
    """
    return fold(
        opt,
        lambda: {"kind": KIND_NOTHING},
        lambda value: {"kind": KIND_SOME, "value": _dump_value(value)},
    )


def option_from_dict(
    data: Dict[str, Any],
    parse_value: Callable[[Any], T] = identity,
) -> Option[T]:
    """
    Tagged dict → Option.

    Args:
        data: Данные в формате option.json
        parse_value: Конвертер сырого payload (например, Point.model_validate)

    Returns:
        Nothing() или Some(parse_value(data["value"]))

    Raises:
        jsonschema.ValidationError: Если data не соответствует контракту
    """
    validate_option(data)

    if data["kind"] == KIND_SOME:
        return Some(parse_value(data["value"]))
    return Nothing()
