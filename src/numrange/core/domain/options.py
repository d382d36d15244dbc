"""
RangeOptions — Параметры проверки диапазона

Immutable Pydantic модель общих опций:
- exclusive: границы исключаются из containment/overlap/contains проверок
- strict: отсутствующие/невалидные границы вызывают ошибку вместо коэрции
- cache: разрешить мемоизацию (на результат не влияет)
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, StrictBool, ValidationError

from numrange.core.numeric_domain import RangeValidationError


class RangeOptions(BaseModel):
    """
    Опции проверки диапазона.

    Immutable модель (frozen=True). Неизвестные ключи запрещены,
    чтобы опечатка вида {"exlusive": True} не проходила молча.
    """

    exclusive: StrictBool = Field(default=False, description="Исключить границы")
    strict: StrictBool = Field(default=False, description="Строгая валидация границ")
    cache: StrictBool = Field(default=False, description="Мемоизация результата")

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def coerce(cls, options: "RangeOptions | Mapping[str, Any] | None") -> "RangeOptions":
        """
        Приведение пользовательского ввода к RangeOptions.

        Args:
            options: None, mapping или готовый экземпляр

        Returns:
            RangeOptions (для None: опции по умолчанию)

        Raises:
            RangeValidationError: Если mapping содержит неизвестные ключи
                или значения не bool
        """
        if options is None:
            return DEFAULT_OPTIONS
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise RangeValidationError(
                f"Options must be a mapping or RangeOptions, got {type(options).__name__}"
            )
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            raise RangeValidationError(f"Invalid range options: {e}") from e


DEFAULT_OPTIONS = RangeOptions()
