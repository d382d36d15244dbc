"""
JSON Schema Contract Validators

Модуль для валидации сырых записей диапазонов (mapping), поступающих
от вызывающего кода, согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- range.json            ({start, end} для set-algebra функций)
- range_definition.json ({start, end, options?} для is_in_any/all_range)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from numrange.core.numeric_domain import RangeValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'range')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема сама по себе невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            RangeValidationError: Если данные не соответствуют схеме
                (исходная jsonschema.ValidationError доступна как __cause__)
        """
        try:
            self.validator.validate(dict(data))
        except ValidationError as e:
            location = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise RangeValidationError(
                f"Invalid {self.schema_name} record at {location}: {e.message}"
            ) from e

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(dict(data))

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(dict(data))


class RangeRecordValidator(ContractValidator):
    """Валидатор для записи {start, end}."""

    def __init__(self):
        super().__init__("range")


class RangeDefinitionValidator(ContractValidator):
    """Валидатор для записи {start, end, options?}."""

    def __init__(self):
        super().__init__("range_definition")


_RANGE_VALIDATOR = RangeRecordValidator()
_RANGE_DEFINITION_VALIDATOR = RangeDefinitionValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_range_record(data: Mapping[str, Any]) -> None:
    """
    Валидация сырой записи диапазона.

    Raises:
        RangeValidationError: Если запись не соответствует схеме range
    """
    _RANGE_VALIDATOR.validate(data)


def validate_range_definition(data: Mapping[str, Any]) -> None:
    """
    Валидация сырой записи RangeDefinition.

    Raises:
        RangeValidationError: Если запись не соответствует схеме range_definition
    """
    _RANGE_DEFINITION_VALIDATOR.validate(data)
