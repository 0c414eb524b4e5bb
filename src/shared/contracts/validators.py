"""
Wire-контракты доменного слоя

Форма данных, которую получают внешние слои:
- fields_errors.json — EntityValidationError.to_dict() (поле → сообщения),
  например для HTTP 422
- category.json — Category.to_dict()

Проверка — jsonschema Draft 2020-12 с format checker.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


class SchemaLoader:
    """Кэширующий загрузчик схем из каталога (по умолчанию schema/ пакета)."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Нет файла схемы
            ValueError: Файл не является корректной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.exists():
            raise FileNotFoundError(f"Schema not found: {path}")
        schema = json.loads(path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_default_loader = SchemaLoader()


class ContractValidator:
    """Проверка данных против одной схемы."""

    schema_name: str = ""

    def __init__(self, schema_name: str | None = None, loader: SchemaLoader | None = None):
        self.schema_name = schema_name or self.schema_name
        self.schema = (loader or _default_loader).load_schema(self.schema_name)
        self._validator = Draft202012Validator(
            self.schema, format_checker=Draft202012Validator.FORMAT_CHECKER
        )

    def validate(self, data: Any) -> None:
        """Raises jsonschema.ValidationError на первом нарушении."""
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)


class FieldsErrorsValidator(ContractValidator):
    """Непустое отображение поле → непустой список непустых сообщений."""

    schema_name = "fields_errors"


class CategoryContractValidator(ContractValidator):
    schema_name = "category"


def validate_fields_errors(data: Dict[str, Any]) -> None:
    FieldsErrorsValidator().validate(data)


def validate_category(data: Dict[str, Any]) -> None:
    CategoryContractValidator().validate(data)
