"""
JSON Schema Contract Validators

Валидация внешних конфигурационных данных (dict, JSON) против формальных
JSON Schema контрактов до построения pydantic-моделей.

Схемы (contracts/schema/):
- codec_options.json
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета (package data) в contracts/schema/.
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
            schema_name: Имя схемы без расширения (например, 'codec_options')

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

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидация данных против JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def collect_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения схемы сразу, отсортированные по JSON path.

        Returns:
            Список сообщений вида "$.partitions: -1 is less than the minimum of 0";
            пустой список, если данные валидны
        """
        errors = sorted(self.validator.iter_errors(data), key=lambda e: e.json_path)
        return [f"{error.json_path}: {error.message}" for error in errors]


class CodecOptionsValidator(ContractValidator):
    """Валидатор для codec_options контракта."""

    def __init__(self):
        super().__init__("codec_options")


_CODEC_OPTIONS_VALIDATOR = CodecOptionsValidator()


def validate_codec_options(data: Dict[str, Any]) -> List[str]:
    """Нарушения контракта codec_options (пустой список = валидно)."""
    return _CODEC_OPTIONS_VALIDATOR.collect_errors(data)
