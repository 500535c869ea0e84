"""
JSON Schema Contract Validators

Модуль для валидации снимков записей (record snapshots), приходящих от
слоя оркестрации в сериализованном виде, согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (schema/ рядом с модулем, устанавливаются как package data):
- survey_state.json
- survey_key_state.json
- survey_request_state.json
- cash_state.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import TypeAdapter

from src.core.domain.transaction import ContractState


# Схема для каждого значения тега kind
SCHEMA_BY_KIND: Dict[str, str] = {
    "survey": "survey_state",
    "survey_key": "survey_key_state",
    "survey_request": "survey_request_state",
    "cash": "cash_state",
}

DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога schema/ пакета src.core.contracts.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'survey_state')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()

_STATE_ADAPTER: TypeAdapter = TypeAdapter(ContractState)


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(
            self.schema, format_checker=Draft202012Validator.FORMAT_CHECKER
        )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class SurveyStateValidator(ContractValidator):
    def __init__(self):
        super().__init__("survey_state")


class SurveyKeyStateValidator(ContractValidator):
    def __init__(self):
        super().__init__("survey_key_state")


class SurveyRequestStateValidator(ContractValidator):
    def __init__(self):
        super().__init__("survey_request_state")


class CashStateValidator(ContractValidator):
    def __init__(self):
        super().__init__("cash_state")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_survey_state(data: Dict[str, Any]) -> None:
    """
    Валидация снимка survey_state.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    SurveyStateValidator().validate(data)


def validate_survey_key_state(data: Dict[str, Any]) -> None:
    SurveyKeyStateValidator().validate(data)


def validate_survey_request_state(data: Dict[str, Any]) -> None:
    SurveyRequestStateValidator().validate(data)


def validate_cash_state(data: Dict[str, Any]) -> None:
    CashStateValidator().validate(data)


def parse_state(data: Dict[str, Any]) -> ContractState:
    """
    Снимок записи → доменная модель.

    Схема выбирается по тегу kind; после успешной проверки схемы
    данные собираются в соответствующую Pydantic модель.

    Args:
        data: Сериализованная запись (dict)

    Returns:
        SurveyState | SurveyKeyState | SurveyRequestState | CashState

    Raises:
        ValueError: Если kind отсутствует или неизвестен
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    kind = data.get("kind")
    if kind not in SCHEMA_BY_KIND:
        raise ValueError(f"Unknown record kind: {kind!r}")

    ContractValidator(SCHEMA_BY_KIND[kind]).validate(data)
    return _STATE_ADAPTER.validate_python(data)
