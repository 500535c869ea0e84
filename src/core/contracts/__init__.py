"""
Contract Validation Module

Модуль для валидации JSON снимков записей леджера.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    SCHEMA_BY_KIND,
    CashStateValidator,
    ContractValidator,
    SchemaLoader,
    SurveyKeyStateValidator,
    SurveyRequestStateValidator,
    SurveyStateValidator,
    parse_state,
    validate_cash_state,
    validate_survey_key_state,
    validate_survey_request_state,
    validate_survey_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SurveyStateValidator",
    "SurveyKeyStateValidator",
    "SurveyRequestStateValidator",
    "CashStateValidator",
    # Functions
    "validate_survey_state",
    "validate_survey_key_state",
    "validate_survey_request_state",
    "validate_cash_state",
    "parse_state",
    "SCHEMA_BY_KIND",
    "DEFAULT_SCHEMA_DIR",
]
