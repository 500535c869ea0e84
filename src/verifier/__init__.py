"""Verifier — верификатор транзакций survey-леджера.

- SurveyContract.verify: ровно одна команда + правила этой команды
- validate: то же для одной команды над входами/выходами/подписантами
- Первое нарушенное правило прерывает проверку
"""

from .errors import (
    AuthorizationViolation,
    ContractViolation,
    InvariantViolation,
    RuleViolation,
    StructuralError,
    ViolationKind,
    violation_to_exception,
)
from .survey_contract import (
    SurveyContract,
    SurveyContractConfig,
    VerificationResult,
    validate,
)

__all__ = [
    "SurveyContract",
    "SurveyContractConfig",
    "VerificationResult",
    "validate",
    "ViolationKind",
    "RuleViolation",
    "ContractViolation",
    "StructuralError",
    "InvariantViolation",
    "AuthorizationViolation",
    "violation_to_exception",
]
