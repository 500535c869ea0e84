"""
Errors — таксономия нарушений правил верификации

Три вида нарушений:
- STRUCTURAL: число команд, кардинальность входов/выходов, состав типов
- INVARIANT: нарушено числовое или реляционное бизнес-правило
- AUTHORIZATION: обязательный подписант отсутствует

Ни одно нарушение не считается временным, все они являются ошибками сборки
транзакции на стороне вызывающего.
"""

from dataclasses import dataclass
from enum import Enum


class ViolationKind(str, Enum):
    """Вид нарушения"""

    STRUCTURAL = "structural"
    INVARIANT = "invariant"
    AUTHORIZATION = "authorization"


@dataclass(frozen=True)
class RuleViolation:
    """Первое нарушенное правило транзакции."""

    kind: ViolationKind
    rule: str  # стабильный snake_case идентификатор правила
    message: str  # отдаётся пользователю как есть


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(ValueError):
    """Базовое исключение: транзакция отклонена контрактом"""

    def __init__(self, violation: RuleViolation):
        super().__init__(violation.message)
        self.violation = violation

    @property
    def rule(self) -> str:
        return self.violation.rule


class StructuralError(ContractViolation):
    """Неверное число команд, входов/выходов или их типов"""
    pass


class InvariantViolation(ContractViolation):
    """Нарушено бизнес-правило (цена, владелец, self-trade)"""
    pass


class AuthorizationViolation(ContractViolation):
    """Отсутствует обязательная подпись"""
    pass


_EXCEPTION_BY_KIND = {
    ViolationKind.STRUCTURAL: StructuralError,
    ViolationKind.INVARIANT: InvariantViolation,
    ViolationKind.AUTHORIZATION: AuthorizationViolation,
}


def violation_to_exception(violation: RuleViolation) -> ContractViolation:
    """
    RuleViolation → исключение соответствующего вида.

    Args:
        violation: нарушение из VerificationResult

    Returns:
        StructuralError | InvariantViolation | AuthorizationViolation
    """
    return _EXCEPTION_BY_KIND[violation.kind](violation)
