"""SurveyContract — верификатор транзакций survey-леджера

Транзакция допустима, если:
1. В ней ровно одна команда
2. Набор правил этой команды не нарушен

Диспетчеризация по команде исчерпывающая:
- IssueRequest → правил нет
- Issue → IssueRules
- Trade → TradeRules
- OracleCommand → правил нет
- неизвестная команда → StructuralError

Верификатор является чистой функцией: нет изменяемого состояния, нет I/O,
одинаковые входы всегда дают одинаковый результат. Каждый участник
консенсуса запускает его независимо.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from src.core.domain.commands import (
    Command,
    CommandWithSigners,
    Issue,
    IssueRequest,
    OracleCommand,
    Trade,
    signer_keys,
)
from src.core.domain.transaction import ContractState, LedgerTransaction
from src.core.logging import get_logger
from src.verifier.errors import RuleViolation, ViolationKind, violation_to_exception
from src.verifier.rules import IssueRules, TradeRules


logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SurveyContractConfig:
    """Конфигурация верификатора."""

    contract_id: str = "com.survey.SurveyContract"

    # Принятые транзакции логируются на INFO вместо DEBUG
    log_accepted: bool = False


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class VerificationResult:
    """Результат верификации: accepted или первое нарушенное правило."""

    accepted: bool
    violation: Optional[RuleViolation]

    command_kind: Optional[str]

    details: str


# =============================================================================
# CONTRACT
# =============================================================================


class SurveyContract:
    """Контракт survey-леджера.

    Порядок проверок:
    1. Ровно одна команда
    2. Правила команды (первое нарушение прерывает проверку)
    """

    def __init__(self, config: Optional[SurveyContractConfig] = None):
        """
        Args:
            config: конфигурация (None → значения по умолчанию)
        """
        self.config = config or SurveyContractConfig()
        self._issue_rules = IssueRules()
        self._trade_rules = TradeRules()

    def verify(self, tx: LedgerTransaction) -> VerificationResult:
        """Верификация транзакции.

        Args:
            tx: полностью материализованное предложение транзакции

        Returns:
            VerificationResult
        """
        if len(tx.commands) != 1:
            result = VerificationResult(
                accepted=False,
                violation=RuleViolation(
                    kind=ViolationKind.STRUCTURAL,
                    rule="single_command",
                    message="Required exactly one survey command.",
                ),
                command_kind=None,
                details=f"commands={len(tx.commands)}",
            )
            self._log(result)
            return result

        command = tx.commands[0]
        result = self._dispatch(command.value, tx, command.signers)
        self._log(result)
        return result

    def require_valid(self, tx: LedgerTransaction) -> VerificationResult:
        """Верификация с исключением при нарушении.

        Raises:
            StructuralError | InvariantViolation | AuthorizationViolation
        """
        result = self.verify(tx)
        if not result.accepted:
            raise violation_to_exception(result.violation)
        return result

    def _dispatch(
        self,
        command: Command,
        tx: LedgerTransaction,
        signers: frozenset[str],
    ) -> VerificationResult:
        """Выбор набора правил по команде."""
        if isinstance(command, IssueRequest):
            # Запрос на survey не несёт правил на уровне контракта
            return self._accept(command, "PASS: issue_request (no contract rules)")

        if isinstance(command, Issue):
            rules_result = self._issue_rules.evaluate(tx, signers)
            return VerificationResult(
                accepted=rules_result.accepted,
                violation=rules_result.violation,
                command_kind=command.kind,
                details=rules_result.details,
            )

        if isinstance(command, Trade):
            rules_result = self._trade_rules.evaluate(tx, signers)
            return VerificationResult(
                accepted=rules_result.accepted,
                violation=rules_result.violation,
                command_kind=command.kind,
                details=rules_result.details,
            )

        if isinstance(command, OracleCommand):
            return self._accept(command, f"PASS: oracle command for {command.linear_id} (no contract rules)")

        # Failsafe: новый тип команды без ветки здесь не должен проходить молча
        return VerificationResult(
            accepted=False,
            violation=RuleViolation(
                kind=ViolationKind.STRUCTURAL,
                rule="unknown_command",
                message=f"Unrecognised survey command: {type(command).__name__}.",
            ),
            command_kind=getattr(command, "kind", None),
            details=f"command={command!r}",
        )

    def _accept(self, command: Command, details: str) -> VerificationResult:
        return VerificationResult(
            accepted=True,
            violation=None,
            command_kind=command.kind,
            details=details,
        )

    def _log(self, result: VerificationResult) -> None:
        if result.accepted:
            level = logging.INFO if self.config.log_accepted else logging.DEBUG
            logger.log(level, "%s accepted %s: %s", self.config.contract_id, result.command_kind, result.details)
            return

        logger.info(
            "%s rejected %s: %s",
            self.config.contract_id,
            result.command_kind,
            result.violation.message,
            extra={
                "rule": result.violation.rule,
                "violation_kind": result.violation.kind.value,
            },
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


_DEFAULT_CONTRACT = SurveyContract()


def validate(
    command: Command,
    inputs: Iterable[ContractState],
    outputs: Iterable[ContractState],
    signers: Iterable[str],
) -> VerificationResult:
    """
    Верификация одной команды над заданными входами/выходами.

    Args:
        command: намерение транзакции
        inputs: потребляемые записи
        outputs: создаваемые записи
        signers: ключи подписантов

    Returns:
        VerificationResult

    Raises:
        TypeError: Если signers является строкой, а не коллекцией ключей
    """
    tx = LedgerTransaction(
        inputs=tuple(inputs),
        outputs=tuple(outputs),
        commands=(CommandWithSigners(value=command, signers=signer_keys(signers)),),
    )
    return _DEFAULT_CONTRACT.verify(tx)
