"""Issue: правила выпуска нового survey

Порядок проверок (первое нарушение прерывает проверку):
1. Ровно один выход, и это SurveyState
2. Ни одного входа (выпуск не потребляет прежних записей)
3. issuer == owner (surveyor держит survey сам)
4. Ключ issuer среди подписантов
5. initial_price > 0
6. initial_price != resale_price
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.survey import SurveyState
from src.core.domain.transaction import LedgerTransaction
from src.verifier.errors import RuleViolation, ViolationKind


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class IssueRulesResult:
    """Результат проверки правил Issue."""

    accepted: bool
    violation: Optional[RuleViolation]

    # Выпускаемый survey (None, если структура не позволила его выделить)
    output_survey: Optional[SurveyState]

    details: str


# =============================================================================
# RULES
# =============================================================================


class IssueRules:
    """Правила транзакции Issue (stateless)."""

    def evaluate(self, tx: LedgerTransaction, signers: frozenset[str]) -> IssueRulesResult:
        """Проверка транзакции выпуска.

        Args:
            tx: предложение транзакции
            signers: ключи подписантов команды

        Returns:
            IssueRulesResult с первым нарушенным правилом или accepted=True
        """
        # 1. Кардинальность и тип выхода
        if len(tx.outputs) != 1:
            return self._reject(
                ViolationKind.STRUCTURAL,
                "issue_single_output",
                "Only one output state should be created.",
                details=f"outputs={len(tx.outputs)}",
            )

        out = tx.outputs[0]
        if not isinstance(out, SurveyState):
            return self._reject(
                ViolationKind.STRUCTURAL,
                "issue_output_is_survey",
                "The output state must be a survey.",
                details=f"output kind={out.kind}",
            )

        # 2. Нет входов
        if tx.inputs:
            return self._reject(
                ViolationKind.STRUCTURAL,
                "issue_no_inputs",
                "No inputs should be consumed when issuing a survey.",
                output_survey=out,
                details=f"inputs={len(tx.inputs)}",
            )

        # 3. Self-held при выпуске
        if out.issuer != out.owner:
            return self._reject(
                ViolationKind.INVARIANT,
                "issue_issuer_is_owner",
                "The issuer and the owner must be the same entity.",
                output_survey=out,
                details=f"issuer={out.issuer}, owner={out.owner}",
            )

        # 4. Подпись issuer
        if out.issuer.owning_key not in signers:
            return self._reject(
                ViolationKind.AUTHORIZATION,
                "issue_issuer_signed",
                "Issuer must be the signer.",
                output_survey=out,
                details=f"issuer={out.issuer}",
            )

        # 5-6. Цены
        if out.initial_price <= 0:
            return self._reject(
                ViolationKind.INVARIANT,
                "issue_initial_price_positive",
                "The survey's initial price must be positive.",
                output_survey=out,
                details=f"initial_price={out.initial_price}",
            )

        if out.initial_price == out.resale_price:
            return self._reject(
                ViolationKind.INVARIANT,
                "issue_initial_differs_from_resale",
                "The initial price is equal to the resale price.",
                output_survey=out,
                details=f"initial_price=resale_price={out.initial_price}",
            )

        return IssueRulesResult(
            accepted=True,
            violation=None,
            output_survey=out,
            details=f"PASS: survey {out.linear_id} issued by {out.issuer}",
        )

    def _reject(
        self,
        kind: ViolationKind,
        rule: str,
        message: str,
        output_survey: Optional[SurveyState] = None,
        details: str = "",
    ) -> IssueRulesResult:
        return IssueRulesResult(
            accepted=False,
            violation=RuleViolation(kind=kind, rule=rule, message=message),
            output_survey=output_survey,
            details=details,
        )
