"""Trade: правила продажи survey за cash

Транзакция потребляет текущую ревизию survey и cash покупателя,
создаёт новую ревизию survey (владелец: покупатель) и cash продавцу.

Порядок проверок (первое нарушение прерывает проверку):
1. Два входа и два выхода
2. Ровно один SurveyState и один CashState среди входов и среди выходов
3. output_survey.resale_price > 0
4. input_survey.resale_price > input_survey.initial_price
5. input_cash.quantity > input_survey.initial_price
6. output_cash.quantity == input_survey.resale_price
7. input_cash.owner == output_survey.owner (кто заплатил, тот получил survey)
8. input_survey.owner == output_cash.owner (кто продал, тот получил cash)
9. input_survey.owner != output_survey.owner (продажа самому себе запрещена)
10. Подписи всех участников input_survey и input_cash

Разница между input_cash и resale_price является сдачей, её учитывает
cash sub-ledger, здесь она не проверяется.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.cash import CashState
from src.core.domain.identity import participant_keys
from src.core.domain.survey import SurveyState
from src.core.domain.transaction import LedgerTransaction
from src.verifier.errors import RuleViolation, ViolationKind


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TradeRulesResult:
    """Результат проверки правил Trade."""

    accepted: bool
    violation: Optional[RuleViolation]

    # Разобранные записи (None, если структура не позволила их выделить)
    input_survey: Optional[SurveyState]
    output_survey: Optional[SurveyState]
    input_cash: Optional[CashState]
    output_cash: Optional[CashState]

    details: str


# =============================================================================
# RULES
# =============================================================================


class TradeRules:
    """Правила транзакции Trade (stateless)."""

    def evaluate(self, tx: LedgerTransaction, signers: frozenset[str]) -> TradeRulesResult:
        """Проверка транзакции продажи.

        Args:
            tx: предложение транзакции
            signers: ключи подписантов команды

        Returns:
            TradeRulesResult с первым нарушенным правилом или accepted=True
        """
        # 1. Кардинальность
        if len(tx.inputs) != 2:
            return self._structural(
                "trade_two_inputs",
                "There should be two input states.",
                details=f"inputs={len(tx.inputs)}",
            )

        if len(tx.outputs) != 2:
            return self._structural(
                "trade_two_outputs",
                "There should be two output states.",
                details=f"outputs={len(tx.outputs)}",
            )

        # 2. Состав по типам
        input_kinds = tx.input_kinds()
        if input_kinds["survey"] != 1 or input_kinds["cash"] != 1:
            return self._structural(
                "trade_input_composition",
                "Inputs must be exactly one survey and one cash state.",
                details=f"input kinds={dict(input_kinds)}",
            )

        output_kinds = tx.output_kinds()
        if output_kinds["survey"] != 1 or output_kinds["cash"] != 1:
            return self._structural(
                "trade_output_composition",
                "Outputs must be exactly one survey and one cash state.",
                details=f"output kinds={dict(output_kinds)}",
            )

        input_survey = tx.inputs_of_type(SurveyState)[0]
        output_survey = tx.outputs_of_type(SurveyState)[0]
        input_cash = tx.inputs_of_type(CashState)[0]
        output_cash = tx.outputs_of_type(CashState)[0]

        def reject(kind: ViolationKind, rule: str, message: str, details: str) -> TradeRulesResult:
            return TradeRulesResult(
                accepted=False,
                violation=RuleViolation(kind=kind, rule=rule, message=message),
                input_survey=input_survey,
                output_survey=output_survey,
                input_cash=input_cash,
                output_cash=output_cash,
                details=details,
            )

        # 3-4. Цены survey
        if output_survey.resale_price <= 0:
            return reject(
                ViolationKind.INVARIANT,
                "trade_resale_price_positive",
                "Resale price should be positive.",
                f"output resale_price={output_survey.resale_price}",
            )

        if input_survey.resale_price <= input_survey.initial_price:
            return reject(
                ViolationKind.INVARIANT,
                "trade_resale_above_initial",
                "Resale price should be greater than the initial price.",
                f"input resale_price={input_survey.resale_price}, "
                f"initial_price={input_survey.initial_price}",
            )

        # 5-6. Cash
        if input_cash.quantity <= input_survey.initial_price:
            return reject(
                ViolationKind.INVARIANT,
                "trade_cash_covers_price",
                "Input cash should be more than the purchasing price.",
                f"input cash={input_cash.quantity}, initial_price={input_survey.initial_price}",
            )

        if output_cash.quantity != input_survey.resale_price:
            return reject(
                ViolationKind.INVARIANT,
                "trade_cash_equals_resale",
                "Output cash should be equal to the resale price.",
                f"output cash={output_cash.quantity}, resale_price={input_survey.resale_price}",
            )

        # 7-9. Смена владельцев
        if input_cash.owner != output_survey.owner:
            return reject(
                ViolationKind.INVARIANT,
                "trade_buyer_receives_survey",
                "The person who owns the cash initially, now owns the survey.",
                f"cash owner={input_cash.owner}, new survey owner={output_survey.owner}",
            )

        if input_survey.owner != output_cash.owner:
            return reject(
                ViolationKind.INVARIANT,
                "trade_seller_receives_cash",
                "The person who owns survey initially, now owns the cash.",
                f"survey owner={input_survey.owner}, cash recipient={output_cash.owner}",
            )

        if input_survey.owner == output_survey.owner:
            return reject(
                ViolationKind.INVARIANT,
                "trade_no_self_sale",
                "Cannot sell survey to yourself.",
                f"owner={input_survey.owner}",
            )

        # 10. Подписи
        missing = participant_keys(input_survey.participants) - signers
        if missing:
            return reject(
                ViolationKind.AUTHORIZATION,
                "trade_survey_participants_signed",
                "All of the survey participants must be signers.",
                f"missing={sorted(missing)}",
            )

        missing = participant_keys(input_cash.participants) - signers
        if missing:
            return reject(
                ViolationKind.AUTHORIZATION,
                "trade_cash_owner_signed",
                "The cash owner must be signer.",
                f"missing={sorted(missing)}",
            )

        return TradeRulesResult(
            accepted=True,
            violation=None,
            input_survey=input_survey,
            output_survey=output_survey,
            input_cash=input_cash,
            output_cash=output_cash,
            details=(
                f"PASS: survey {input_survey.linear_id} sold by {input_survey.owner} "
                f"to {output_survey.owner} for {output_cash.quantity}"
            ),
        )

    def _structural(self, rule: str, message: str, details: str) -> TradeRulesResult:
        return TradeRulesResult(
            accepted=False,
            violation=RuleViolation(kind=ViolationKind.STRUCTURAL, rule=rule, message=message),
            input_survey=None,
            output_survey=None,
            input_cash=None,
            output_cash=None,
            details=details,
        )
