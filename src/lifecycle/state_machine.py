"""Survey Lifecycle — состояния линейной записи survey.

Состояния: NON_EXISTENT → ISSUED → TRADED → TRADED → ...
- Issue: единственный переход NON_EXISTENT → ISSUED
- Trade: единственный переход ISSUED/TRADED → TRADED, ревизия + 1
- IssueRequest и OracleCommand состояние survey не меняют
- Терминального состояния нет: записи только вытесняются новыми ревизиями

Машина не хранит историю: текущее состояние и номер ревизии передаёт
вызывающий (vault / слой оркестрации).
"""

from dataclasses import dataclass
from enum import Enum

from src.core.domain.commands import Command, Issue, IssueRequest, OracleCommand, Trade


class SurveyLifecycleState(str, Enum):
    """Состояние линейной записи survey."""

    NON_EXISTENT = "NON_EXISTENT"
    ISSUED = "ISSUED"
    TRADED = "TRADED"


@dataclass(frozen=True)
class LifecycleTransitionResult:
    """Результат перехода состояния survey."""

    new_state: SurveyLifecycleState
    previous_state: SurveyLifecycleState

    # Номер ревизии после перехода (0: записи нет)
    revision: int

    transition_occurred: bool
    transition_reason: str

    details: str


class SurveyLifecycle:
    """State machine жизненного цикла survey (stateless)."""

    def evaluate_transition(
        self,
        current_state: SurveyLifecycleState,
        command: Command,
        revision: int = 0,
    ) -> LifecycleTransitionResult:
        """Оценка перехода для принятой транзакции.

        Args:
            current_state: текущее состояние записи
            command: команда принятой транзакции
            revision: текущий номер ревизии

        Returns:
            LifecycleTransitionResult
        """
        if isinstance(command, Issue):
            if current_state != SurveyLifecycleState.NON_EXISTENT:
                return self._no_transition(
                    current_state, revision, "already_issued",
                    f"Issue rejected: survey already {current_state.value}"
                )
            return LifecycleTransitionResult(
                new_state=SurveyLifecycleState.ISSUED,
                previous_state=current_state,
                revision=1,
                transition_occurred=True,
                transition_reason="issued",
                details="NON_EXISTENT → ISSUED",
            )

        if isinstance(command, Trade):
            if current_state == SurveyLifecycleState.NON_EXISTENT:
                return self._no_transition(
                    current_state, revision, "not_issued",
                    "Trade rejected: survey was never issued"
                )
            return LifecycleTransitionResult(
                new_state=SurveyLifecycleState.TRADED,
                previous_state=current_state,
                revision=revision + 1,
                transition_occurred=True,
                transition_reason="traded",
                details=f"{current_state.value} → TRADED, revision={revision + 1}",
            )

        if isinstance(command, (IssueRequest, OracleCommand)):
            return self._no_transition(
                current_state, revision, "no_survey_transition",
                f"{command.kind} does not change survey state"
            )

        raise ValueError(f"Unrecognised survey command: {type(command).__name__}")

    def _no_transition(
        self,
        current_state: SurveyLifecycleState,
        revision: int,
        reason: str,
        details: str,
    ) -> LifecycleTransitionResult:
        return LifecycleTransitionResult(
            new_state=current_state,
            previous_state=current_state,
            revision=revision,
            transition_occurred=False,
            transition_reason=reason,
            details=details,
        )
