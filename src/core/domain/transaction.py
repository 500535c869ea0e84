"""
LedgerTransaction — полностью материализованное предложение транзакции

Входы (потребляемые записи), выходы (создаваемые записи) и команды
с подписантами. Входы и выходы: список с тегами (discriminated union по
`kind`), поэтому проверки состава сводятся к подсчёту тегов.
"""

from collections import Counter
from typing import Annotated, TypeVar, Union

from pydantic import BaseModel, Field

from src.core.domain.cash import CashState
from src.core.domain.commands import CommandWithSigners
from src.core.domain.survey import SurveyKeyState, SurveyRequestState, SurveyState


ContractState = Annotated[
    Union[SurveyState, SurveyKeyState, SurveyRequestState, CashState],
    Field(discriminator="kind"),
]

StateT = TypeVar("StateT", SurveyState, SurveyKeyState, SurveyRequestState, CashState)


class LedgerTransaction(BaseModel):
    """
    Предложение транзакции.

    Immutable модель (frozen=True): верификатор только классифицирует
    снимки записей и никогда их не изменяет.
    """

    inputs: tuple[ContractState, ...] = ()
    outputs: tuple[ContractState, ...] = ()
    commands: tuple[CommandWithSigners, ...] = ()

    model_config = {"frozen": True}

    def inputs_of_type(self, state_type: type[StateT]) -> list[StateT]:
        """Входы заданного типа (в исходном порядке)"""
        return [state for state in self.inputs if isinstance(state, state_type)]

    def outputs_of_type(self, state_type: type[StateT]) -> list[StateT]:
        """Выходы заданного типа (в исходном порядке)"""
        return [state for state in self.outputs if isinstance(state, state_type)]

    def input_kinds(self) -> Counter:
        """Количество входов по тегу kind"""
        return Counter(state.kind for state in self.inputs)

    def output_kinds(self) -> Counter:
        """Количество выходов по тегу kind"""
        return Counter(state.kind for state in self.outputs)
