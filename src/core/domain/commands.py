"""
Commands — намерение (intent) транзакции

Закрытое множество команд: IssueRequest, Issue, Trade, OracleCommand.
Каждая команда несёт literal-тег `kind`, объединение Command является discriminated
union, поэтому верификатор может перебрать варианты исчерпывающе.
"""

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, Field

from src.core.domain.identity import UniqueIdentifier


class IssueRequest(BaseModel):
    """Создание запроса на survey"""

    kind: Literal["issue_request"] = "issue_request"

    model_config = {"frozen": True}


class Issue(BaseModel):
    """Выпуск нового survey"""

    kind: Literal["issue"] = "issue"

    model_config = {"frozen": True}


class Trade(BaseModel):
    """Продажа survey за cash"""

    kind: Literal["trade"] = "trade"

    model_config = {"frozen": True}


class OracleCommand(BaseModel):
    """Команда oracle, адресованная линейной записи"""

    kind: Literal["oracle"] = "oracle"

    linear_id: UniqueIdentifier = Field(..., description="Целевой linear_id")

    model_config = {"frozen": True}


Command = Annotated[
    Union[IssueRequest, Issue, Trade, OracleCommand],
    Field(discriminator="kind"),
]


class CommandWithSigners(BaseModel):
    """Команда вместе с ключами участников, подписавших транзакцию"""

    value: Command
    signers: frozenset[str] = Field(default_factory=frozenset)

    model_config = {"frozen": True}


def signer_keys(signers: Iterable[str]) -> frozenset[str]:
    """
    Коллекция ключей подписантов → frozenset.

    Raises:
        TypeError: Если передана одна строка вместо коллекции ключей
    """
    if isinstance(signers, str):
        raise TypeError(f"signers must be a collection of keys, got str {signers!r}")
    return frozenset(signers)
