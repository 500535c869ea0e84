"""
Proposal builders — сборка предложений транзакций

Чистые функции, собирающие LedgerTransaction так, как это делает слой
оркестрации, включая проверки на стороне вызывающего (например,
survey_price >= 0 для запроса), которые контракт не выполняет.

Сборка не заменяет верификацию: результат всё равно проходит SurveyContract.
"""

from typing import Iterable, Optional

from src.core.domain.cash import CashState
from src.core.domain.commands import (
    CommandWithSigners,
    Issue,
    IssueRequest,
    OracleCommand,
    Trade,
    signer_keys,
)
from src.core.domain.identity import Party, UniqueIdentifier, participant_keys
from src.core.domain.survey import SurveyKeyState, SurveyRequestState, SurveyState
from src.core.domain.transaction import LedgerTransaction


class ProposalError(ValueError):
    """Некорректные параметры предложения (ошибка вызывающего)"""
    pass


# =============================================================================
# REQUEST / ISSUE
# =============================================================================


def build_survey_request(
    requester: Party,
    surveyor: Party,
    property_address: str,
    land_title_id: str,
    survey_price: int,
) -> LedgerTransaction:
    """
    Запрос покупателя к surveyor на проведение survey.

    Args:
        requester: потенциальный покупатель (подписант)
        surveyor: surveyor
        property_address: адрес объекта
        land_title_id: идентификатор land title
        survey_price: предлагаемая цена

    Returns:
        LedgerTransaction с командой IssueRequest

    Raises:
        ProposalError: Если survey_price < 0
    """
    if survey_price < 0:
        raise ProposalError("Survey price cannot be less than zero.")

    request = SurveyRequestState(
        requester=requester,
        surveyor=surveyor,
        property_address=property_address,
        land_title_id=land_title_id,
        survey_price=survey_price,
    )
    return LedgerTransaction(
        outputs=(request,),
        commands=(CommandWithSigners(value=IssueRequest(), signers=frozenset({requester.owning_key})),),
    )


def build_survey_issuance(
    surveyor: Party,
    property_address: str,
    land_title_id: str,
    survey_date: str,
    price: int,
    resale_price: int,
    linear_id: Optional[UniqueIdentifier] = None,
) -> LedgerTransaction:
    """
    Выпуск survey: surveyor держит его сам до первой продажи.

    Raises:
        ProposalError: Если price < 0
    """
    if price < 0:
        raise ProposalError("Price cannot be less than zero.")

    survey = SurveyState(
        issuer=surveyor,
        owner=surveyor,
        property_address=property_address,
        land_title_id=land_title_id,
        survey_date=survey_date,
        initial_price=price,
        resale_price=resale_price,
        linear_id=linear_id or UniqueIdentifier(),
    )
    return LedgerTransaction(
        outputs=(survey,),
        commands=(CommandWithSigners(value=Issue(), signers=frozenset({surveyor.owning_key})),),
    )


def build_survey_key(
    encoded_survey_hash: str,
    encoded_survey_key: str,
    linear_id: Optional[UniqueIdentifier] = None,
) -> SurveyKeyState:
    """Хэш и ключ расшифровки, передаваемые покупателю после завершения survey."""
    return SurveyKeyState(
        encoded_survey_hash=encoded_survey_hash,
        encoded_survey_key=encoded_survey_key,
        linear_id=linear_id or UniqueIdentifier(),
    )


# =============================================================================
# TRADE
# =============================================================================


def build_trade(
    input_survey: SurveyState,
    input_cash: CashState,
    buyer: Party,
    new_resale_price: Optional[int] = None,
) -> LedgerTransaction:
    """
    Продажа survey покупателю.

    Выходы: новая ревизия survey (владелец buyer) и cash продавцу,
    равный resale_price входной ревизии. Подписанты: все участники
    входного survey и владелец cash.

    Args:
        input_survey: текущая ревизия survey
        input_cash: cash покупателя
        buyer: покупатель
        new_resale_price: resale_price новой ревизии (None → без изменений)

    Returns:
        LedgerTransaction с командой Trade

    Raises:
        ProposalError: Если cash не принадлежит покупателю
    """
    if input_cash.owner != buyer:
        raise ProposalError("The buyer must own the input cash.")

    output_survey = input_survey.with_new_owner(buyer, resale_price=new_resale_price)
    output_cash = CashState(
        owner=input_survey.owner,
        quantity=input_survey.resale_price,
        currency=input_cash.currency,
    )
    signers = participant_keys(input_survey.participants) | participant_keys(input_cash.participants)

    return LedgerTransaction(
        inputs=(input_survey, input_cash),
        outputs=(output_survey, output_cash),
        commands=(CommandWithSigners(value=Trade(), signers=signers),),
    )


# =============================================================================
# ORACLE
# =============================================================================


def build_oracle_command(linear_id: UniqueIdentifier, signers: Iterable[str]) -> LedgerTransaction:
    """Команда oracle, адресованная survey с указанным linear_id."""
    return LedgerTransaction(
        commands=(CommandWithSigners(value=OracleCommand(linear_id=linear_id), signers=signer_keys(signers)),),
    )
