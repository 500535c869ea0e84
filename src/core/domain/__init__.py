"""
Domain models and value objects.

Contains ledger records (SurveyState, SurveyKeyState, SurveyRequestState, CashState),
identities, commands and the transaction proposal.
"""

from src.core.domain.cash import CashState
from src.core.domain.commands import (
    Command,
    CommandWithSigners,
    Issue,
    IssueRequest,
    OracleCommand,
    Trade,
    signer_keys,
)
from src.core.domain.identity import Party, UniqueIdentifier, participant_keys
from src.core.domain.survey import SurveyKeyState, SurveyRequestState, SurveyState
from src.core.domain.transaction import ContractState, LedgerTransaction

__all__ = [
    # Identity
    "Party",
    "UniqueIdentifier",
    "participant_keys",
    # Records
    "SurveyState",
    "SurveyKeyState",
    "SurveyRequestState",
    "CashState",
    "ContractState",
    # Commands
    "Command",
    "CommandWithSigners",
    "IssueRequest",
    "Issue",
    "Trade",
    "OracleCommand",
    "signer_keys",
    # Transaction
    "LedgerTransaction",
]
