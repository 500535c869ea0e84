"""Proposals — сборка предложений транзакций на стороне вызывающего."""

from .builders import (
    ProposalError,
    build_oracle_command,
    build_survey_issuance,
    build_survey_key,
    build_survey_request,
    build_trade,
)

__all__ = [
    "ProposalError",
    "build_survey_request",
    "build_survey_issuance",
    "build_survey_key",
    "build_trade",
    "build_oracle_command",
]
