"""
Cash — форма записи наличности из cash sub-ledger

Внутренний учёт cash sub-ledger (выпуск, сдача, слияние) здесь не
моделируется: верификатор читает только owner, quantity и participants.
"""

from typing import Literal

from pydantic import BaseModel, Field

from src.core.domain.identity import Party


class CashState(BaseModel):
    """Количество валюты во владении одного участника"""

    kind: Literal["cash"] = "cash"

    owner: Party = Field(..., description="Владелец наличности")
    quantity: int = Field(..., ge=0, description="Количество в минимальных единицах валюты")
    currency: str = Field("USD", min_length=3, max_length=3, description="ISO 4217 код валюты")

    model_config = {"frozen": True}

    @property
    def participants(self) -> list[Party]:
        return [self.owner]
