"""
Survey records — записи об обследованиях (surveys) в леджере

Immutable Pydantic модели трёх записей survey-домена:
- SurveyState: завершённый survey как торгуемый актив
- SurveyKeyState: хэш и ключ расшифровки, передаются после завершения survey
- SurveyRequestState: запрос покупателя к surveyor на проведение survey

Бизнес-инварианты цен (initial_price > 0, initial_price != resale_price)
здесь НЕ проверяются: это правила верификатора транзакций. Модель должна
позволять собрать некорректную запись, чтобы верификатор её отклонил.
"""

from typing import Literal

from pydantic import BaseModel, Field

from src.core.domain.identity import Party, UniqueIdentifier


# =============================================================================
# SURVEY STATE
# =============================================================================


class SurveyState(BaseModel):
    """
    Завершённый survey как торгуемый актив.

    При выпуске issuer == owner (surveyor держит survey сам до первой продажи).
    Каждая продажа создаёт новую ревизию с тем же linear_id.
    """

    kind: Literal["survey"] = "survey"

    issuer: Party = Field(..., description="Surveyor, выпустивший survey")
    owner: Party = Field(..., description="Текущий владелец")
    property_address: str = Field(..., min_length=1, description="Адрес объекта")
    land_title_id: str = Field(..., min_length=1, description="Идентификатор land title")
    survey_date: str = Field(..., min_length=1, description="Дата проведения survey")

    # Цены в минимальных единицах валюты (центы)
    initial_price: int = Field(..., description="Цена первичной продажи")
    resale_price: int = Field(..., description="Цена перепродажи")

    linear_id: UniqueIdentifier = Field(default_factory=UniqueIdentifier)

    model_config = {"frozen": True}

    @property
    def participants(self) -> list[Party]:
        """Участники, чьё согласие нужно для переходов: issuer и owner"""
        return [self.issuer, self.owner]

    def with_new_owner(self, new_owner: Party, resale_price: int | None = None) -> "SurveyState":
        """
        Следующая ревизия survey с новым владельцем.

        Args:
            new_owner: новый владелец
            resale_price: новая цена перепродажи (None → без изменений)

        Returns:
            Новый экземпляр SurveyState с тем же linear_id
        """
        update: dict = {"owner": new_owner}
        if resale_price is not None:
            update["resale_price"] = resale_price
        return self.model_copy(update=update)


# =============================================================================
# SURVEY KEY STATE
# =============================================================================


class SurveyKeyState(BaseModel):
    """
    Доказательство завершённого survey: хэш и ключ расшифровки.

    Чисто информационная запись, участников нет.
    """

    kind: Literal["survey_key"] = "survey_key"

    encoded_survey_hash: str = Field(..., min_length=1)
    encoded_survey_key: str = Field(..., min_length=1)
    linear_id: UniqueIdentifier = Field(default_factory=UniqueIdentifier)

    model_config = {"frozen": True}

    @property
    def participants(self) -> list[Party]:
        return []


# =============================================================================
# SURVEY REQUEST STATE
# =============================================================================


class SurveyRequestState(BaseModel):
    """
    Запрос на проведение survey по адресу за указанную цену.

    survey_price >= 0 проверяется вызывающей стороной при сборке
    транзакции (см. src.proposals), а не верификатором.
    """

    kind: Literal["survey_request"] = "survey_request"

    requester: Party = Field(..., description="Потенциальный покупатель")
    surveyor: Party = Field(..., description="Surveyor, к которому обращён запрос")
    property_address: str = Field(..., min_length=1)
    land_title_id: str = Field(..., min_length=1)
    survey_price: int = Field(..., description="Предлагаемая цена (минимальные единицы валюты)")
    linear_id: UniqueIdentifier = Field(default_factory=UniqueIdentifier)

    model_config = {"frozen": True}

    @property
    def participants(self) -> list[Party]:
        """Только requester"""
        return [self.requester]
