"""
Identity — участники леджера и линейные идентификаторы

Party: разрешённая идентичность участника (имя + ключ подписи), равенство по ключу.
UniqueIdentifier: стабильный идентификатор, общий для всех ревизий одной записи.

Разрешение имён в ключи происходит снаружи (identity service);
здесь хранятся только уже разрешённые значения.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Party(BaseModel):
    """
    Участник леджера.

    Идентичность участника определяется ключом подписи: два legal name
    над одним owning_key считаются одним участником. Правила сравнивают
    owner/issuer напрямую, поэтому псевдоним не обходит проверку self-trade.
    """

    name: str = Field(..., min_length=1, description="Legal name (например, 'O=Surveyor,L=New York,C=US')")
    owning_key: str = Field(..., min_length=1, description="Ключ подписи участника")

    model_config = {"frozen": True}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Party):
            return NotImplemented
        return self.owning_key == other.owning_key

    def __hash__(self) -> int:
        return hash(self.owning_key)

    def __str__(self) -> str:
        return self.name


class UniqueIdentifier(BaseModel):
    """Линейный идентификатор записи (стабилен между ревизиями)"""

    id: UUID = Field(default_factory=uuid4, description="Уникальный UUID линейной записи")
    external_id: str | None = Field(None, description="Внешний идентификатор (опционально)")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        if self.external_id:
            return f"{self.external_id}_{self.id}"
        return str(self.id)


def participant_keys(participants: list[Party]) -> frozenset[str]:
    """
    Ключи подписи участников записи.

    Args:
        participants: список участников (record.participants)

    Returns:
        frozenset ключей
    """
    return frozenset(party.owning_key for party in participants)
