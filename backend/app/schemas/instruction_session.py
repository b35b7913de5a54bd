"""
Schémas Pydantic pour les demandes d'instructions.
"""

from datetime import datetime, timezone
from typing import List

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class InstructionSessionCreate(BaseModel):
    """Corps de requête : date souhaitée et professeur choisi. L'élève vient du jeton."""
    date: datetime = Field(validation_alias=AliasChoices("Date", "date"))
    professor_id: int = Field(
        validation_alias=AliasChoices("ProfessorId", "professorId", "professor_id")
    )

    @field_validator("date")
    @classmethod
    def to_naive_utc(cls, v: datetime) -> datetime:
        """Une date avec décalage est convertie en UTC ; la colonne stocke de l'UTC sans fuseau."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class InstructionSessionResponse(BaseModel):
    """Vue publique d'une séance : ni l'élève ni le statut ne sont exposés."""
    date_time: datetime
    professor_id: int

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}


class InstructionSessionListResponse(BaseModel):
    success: bool = True
    instruction_sessions: List[InstructionSessionResponse]

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
