"""
Schémas Pydantic pour les matières et les professeurs qui les enseignent.
Les corps de requête acceptent les clés en PascalCase (Title, Url, ...)
comme en minuscules ; les réponses sont sérialisées en camelCase.
"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class SubjectCreate(BaseModel):
    title: str = Field(validation_alias=AliasChoices("Title", "title"))
    url: str = Field(validation_alias=AliasChoices("Url", "url"))
    description: str = Field(validation_alias=AliasChoices("Description", "description"))

    @field_validator("title", "url", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field is required.")
        return v


class SubjectResponse(BaseModel):
    title: str
    url: str
    description: str

    model_config = {"from_attributes": True}


class ProfessorResponse(BaseModel):
    """Projection publique d'un utilisateur enseignant une matière (sans mot de passe)."""
    id: int
    name: str
    surname: str
    email: str
    profile_picture_url: Optional[str] = None
    subjects: str
    instructions_count: Optional[int] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class SubjectDetailResponse(BaseModel):
    success: bool = True
    subject: SubjectResponse
    professors: List[ProfessorResponse]
    message: str = "Subject found."


class SubjectListResponse(BaseModel):
    success: bool = True
    subjects: List[SubjectResponse]
