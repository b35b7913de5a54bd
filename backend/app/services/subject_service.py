"""
Service métier pour les matières : création, consultation par slug, liste.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import PersistenceError
from app.models.subject import Subject
from app.models.user import User
from app.schemas.subject import (
    ProfessorResponse,
    SubjectCreate,
    SubjectDetailResponse,
    SubjectResponse,
)

logger = logging.getLogger(__name__)


def create_subject(db: Session, data: SubjectCreate) -> SubjectResponse:
    """
    Crée une nouvelle matière.
    Lève une ValueError si l'url existe déjà, PersistenceError si l'écriture échoue.
    """
    subject = Subject(title=data.title, url=data.url, description=data.description)
    db.add(subject)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValueError(f"A subject with url '{data.url}' already exists.")
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec de création de la matière '%s' : %s", data.url, exc)
        raise PersistenceError("An error occurred while creating the subject.") from exc

    logger.info("Matière créée : %s", data.url)
    return SubjectResponse(title=data.title, url=data.url, description=data.description)


def get_subject_by_url(db: Session, url: str) -> Optional[SubjectDetailResponse]:
    """
    Retourne la matière dont l'url est exactement `url` avec ses professeurs,
    ou None si inexistante.
    """
    subject = db.execute(
        select(Subject).where(Subject.url == url)
    ).scalars().first()
    if subject is None:
        return None

    return SubjectDetailResponse(
        subject=SubjectResponse.model_validate(subject),
        professors=get_professors_for(db, url),
    )


def get_professors_for(db: Session, url: str) -> list[ProfessorResponse]:
    """
    Professeurs d'une matière : utilisateurs dont `subjects` contient `url`.

    Inclusion de sous-chaîne, pas d'égalité : "chem" correspond à "biochem".
    Le filtrage se fait en mémoire après chargement des utilisateurs ayant
    au moins une matière.
    """
    candidates = db.execute(
        select(User).where(User.subjects.is_not(None))
    ).scalars().all()

    return [
        _to_professor(user)
        for user in candidates
        if url in user.subjects
    ]


def get_all_subjects(db: Session) -> list[SubjectResponse]:
    """Retourne toutes les matières, sans filtre ni pagination."""
    subjects = db.execute(select(Subject)).scalars().all()
    return [SubjectResponse.model_validate(s) for s in subjects]


def _to_professor(user: User) -> ProfessorResponse:
    return ProfessorResponse(
        id=user.id,
        name=user.name,
        surname=user.surname,
        email=user.email,
        profile_picture_url=user.profile_picture,
        subjects=user.subjects,
        instructions_count=user.instructions_count,
    )
