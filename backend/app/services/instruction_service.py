"""
Service métier pour les demandes d'instructions (séances de tutorat).

Aucune détection de chevauchement : deux demandes pour le même professeur
au même moment sont toutes deux enregistrées.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, PersistenceError
from app.models.instruction_session import STATUS_REQUESTED, InstructionSession
from app.models.user import User
from app.schemas.instruction_session import InstructionSessionCreate, InstructionSessionResponse

logger = logging.getLogger(__name__)


def schedule_session(
    db: Session,
    data: InstructionSessionCreate,
    student_email: Optional[str],
) -> InstructionSession:
    """
    Enregistre une demande de séance en statut REQUESTED pour l'élève authentifié.
    Retourne la ligne créée.

    Lève NotFoundError si aucun utilisateur ne correspond à l'email du jeton,
    PersistenceError si l'insertion échoue.
    """
    student = None
    if student_email:
        student = db.execute(
            select(User).where(User.email == student_email)
        ).scalars().first()
    if student is None:
        raise NotFoundError("Student not found.")

    session = InstructionSession(
        date_time=data.date,
        professor_id=data.professor_id,
        student_id=student.id,
        status=STATUS_REQUESTED,
    )
    db.add(session)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(
            "Échec d'enregistrement de la séance (élève %s, professeur %s) : %s",
            student.id, data.professor_id, exc,
        )
        raise PersistenceError(
            "An error occurred while scheduling the instruction session."
        ) from exc

    db.refresh(session)
    logger.info(
        "Séance demandée : élève %s, professeur %s, %s",
        student.id, data.professor_id, data.date.isoformat(),
    )
    return session


def get_instruction_sessions(db: Session) -> list[InstructionSessionResponse]:
    """Retourne toutes les séances (date et professeur uniquement)."""
    sessions = db.execute(select(InstructionSession)).scalars().all()
    return [InstructionSessionResponse.model_validate(s) for s in sessions]
