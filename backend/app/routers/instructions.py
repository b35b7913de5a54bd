"""
Router pour les demandes d'instructions (séances de tutorat).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth import get_current_user_email
from app.database import get_db
from app.exceptions import NotFoundError, PersistenceError, error_response
from app.schemas.common import MessageResponse
from app.schemas.instruction_session import InstructionSessionCreate, InstructionSessionListResponse
from app.services import instruction_service

router = APIRouter(prefix="/api/instructions", tags=["Instructions"])


@router.post(
    "",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse}, 500: {"model": MessageResponse}},
    summary="Demander une séance",
)
def schedule_session(
    data: InstructionSessionCreate,
    db: Session = Depends(get_db),
    email: str = Depends(get_current_user_email),
):
    """
    Enregistre une demande de séance pour l'élève authentifié avec le professeur choisi.
    L'élève est retrouvé via l'email du jeton.
    """
    try:
        instruction_service.schedule_session(db, data, email)
    except NotFoundError as e:
        return error_response(404, str(e))
    except PersistenceError as e:
        return error_response(500, str(e))
    return MessageResponse(success=True, message="Instruction session scheduled successfully.")


@router.get(
    "",
    response_model=InstructionSessionListResponse,
    dependencies=[Depends(get_current_user_email)],
    summary="Lister les séances",
)
def list_sessions(db: Session = Depends(get_db)):
    """Retourne toutes les séances demandées (date et professeur)."""
    return InstructionSessionListResponse(
        instruction_sessions=instruction_service.get_instruction_sessions(db)
    )
