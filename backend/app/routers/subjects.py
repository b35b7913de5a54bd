"""
Router pour les matières et la liste des professeurs qui les enseignent.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth import get_current_user_email
from app.database import get_db
from app.exceptions import PersistenceError, error_response
from app.schemas.common import MessageResponse
from app.schemas.subject import SubjectCreate, SubjectDetailResponse, SubjectListResponse
from app.services import subject_service

router = APIRouter(prefix="/api", tags=["Matières"])


@router.post(
    "/subject",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_user_email)],
    responses={409: {"model": MessageResponse}, 500: {"model": MessageResponse}},
    summary="Créer une matière",
)
def create_subject(data: SubjectCreate, db: Session = Depends(get_db)):
    """Crée une matière identifiée par son url (slug unique)."""
    try:
        subject_service.create_subject(db, data)
    except ValueError as e:
        return error_response(409, str(e))
    except PersistenceError as e:
        return error_response(500, str(e))
    return MessageResponse(success=True, message="Subject created successfully.")


@router.get(
    "/subject/{url}",
    response_model=SubjectDetailResponse,
    dependencies=[Depends(get_current_user_email)],
    responses={404: {"model": MessageResponse}},
    summary="Détail d'une matière avec ses professeurs",
)
def get_subject_by_url(url: str, db: Session = Depends(get_db)):
    """
    Retourne la matière et les professeurs dont le champ `subjects` contient l'url.
    Une matière sans professeur renvoie une liste vide, pas un 404.
    """
    result = subject_service.get_subject_by_url(db, url)
    if result is None:
        return error_response(404, "Subject not found.")
    return result


@router.get("/subjects", response_model=SubjectListResponse, summary="Lister les matières")
def list_subjects(db: Session = Depends(get_db)):
    """Liste publique de toutes les matières (sans authentification)."""
    return SubjectListResponse(subjects=subject_service.get_all_subjects(db))
