"""
Erreurs métier levées par les services et traduites en réponses HTTP par les routers.
"""

from fastapi.responses import JSONResponse


class NotFoundError(Exception):
    """Ressource introuvable (404)."""


class PersistenceError(Exception):
    """L'écriture en base a échoué (500). Le message reste générique."""


def error_response(status_code: int, message: str) -> JSONResponse:
    """Réponse d'erreur au format commun {success: false, message}."""
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})
