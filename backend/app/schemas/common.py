"""
Enveloppes de réponse partagées par tous les endpoints.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Accusé de réception ou erreur : {success, message}."""
    success: bool
    message: str
