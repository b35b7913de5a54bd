"""
Identité de l'appelant : décodage du jeton JWT Bearer.
Les jetons sont émis par le fournisseur d'identité avec le même secret ;
seule la revendication email est utilisée par l'API.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import settings

logger = logging.getLogger(__name__)

security = HTTPBearer()


def create_access_token(email: str, expires_minutes: Optional[int] = None) -> str:
    """Émet un jeton portant l'email en `sub` et en `email`."""
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": email, "email": email, "iat": now, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def get_current_user_email(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    """
    Dépendance FastAPI — retourne l'email de l'appelant authentifié.
    401 si le jeton est invalide, expiré ou sans email.
    """
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError as exc:
        logger.info("Jeton refusé : %s", exc)
        raise HTTPException(status_code=401, detail="Invalid token") from exc

    email = payload.get("email") or payload.get("sub")
    if not email:
        raise HTTPException(status_code=401, detail="Invalid token subject")
    return email
