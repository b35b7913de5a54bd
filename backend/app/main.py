"""
Point d'entrée principal de l'API InstructHub.
Démarrage : uvicorn app.main:app --reload
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

import app.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant les routers
from app.config import settings, validate_runtime_config
from app.database import Base, engine
from app.exceptions import error_response
from app.logging_config import setup_logging
from app.routers import instructions, subjects

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Crée les tables manquantes. Un échec est journalisé sans bloquer le démarrage."""
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Initialisation de la base impossible. Vérifier DATABASE_URL.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : configuration des logs et des tables."""
    setup_logging(settings.LOG_LEVEL)
    validate_runtime_config(settings)
    if settings.CREATE_TABLES:
        init_db()
    logger.info("API InstructHub démarrée (env=%s).", settings.ENV)
    yield


app = FastAPI(
    title="InstructHub API",
    description="API de matières et de demandes d'instructions entre élèves et professeurs",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    ms = int((time.time() - start) * 1000)
    logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
    return response


app.include_router(subjects.router)
app.include_router(instructions.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Erreurs HTTP levées par FastAPI (jeton refusé, route inconnue...) au format commun.
    Les en-têtes comme WWW-Authenticate sont conservés.
    """
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Corps invalide ou champ obligatoire manquant → 400 avec le détail par champ.
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = loc[-1] if loc else "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value."))
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation failed.", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées : la trace reste dans les logs,
    le client reçoit un message générique.
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "An unexpected error occurred."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "InstructHub API", "version": "0.1.0"}
