"""
Tests de la gestion d'erreurs globale et du health check.
"""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from app.database import get_db
from app.main import app


def test_health_check(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_body_manquant_400(client, auth_headers):
    """Requête sans body → 400 au format commun."""
    response = client.post("/api/subject", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed."


def test_exception_inattendue_500_sans_trace():
    """Erreur non prévue côté service → 500 générique, aucun détail interne."""
    app.dependency_overrides[get_db] = lambda: MagicMock()
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            with patch("app.routers.subjects.subject_service.get_all_subjects") as mock:
                mock.side_effect = RuntimeError("connexion perdue vers db-01")
                response = c.get("/api/subjects")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "An unexpected error occurred."}
