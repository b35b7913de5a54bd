"""
Parcours complets sur une base SQLite en mémoire :
création puis consultation d'une matière, demandes d'instructions.
"""

from app.auth import create_access_token
from app.models.user import User


def add_users(db):
    student = User(name="Ana", surname="Kovač", email="ana@student.hr", password="x")
    professor = User(
        name="Ivo", surname="Horvat", email="ivo@uni.hr", password="x",
        subjects="algebra,geometry", instructions_count=0,
    )
    db.add_all([student, professor])
    db.commit()
    return student, professor


def test_algebra_cree_puis_consultee(sqlite_client, auth_headers):
    response = sqlite_client.post(
        "/api/subject",
        json={"Title": "Algebra", "Url": "algebra", "Description": "Intro algebra"},
        headers=auth_headers,
    )
    assert response.status_code == 200

    response = sqlite_client.get("/api/subject/algebra", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["subject"] == {"title": "Algebra", "url": "algebra", "description": "Intro algebra"}
    assert data["professors"] == []


def test_matiere_avec_professeur(sqlite_client, db_session, auth_headers):
    _, professor = add_users(db_session)
    sqlite_client.post(
        "/api/subject",
        json={"Title": "Geometry", "Url": "geometry", "Description": "Shapes"},
        headers=auth_headers,
    )

    data = sqlite_client.get("/api/subject/geometry", headers=auth_headers).json()

    assert [p["id"] for p in data["professors"]] == [professor.id]
    assert "password" not in data["professors"][0]


def test_url_dupliquee_409(sqlite_client, auth_headers):
    body = {"Title": "Algebra", "Url": "algebra", "Description": "Intro algebra"}
    assert sqlite_client.post("/api/subject", json=body, headers=auth_headers).status_code == 200
    assert sqlite_client.post("/api/subject", json=body, headers=auth_headers).status_code == 409


def test_listes_vides(sqlite_client, auth_headers):
    assert sqlite_client.get("/api/subjects").json() == {"success": True, "subjects": []}
    assert sqlite_client.get("/api/instructions", headers=auth_headers).json() == {
        "success": True,
        "instructionSessions": [],
    }


def test_double_reservation_acceptee(sqlite_client, db_session, auth_headers):
    """Deux demandes identiques (même professeur, même heure) réussissent toutes les deux."""
    _, professor = add_users(db_session)
    body = {"Date": "2026-11-03T14:00:00", "ProfessorId": professor.id}

    first = sqlite_client.post("/api/instructions", json=body, headers=auth_headers)
    second = sqlite_client.post("/api/instructions", json=body, headers=auth_headers)

    assert first.status_code == 200
    assert second.status_code == 200
    sessions = sqlite_client.get("/api/instructions", headers=auth_headers).json()
    assert sessions["instructionSessions"] == [
        {"dateTime": "2026-11-03T14:00:00", "professorId": professor.id},
        {"dateTime": "2026-11-03T14:00:00", "professorId": professor.id},
    ]


def test_eleve_inconnu_404(sqlite_client, db_session):
    _, professor = add_users(db_session)
    headers = {"Authorization": f"Bearer {create_access_token('fantome@student.hr')}"}

    response = sqlite_client.post(
        "/api/instructions",
        json={"Date": "2026-11-03T14:00:00", "ProfessorId": professor.id},
        headers=headers,
    )

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Student not found."}


def test_date_avec_decalage_stockee_en_utc(sqlite_client, db_session, auth_headers):
    _, professor = add_users(db_session)
    body = {"Date": "2026-11-03T14:00:00+02:00", "ProfessorId": professor.id}

    assert sqlite_client.post("/api/instructions", json=body, headers=auth_headers).status_code == 200

    sessions = sqlite_client.get("/api/instructions", headers=auth_headers).json()
    assert sessions["instructionSessions"] == [
        {"dateTime": "2026-11-03T12:00:00", "professorId": professor.id},
    ]
