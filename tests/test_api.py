import pytest

from slownik.exceptions import (
    ConflictException,
    InternalServerException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)
from slownik.submissions.dependencies import get_submission_service
from slownik.submissions.service import SubmissionService
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def _create_category(client, name="Górnictwo", slug="gornictwo"):
    response = client.post("/api/admin/categories", json={"name": name, "slug": slug})
    assert response.status_code == 201
    return response.json()["category"]


def _submission(category_id, **overrides):
    payload = {
        "sourceWord": "fajront",
        "targetWord": "koniec pracy",
        "categoryId": category_id,
        "exampleSentences": [{"sourceText": "Już fajront", "translatedText": "Już koniec pracy"}],
    }
    payload.update(overrides)
    return payload


def test_submission_approval_end_to_end(admin_client):
    category = _create_category(admin_client)

    created = admin_client.post("/api/submissions", json=_submission(category["id"]))
    assert created.status_code == 201
    body = created.json()
    assert body["success"] is True
    assert body["message"] == "Submission created successfully"

    pending = admin_client.get("/api/submissions", params={"status": "PENDING"}).json()
    assert pending["total"] == 1
    assert pending["submissions"][0]["status"] == "PENDING"
    assert pending["submissions"][0]["category"]["slug"] == "gornictwo"

    approved = admin_client.patch(
        f"/api/submissions/{body['submissionId']}",
        json={"action": "approve", "adminId": "admin-1"},
    )
    assert approved.status_code == 200
    assert approved.json()["message"] == "Submission approved and dictionary entry created"
    entry_id = approved.json()["entryId"]

    entry = admin_client.get("/api/dictionary/fajront").json()["entry"]
    assert entry["id"] == entry_id
    assert entry["slug"] == "fajront"
    assert entry["exampleSentences"] == [
        {"sourceText": "Już fajront", "translatedText": "Już koniec pracy", "context": None}
    ]

    admin_view = admin_client.get(f"/api/admin/entries/{entry_id}").json()["entry"]
    assert admin_view["status"] == "APPROVED"
    assert admin_view["approvedBy"] == "admin-1"
    assert len(admin_view["exampleSentences"]) == 1

    again = admin_client.patch(
        f"/api/submissions/{body['submissionId']}",
        json={"action": "reject", "adminId": "admin-2"},
    )
    assert again.status_code == 409


def test_reject_returns_closed_submission(admin_client):
    category = _create_category(admin_client)
    submission_id = admin_client.post("/api/submissions", json=_submission(category["id"])).json()["submissionId"]

    response = admin_client.patch(
        f"/api/submissions/{submission_id}",
        json={"action": "reject", "adminId": "admin-1", "reviewNotes": "Już jest"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Submission rejected"
    assert body["submission"]["status"] == "REJECTED"
    assert body["submission"]["reviewNotes"] == "Już jest"
    assert admin_client.get("/api/dictionary/fajront").status_code == 404


def test_duplicate_pending_submission_conflicts(admin_client):
    category = _create_category(admin_client)
    assert admin_client.post("/api/submissions", json=_submission(category["id"])).status_code == 201

    duplicate = admin_client.post(
        "/api/submissions",
        json=_submission(category["id"], sourceWord="FAJRONT", targetWord="Koniec Pracy"),
    )

    assert duplicate.status_code == 409
    assert duplicate.json() == {"error": "A similar submission is already pending review"}


def test_submission_validation(admin_client):
    category = _create_category(admin_client)

    no_examples = admin_client.post(
        "/api/submissions",
        json=_submission(category["id"], exampleSentences=[{"sourceText": "Już fajront", "translatedText": " "}]),
    )
    assert no_examples.status_code == 400
    assert no_examples.json() == {"error": "At least one example sentence is required"}

    unknown_category = admin_client.post("/api/submissions", json=_submission(category["id"] + 50))
    assert unknown_category.status_code == 400

    no_category = admin_client.post("/api/submissions", json=_submission(None))
    assert no_category.status_code == 400

    unknown_field = admin_client.post("/api/submissions", json=_submission(category["id"], isAdmin=True))
    assert unknown_field.status_code == 400
    assert "error" in unknown_field.json()


def test_submission_with_new_category_and_alternatives(admin_client):
    payload = _submission(None, targetWord="koniec pracy, fajrant", newCategoryName="Kolejnictwo")
    payload.pop("categoryId")
    submission_id = admin_client.post("/api/submissions", json=payload).json()["submissionId"]

    stored = admin_client.get("/api/submissions").json()["submissions"][0]
    assert stored["id"] == submission_id
    assert stored["targetWord"] == "koniec pracy"
    assert stored["category"]["slug"] == "kolejnictwo"
    assert stored["notes"].splitlines() == [
        "Propozycja nowej kategorii: Kolejnictwo",
        "Alternatywne tłumaczenia: fajrant",
    ]

    entry_id = admin_client.patch(
        f"/api/submissions/{submission_id}", json={"action": "approve", "adminId": "admin-1"}
    ).json()["entryId"]
    entry = admin_client.get(f"/api/admin/entries/{entry_id}").json()["entry"]
    assert entry["alternativeTranslations"] == ["fajrant"]

    results = admin_client.get("/api/search", params={"q": "fajrant"}).json()
    assert [result["id"] for result in results["results"]] == [entry_id]


@pytest.mark.parametrize("method, path", [
    ("get", "/api/admin/entries"),
    ("get", "/api/admin/stats"),
    ("get", "/api/submissions"),
    ("patch", "/api/submissions/1"),
    ("post", "/api/admin/categories"),
    ("delete", "/api/admin/parts-of-speech/1"),
])
def test_admin_routes_require_session(client, method, path):
    response = getattr(client, method)(path)
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_login_session_logout(client):
    assert client.get("/api/admin/session").json() == {"authenticated": False}

    blank = client.post("/api/admin/login", json={"email": " ", "password": ""})
    assert blank.status_code == 400

    wrong = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": "zle"})
    assert wrong.status_code == 401
    assert wrong.json() == {"error": "Nieprawidłowe dane logowania."}

    ok = client.post("/api/admin/login", json={"email": "  admin@example.COM ", "password": ADMIN_PASSWORD})
    assert ok.status_code == 200
    assert "ssm_admin_session" in ok.cookies
    assert client.get("/api/admin/session").json() == {"authenticated": True}
    assert client.get("/api/admin/stats").status_code == 200

    client.post("/api/admin/logout")
    assert client.get("/api/admin/session").json() == {"authenticated": False}
    assert client.get("/api/admin/stats").status_code == 401


def test_admin_entry_update_slug_conflict(admin_client):
    category = _create_category(admin_client)
    ids = []
    for word, translation in [("fajront", "koniec pracy"), ("pyrlik", "młotek")]:
        submission_id = admin_client.post(
            "/api/submissions", json=_submission(category["id"], sourceWord=word, targetWord=translation)
        ).json()["submissionId"]
        ids.append(admin_client.patch(
            f"/api/submissions/{submission_id}", json={"action": "approve", "adminId": "admin-1"}
        ).json()["entryId"])

    response = admin_client.patch(f"/api/admin/entries/{ids[1]}", json={
        "sourceWord": "pyrlik",
        "sourceLang": "SILESIAN",
        "targetWord": "młotek",
        "targetLang": "POLISH",
        "slug": "Fajront",
        "categoryId": category["id"],
        "status": "APPROVED",
    })

    assert response.status_code == 409
    assert response.json() == {"error": "Slug already in use. Choose a different one."}


def test_category_delete_guard_and_stats(admin_client):
    used = _create_category(admin_client)
    unused = _create_category(admin_client, name="Elektronika", slug="")
    assert unused["slug"] == "elektronika"

    submission_id = admin_client.post("/api/submissions", json=_submission(used["id"])).json()["submissionId"]
    admin_client.patch(f"/api/submissions/{submission_id}", json={"action": "approve", "adminId": "admin-1"})

    blocked = admin_client.delete(f"/api/admin/categories/{used['id']}")
    assert blocked.status_code == 409
    assert admin_client.delete(f"/api/admin/categories/{unused['id']}").json() == {"success": True}

    listing = admin_client.get("/api/admin/categories").json()["categories"]
    assert [(c["slug"], c["entryCount"]) for c in listing] == [("gornictwo", 1)]

    stats = admin_client.get("/api/admin/stats").json()
    assert stats == {"totalEntries": 1, "pendingSubmissions": 0, "approvedToday": 1, "rejectedToday": 0}


def test_public_reads(admin_client):
    category = _create_category(admin_client)
    submission_id = admin_client.post("/api/submissions", json=_submission(category["id"])).json()["submissionId"]
    admin_client.patch(f"/api/submissions/{submission_id}", json={"action": "approve", "adminId": "admin-1"})

    index = admin_client.get("/api/dictionary/index").json()
    assert index["total"] == 1
    assert index["letters"] == ["F"]

    featured = admin_client.get("/api/dictionary/featured").json()["entry"]
    assert featured["slug"] == "fajront"
    assert featured["exampleSentence"]["translatedText"] == "Już koniec pracy"

    assert admin_client.get("/api/dictionary/recent", params={"limit": 21}).status_code == 400
    assert len(admin_client.get("/api/dictionary/recent").json()["entries"]) == 1

    assert admin_client.get("/api/search").status_code == 400
    assert admin_client.get("/api/categories").json()["categories"][0]["slug"] == "gornictwo"
    assert admin_client.get("/api/dictionary/nie-ma-takiego").json() == {"error": "Entry not found"}


def test_submission_list_failure_is_an_internal_error(admin_client):
    class BrokenSubmissionService(SubmissionService):
        async def list_submissions(self, db, status=None, limit=None):
            raise RuntimeError("database went away")

    app = admin_client.app
    app.dependency_overrides[get_submission_service] = lambda: BrokenSubmissionService()
    try:
        response = admin_client.get("/api/submissions")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_generic_error_defaults_are_english():
    assert ValidationException().detail == "Invalid request data"
    assert NotFoundException().detail == "Resource not found"
    assert ConflictException().detail == "Conflict"
    assert UnauthorizedException().detail == "Unauthorized"
    assert InternalServerException().detail == "Internal server error"
