import pytest

from showcase.models import Project, ResumeEntry

pytestmark = pytest.mark.django_db


def test_list_projects_starts_empty(api_client):
    resp = api_client.get("/api/projects")

    assert resp.status_code == 200
    assert resp.json() == []


def test_create_project_returns_id(api_client, sample_project):
    resp = api_client.post("/api/projects", sample_project, format="json")

    assert resp.status_code == 200
    assert resp.json() == {"id": Project.objects.get().pk}


def test_project_round_trip_keeps_fields_unchanged(api_client, sample_project):
    new_id = api_client.post("/api/projects", sample_project, format="json").json()["id"]

    listed = api_client.get("/api/projects").json()
    assert listed == [dict(sample_project, id=new_id)]


def test_create_project_without_title_stores_null(api_client):
    new_id = api_client.post("/api/projects", {"description": "untitled"}, format="json").json()["id"]

    project = api_client.get("/api/projects").json()[0]
    assert project["id"] == new_id
    assert project["title"] is None
    assert project["description"] == "untitled"


def test_non_object_body_stores_empty_row(api_client):
    resp = api_client.post("/api/projects", [1, 2, 3], format="json")

    assert resp.status_code == 200
    assert Project.objects.get(pk=resp.json()["id"]).title is None


def test_delete_project(api_client, seeded):
    resp = api_client.delete(f"/api/projects/{seeded['featured']}")

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert [p["id"] for p in api_client.get("/api/projects").json()] == [seeded["web"]]


def test_delete_is_idempotent(api_client, seeded):
    url = f"/api/projects/{seeded['web']}"

    assert api_client.delete(url).json() == {"success": True}
    assert api_client.delete(url).json() == {"success": True}
    assert Project.objects.count() == 1


def test_delete_unknown_project_leaves_list_unchanged(api_client, seeded):
    before = api_client.get("/api/projects").json()

    resp = api_client.delete("/api/projects/424242")

    assert resp.json() == {"success": True}
    assert api_client.get("/api/projects").json() == before


@pytest.mark.parametrize("route", ["projects", "resume"])
@pytest.mark.parametrize("bad_id", ["-1", "abc", "99999999999999999999999"])
def test_delete_with_unmatched_id_still_succeeds(api_client, seeded, route, bad_id):
    resp = api_client.delete(f"/api/{route}/{bad_id}")

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert Project.objects.count() == 2
    assert ResumeEntry.objects.count() == 2


def test_resume_routes(api_client):
    entry = {
        "title": "Engineer", "company": "Acme", "duration": "2021 - now",
        "description": "Platform work.", "type": "experience",
    }
    new_id = api_client.post("/api/resume", entry, format="json").json()["id"]

    assert api_client.get("/api/resume").json() == [dict(entry, id=new_id)]
    assert api_client.delete(f"/api/resume/{new_id}").json() == {"success": True}
    assert ResumeEntry.objects.count() == 0


def test_resume_types_split_into_disjoint_groups(api_client, seeded):
    entries = api_client.get("/api/resume").json()

    experience = {e["id"] for e in entries if e["type"] == "experience"}
    education = {e["id"] for e in entries if e["type"] == "education"}
    assert experience.isdisjoint(education)
    assert experience | education == {e["id"] for e in entries}
    assert experience == {seeded["job"]}
    assert education == {seeded["degree"]}


def test_writes_need_no_token(api_client):
    resp = api_client.post("/api/resume", {"title": "Anonymous"}, format="json")

    assert resp.status_code == 200


def test_admin_login_accepts_default_password(api_client):
    resp = api_client.post("/api/admin/login", {"password": "admin123"}, format="json")

    assert resp.status_code == 200
    assert resp.json()["token"]


@pytest.mark.parametrize("body", [{"password": "admin"}, {"password": ""}, {}])
def test_admin_login_rejects_other_passwords(api_client, body):
    resp = api_client.post("/api/admin/login", body, format="json")

    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}


def test_admin_login_uses_configured_password(api_client, settings):
    settings.ADMIN_PASSWORD = "open sesame"
    settings.ADMIN_TOKEN = "static-token"

    rejected = api_client.post("/api/admin/login", {"password": "admin123"}, format="json")
    accepted = api_client.post("/api/admin/login", {"password": "open sesame"}, format="json")

    assert rejected.status_code == 401
    assert accepted.json() == {"token": "static-token"}


def test_rejected_login_is_logged(api_client, caplog):
    with caplog.at_level("WARNING", logger="showcase.views"):
        api_client.post("/api/admin/login", {"password": "nope"}, format="json")

    assert "Rejected admin login" in caplog.text
