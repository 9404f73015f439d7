from __future__ import annotations


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


# Auth

def test_login_without_user_store_is_404(client):
    resp = client.post("/api/login", json={"email": "admin", "password": "admin"})
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "User database not found"


def test_login_bad_password_is_401(seeded_store, client):
    resp = client.post("/api/login", json={"email": "admin", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid credentials"}


def test_login_returns_sanitized_user_and_session(admin_client):
    resp = admin_client.get("/api/session")
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "admin"

    admin_client.post("/api/logout")
    assert admin_client.get("/api/session").status_code == 401


def test_login_body_has_no_secrets(seeded_store, client):
    resp = client.post("/api/login", json={"email": "bhargav", "password": "BNG"})
    user = resp.get_json()["user"]
    assert user["name"] == "Bhargav"
    assert "password" not in user and "passwordHash" not in user


# Users

def test_user_routes_round_trip(client):
    resp = client.post(
        "/api/users",
        json={"name": "Priya", "email": "priya@example.com", "password": "pw", "country": "India"},
    )
    assert resp.status_code == 200
    user_id = resp.get_json()["user"]["id"]

    listed = client.get("/api/users").get_json()["users"]
    assert {u["email"] for u in listed} == {"admin", "bhargav", "priya@example.com"}
    assert all("passwordHash" not in u for u in listed)

    resp = client.put("/api/users/email/priya@example.com", json={"designation": "Lead"})
    assert resp.get_json()["user"]["designation"] == "Lead"

    assert client.get(f"/api/users/{user_id}").get_json()["user"]["name"] == "Priya"
    assert client.get("/api/users/name/Priya").status_code == 200

    assert client.delete(f"/api/users/{user_id}").status_code == 200
    assert client.get(f"/api/users/{user_id}").status_code == 404


def test_add_user_requires_fields(seeded_store, client):
    resp = client.post("/api/users", json={"name": "NoEmail"})
    assert resp.status_code == 400
    assert resp.get_json()["error"].startswith("Missing required fields")


def test_user_directory_without_store_is_500(client):
    resp = client.get("/api/timesheet/showUser")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to read users data", "success": False}


def test_debug_routes_are_not_registered_outside_debug(client):
    assert client.get("/api/debug/users").status_code == 404


# Projects

def test_project_delete_without_match_is_404(client):
    client.post("/api/projects", json={"projectNumber": "P1", "projectName": "Alpha"})

    resp = client.post("/api/projects/delete", json={"projectNumber": "P1", "projectName": "Beta"})
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False

    resp = client.post("/api/projects/delete", json={"projectNumber": "P1", "projectName": "Alpha"})
    assert resp.status_code == 200
    assert client.get("/api/projects").get_json() == {"success": True, "data": []}


def test_project_details(client):
    project = client.post("/api/projects", json={"projectNumber": "P7", "projectName": "Gamma"}).get_json()["project"]

    resp = client.get(f"/api/projects/{project['id']}/details")
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["members"] == []
    assert body["total_hours"] == 0


# Timesheets

def test_am_collision_keeps_last_write(store, client):
    for task in ("first", "second"):
        resp = client.post(
            "/api/AM",
            json={"employee_name": "john", "date": "2025-01-06", "tasks": {"9-10 AM": task}},
        )
        assert resp.status_code == 200

    assert store.raw("timesheets")["john"]["2025-01-06"]["AM"] == {"9-10 AM": "second"}


def test_timesheet_status_and_day(client):
    client.post("/api/AM", json={"employee_name": "john", "date": "2025-01-06", "tasks": {"9-10 AM": "Plan"}})

    resp = client.get("/api/timesheet/status", query_string={"employee_name": "john", "date": "2025-01-06"})
    assert resp.get_json() == {"amSubmitted": True, "pmSubmitted": False}

    assert client.get("/api/timesheet/user/john/2025-01-06").get_json()["AM"] == {"9-10 AM": "Plan"}
    assert client.get("/api/timesheet/user/john/2025-01-07").status_code == 404


def test_pm_rejects_bad_progress(client):
    resp = client.post(
        "/api/PM",
        json={"employee_name": "john", "hours": [{"hour": "1-2 PM", "task": "x", "progress": "Blue"}]},
    )
    assert resp.status_code == 400


# Leave

def test_leave_lifecycle(admin_client):
    resp = admin_client.post(
        "/api/leave-request",
        json={"name": "John", "startDate": "01-01-2025", "leaveType": "Vacation"},
    )
    assert resp.status_code == 201
    request_id = resp.get_json()["data"]["id"]

    resp = admin_client.put(f"/api/leave-request/{request_id}/status", json={"status": "Bogus"})
    assert resp.status_code == 400
    assert admin_client.get(f"/api/leave-request/{request_id}/status").get_json()["status"] == "Pending"

    resp = admin_client.put(f"/api/leave-request/{request_id}/status", json={"status": "Approved"})
    assert resp.status_code == 200
    assert resp.get_json()["leaveRequest"]["status"] == "Approved"

    balance = admin_client.get("/api/leave-request/available/John").get_json()
    assert balance == {"name": "John", "totalLeaves": 20, "usedLeaves": 1, "remainingLeaves": 19}


def test_leave_status_change_requires_admin(client):
    request_id = client.post(
        "/api/leave-request",
        json={"name": "John", "startDate": "01-01-2025", "leaveType": "Vacation"},
    ).get_json()["data"]["id"]

    resp = client.put(f"/api/leave-request/{request_id}/status", json={"status": "Approved"})
    assert resp.status_code == 403


def test_leave_submit_missing_fields_is_400(client):
    assert client.post("/api/leave-request", json={"name": "John"}).status_code == 400


# Matrices and safety

def test_matrices_accept_bare_ratings_body(client):
    resp = client.post("/api/matrices", json={"email": "p", "date": "2025-01-06", "Quality": "Red"})
    assert resp.status_code == 200

    data = client.get("/api/matrices", query_string={"email": "p"}).get_json()["data"]
    assert data["2025-01-06"]["red_count"] == 1


def test_safety_query_requires_parameters(client):
    resp = client.get("/api/safety", query_string={"employee_name": "john"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_safety_submit_then_query(client):
    resp = client.post(
        "/api/safety",
        json={"employee_name": "john", "date": "2025-01-06", "safety_ratings": {"PPE worn": "Green"}},
    )
    assert resp.get_json()["checklist_id"].startswith("safety-")

    resp = client.get(
        "/api/safety",
        query_string={"employee_name": "john", "start_date": "2025-01-01", "end_date": "2025-01-31"},
    )
    data = resp.get_json()["data"]
    assert [d["date"] for d in data] == ["2025-01-06"]


def test_safety_questions(client):
    body = client.get("/api/safety/questions").get_json()
    assert len(body["data"]) == 7


# Settings

def test_settings_defaults_then_save(store, client):
    assert client.get("/api/admin/settings").get_json()["companyName"] == "Singh Automation"
    assert "settings" not in store

    resp = client.post("/api/admin/settings", json={"companyName": "Acme", "defaultTimeZone": "IST"})
    assert resp.status_code == 200
    assert client.get("/api/admin/settings").get_json() == {"companyName": "Acme", "defaultTimeZone": "IST"}


def test_settings_reject_non_object(client):
    assert client.post("/api/admin/settings", json=["x"]).status_code == 400


def test_am_posted_with_us_date_is_found_by_iso_date(client):
    resp = client.post("/api/AM", json={"employee_name": "x", "date": "10-19-2026", "tasks": {"9-10 AM": "Plan"}})
    assert resp.status_code == 200

    assert client.get("/api/timesheet/user/x/2026-10-19").status_code == 200


def test_pm_accepts_rows_without_progress(client):
    resp = client.post("/api/PM", json={"employee_name": "john", "hours": [{"hour": "1-2 PM", "task": "x", "comments": ""}]})
    assert resp.status_code == 200


def test_user_email_update_cannot_collide(seeded_store, client):
    resp = client.put("/api/users/email/bhargav", json={"email": "admin"})
    assert resp.status_code == 400
    assert client.post("/api/login", json={"email": "bhargav", "password": "BNG"}).status_code == 200
