from __future__ import annotations

from datetime import datetime

from attendance_tracker.exports.csv_export import ATTENDANCE_LOG_HEADER

API = "/api/v1"


def _engineering_id(client) -> int:
    departments = client.get(f"{API}/departments/").get_json()["departments"]
    return next(d["id"] for d in departments if d["departement_name"] == "Engineering")


def test_index_and_health(client):
    index = client.get("/").get_json()
    assert index["endpoints"]["health"] == "/health"

    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["uptime"].endswith("s")


def test_clock_in_then_out(client, clock):
    resp = client.post(f"{API}/attendance/clock-in", json={"employee_id": "EMP001"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Clock in successful"
    assert body["clock_in_time"] == "2026-03-02 08:45:00"
    assert body["is_on_time"] is True

    clock.now = datetime(2026, 3, 2, 16, 15, 0)
    resp = client.put(f"{API}/attendance/clock-out", json={"employee_id": "EMP001"})
    assert resp.status_code == 200
    out = resp.get_json()
    assert out["attendance_id"] == body["attendance_id"]
    assert out["clock_in_time"] == "2026-03-02 08:45:00"
    assert out["clock_out_time"] == "2026-03-02 16:15:00"
    assert out["is_on_time"] is False


def test_clock_in_errors(client):
    assert client.post(f"{API}/attendance/clock-in", json={"employee_id": "EMP001"}).status_code == 200

    dup = client.post(f"{API}/attendance/clock-in", json={"employee_id": "EMP001"})
    assert dup.status_code == 409
    assert "error" in dup.get_json()

    assert client.post(f"{API}/attendance/clock-in", json={"employee_id": "GHOST"}).status_code == 404
    assert client.post(f"{API}/attendance/clock-in", json={}).status_code == 400
    assert client.post(f"{API}/attendance/clock-in", data="not json").status_code == 400


def test_clock_out_errors(client, clock):
    resp = client.put(f"{API}/attendance/clock-out", json={"employee_id": "EMP001"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No active clock in found for today"

    client.post(f"{API}/attendance/clock-in", json={"employee_id": "EMP001"})
    clock.now = datetime(2026, 3, 2, 17, 30, 0)
    assert client.put(f"{API}/attendance/clock-out", json={"employee_id": "EMP001"}).status_code == 200
    assert client.put(f"{API}/attendance/clock-out", json={"employee_id": "EMP001"}).status_code == 409


def test_logs_and_filters(client, clock):
    client.post(f"{API}/attendance/clock-in", json={"employee_id": "EMP001"})
    clock.now = datetime(2026, 3, 2, 17, 0, 0)
    client.put(f"{API}/attendance/clock-out", json={"employee_id": "EMP001"})

    body = client.get(f"{API}/attendance/logs").get_json()
    assert body["count"] == 2
    assert body["filters"] == {"date": "", "department_id": 0}
    first = body["attendance_logs"][0]
    assert first["attendance_type"] == 2
    assert first["description"] == "Clock Out"
    assert first["is_on_time"] is True
    assert first["max_clock_out_time"] == "17:00:00"

    dept_id = _engineering_id(client)
    filtered = client.get(f"{API}/attendance/logs?date=2026-03-02&department_id={dept_id}").get_json()
    assert filtered["count"] == 2
    assert filtered["filters"] == {"date": "2026-03-02", "department_id": dept_id}

    assert client.get(f"{API}/attendance/logs?date=2026-03-03").get_json()["count"] == 0
    assert client.get(f"{API}/attendance/logs?date=03/02/2026").status_code == 400


def test_attendance_csv_export(client, container):
    client.post(f"{API}/attendance/clock-in", json={"employee_id": "EMP001"})

    resp = client.get(f"{API}/attendance/export/csv")
    try:
        assert resp.status_code == 200
        assert resp.mimetype == "text/csv"
        assert "attachment" in resp.headers["Content-Disposition"]
        assert "attendance_logs_20260302_" in resp.headers["Content-Disposition"]
        lines = resp.get_data().decode("utf-8-sig").splitlines()
    finally:
        resp.close()

    assert lines[0] == ",".join(ATTENDANCE_LOG_HEADER)
    assert len(lines) == 2
    assert lines[1].startswith("1,EMP001,Alice,Engineering,2026-03-02,08:45:00,Clock In")


def test_department_crud(client):
    resp = client.post(
        f"{API}/departments/",
        json={"departement_name": "Finance", "max_clock_in_time": "08:30:00", "max_clock_out_time": "17:30:00"},
    )
    assert resp.status_code == 201
    dept = resp.get_json()["department"]
    dept_id = dept["id"]
    assert dept["departement_name"] == "Finance"

    assert client.get(f"{API}/departments/{dept_id}").get_json()["department"]["max_clock_in_time"] == "08:30:00"

    resp = client.put(
        f"{API}/departments/{dept_id}",
        json={"departement_name": "Finance & Legal", "max_clock_in_time": "08:00", "max_clock_out_time": "17:00"},
    )
    assert resp.status_code == 200
    assert resp.get_json()["department"]["max_clock_in_time"] == "08:00:00"

    assert client.delete(f"{API}/departments/{dept_id}").status_code == 200
    assert client.get(f"{API}/departments/{dept_id}").status_code == 404


def test_department_validation_and_delete_blocked(client):
    bad = client.post(f"{API}/departments/", json={"departement_name": "X", "max_clock_in_time": "9am"})
    assert bad.status_code == 400

    blocked = client.delete(f"{API}/departments/{_engineering_id(client)}")
    assert blocked.status_code == 400
    assert blocked.get_json()["error"] == "Cannot delete department with employees"


def test_employee_crud(client):
    dept_id = _engineering_id(client)

    resp = client.post(
        f"{API}/employees/",
        json={"employee_id": "EMP010", "departement_id": dept_id, "name": "Eve", "address": "5 Elm St"},
    )
    assert resp.status_code == 201
    emp = resp.get_json()["employee"]
    assert emp["employee_id"] == "EMP010"
    assert emp["departement_id"] == dept_id

    dup = client.post(f"{API}/employees/", json={"employee_id": "EMP010", "departement_id": dept_id, "name": "Eve"})
    assert dup.status_code == 409

    listing = client.get(f"{API}/employees/").get_json()
    assert listing["count"] == 2

    fetched = client.get(f"{API}/employees/{emp['id']}").get_json()["employee"]
    assert fetched["department"]["departement_name"] == "Engineering"

    resp = client.put(f"{API}/employees/{emp['id']}", json={"departement_id": dept_id, "name": "Eve Adams"})
    assert resp.status_code == 200
    assert resp.get_json()["employee"]["name"] == "Eve Adams"

    assert client.delete(f"{API}/employees/{emp['id']}").status_code == 200
    assert client.get(f"{API}/employees/{emp['id']}").status_code == 404


def test_employee_delete_blocked_by_attendance(client):
    client.post(f"{API}/attendance/clock-in", json={"employee_id": "EMP001"})
    emp_id = next(e["id"] for e in client.get(f"{API}/employees/").get_json()["employees"] if e["employee_id"] == "EMP001")

    resp = client.delete(f"{API}/employees/{emp_id}")
    assert resp.status_code == 400


def test_employee_and_department_csv_exports(client):
    for path, header in ((f"{API}/employees/export/csv", "No,Employee ID"), (f"{API}/departments/export/csv", "No,Department Name")):
        resp = client.get(path)
        try:
            assert resp.status_code == 200
            assert resp.get_data().decode("utf-8-sig").startswith(header)
        finally:
            resp.close()


def test_unknown_route_returns_json_error(client):
    resp = client.get(f"{API}/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_cors_preflight_allows_browser_clients(client):
    origin = "http://localhost:3000"
    resp = client.options(
        f"{API}/attendance/clock-in",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] in ("*", origin)
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]
    assert "content-type" in resp.headers["Access-Control-Allow-Headers"].lower()


def test_cors_headers_on_regular_response(client):
    resp = client.get(f"{API}/departments/", headers={"Origin": "http://localhost:3000"})
    assert resp.status_code == 200
    assert "Access-Control-Allow-Origin" in resp.headers
