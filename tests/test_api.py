from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from bodytrack.api.deps import get_repository
from bodytrack.core.constants import MSG_DATE_REQUIRED, MSG_WEIGHT_RANGE, MSG_WEIGHT_REQUIRED
from bodytrack.main import create_application
from bodytrack.services.repository import BodyDataRepository, SqlBodyDataRepository


class BrokenRepository(BodyDataRepository):
    backend = "database"

    async def list_all(self):
        raise ConnectionError("database unreachable")

    async def insert(self, payload):
        raise ConnectionError("database unreachable")

    async def ping(self):
        raise ConnectionError("database unreachable")


@pytest.fixture
def broken_client(app, client):
    app.dependency_overrides[get_repository] = lambda: BrokenRepository()
    yield client
    app.dependency_overrides.clear()


# ── /api/body-data ───────────────────────────────────────────────────────

def test_list_body_data_returns_demo_records(client):
    resp = client.get("/api/body-data")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert [r["date"] for r in body["data"]] == ["2024-01-15", "2024-01-14", "2024-01-13"]
    assert body["data"][0]["weight"] == 70.5


def test_create_body_data(client):
    resp = client.post("/api/body-data", json={"date": "2024-01-16", "weight": 70.2, "bmi": 22.0})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["id"] == 4
    assert body["data"]["created_at"]

    listed = client.get("/api/body-data").json()["data"]
    assert len(listed) == 4
    assert listed[0]["date"] == "2024-01-16"


def test_create_body_data_validation_failure(client):
    resp = client.post("/api/body-data", json={"weight": 250})
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["errors"] == [MSG_DATE_REQUIRED, MSG_WEIGHT_RANGE]
    assert body["error"] == f"{MSG_DATE_REQUIRED}; {MSG_WEIGHT_RANGE}"
    assert len(client.get("/api/body-data").json()["data"]) == 3


def test_create_body_data_blank_form(client):
    resp = client.post("/api/body-data", json={"date": "", "weight": ""})
    assert resp.status_code == 400
    assert resp.json()["errors"] == [MSG_DATE_REQUIRED, MSG_WEIGHT_REQUIRED]


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "not-a-date", "weight": 70},
        {"date": "2024-01-16", "weight": "heavy"},
    ],
)
def test_malformed_body_is_400(client, payload):
    resp = client.post("/api/body-data", json=payload)
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["errors"]


def test_non_json_body_is_400(client):
    resp = client.post("/api/body-data", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_body_data_backend_failure_is_500(broken_client):
    resp = broken_client.get("/api/body-data")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "data": None, "error": "Failed to fetch body data", "errors": None}

    resp = broken_client.post("/api/body-data", json={"date": "2024-01-16", "weight": 70})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to save body data"


def test_validation_runs_before_backend(broken_client):
    resp = broken_client.post("/api/body-data", json={"date": "2024-01-16"})
    assert resp.status_code == 400
    assert resp.json()["errors"] == [MSG_WEIGHT_REQUIRED]


# ── /api/stats ───────────────────────────────────────────────────────────

def test_stats_over_demo_records(client):
    body = client.get("/api/stats").json()
    assert body["success"] is True
    stats = body["data"]
    assert stats["avg_weight"] == pytest.approx((70.5 + 70.8 + 71.0) / 3)
    assert stats["avg_bmi"] == pytest.approx((22.1 + 22.2 + 22.3) / 3)
    assert stats["total_records"] == 3
    assert stats["latest_record"]["id"] == 1


def test_stats_follow_new_records(client):
    client.post("/api/body-data", json={"date": "2024-01-16", "weight": 69.7})
    stats = client.get("/api/stats").json()["data"]
    assert stats["total_records"] == 4
    assert stats["latest_record"]["weight"] == 69.7
    # Record without BMI doesn't pull the BMI average down
    assert stats["avg_bmi"] == pytest.approx(22.2)


def test_stats_backend_failure(broken_client):
    resp = broken_client.get("/api/stats")
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to fetch stats"


# ── /api/charts ──────────────────────────────────────────────────────────

def test_chart_weight(client):
    body = client.get("/api/charts/weight").json()
    assert body["success"] is True
    assert body["data"]["labels"] == ["2024-01-13", "2024-01-14", "2024-01-15"]
    assert [p["y"] for p in body["data"]["datasets"][0]["data"]] == [71.0, 70.8, 70.5]


def test_chart_composition_has_three_series(client):
    datasets = client.get("/api/charts/composition").json()["data"]["datasets"]
    assert len(datasets) == 3


def test_chart_unknown_tab(client):
    resp = client.get("/api/charts/sleep")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


# ── /api/app-info, /api/health ───────────────────────────────────────────

def test_app_info(client, monkeypatch):
    monkeypatch.setenv("BACKEND_BUILT_AT", "2026-10-01")
    body = client.get("/api/app-info").json()
    assert body == {
        "success": True,
        "data": {"version": "2.0.0", "build_number": "42", "last_updated": "2026-10-01"},
        "error": None,
        "errors": None,
    }


def test_app_info_defaults_last_updated_to_today(client, monkeypatch):
    monkeypatch.delenv("BACKEND_BUILT_AT", raising=False)
    data = client.get("/api/app-info").json()["data"]
    assert len(data["last_updated"]) == 10  # YYYY-MM-DD


def test_health(client):
    body = client.get("/api/health").json()
    assert body["success"] is True
    assert body["data"]["status"] == "ok"
    assert body["data"]["backend"] == "memory"
    assert body["data"]["database"] is None
    assert body["data"]["timestamp"]


def test_health_failure(broken_client):
    resp = broken_client.get("/api/health")
    assert resp.status_code == 500
    assert resp.json()["error"] == "Health check failed"


def test_root(client):
    assert client.get("/").json()["status"] == "ok"


def test_apps_do_not_share_memory_store(settings, client):
    client.post("/api/body-data", json={"date": "2024-01-16", "weight": 70})
    other = TestClient(create_application(settings))
    assert len(other.get("/api/body-data").json()["data"]) == 3


# ── Non-finite numbers, raw-body presence checks, commit failures ────────

@pytest.mark.parametrize(
    "raw",
    [
        b'{"date": "2024-01-16", "weight": 70, "bmi": NaN}',
        b'{"date": "2024-01-16", "weight": NaN}',
        b'{"date": "2024-01-16", "weight": 70, "calories": Infinity}',
    ],
)
def test_non_finite_numbers_rejected(client, raw):
    resp = client.post("/api/body-data", content=raw, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["success"] is False

    assert len(client.get("/api/body-data").json()["data"]) == 3
    stats = client.get("/api/stats").json()["data"]
    assert stats["avg_bmi"] == pytest.approx(22.2)
    assert stats["avg_weight"] == pytest.approx((70.5 + 70.8 + 71.0) / 3)


def test_type_error_still_reports_missing_date(client):
    resp = client.post("/api/body-data", json={"weight": "heavy"})
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert errors[0] == MSG_DATE_REQUIRED
    assert any(e.startswith("weight:") for e in errors[1:])


def test_type_error_with_blank_weight_reports_both_presence_messages(client):
    resp = client.post("/api/body-data", json={"date": "", "bmi": "tall"})
    assert resp.json()["errors"][:2] == [MSG_DATE_REQUIRED, MSG_WEIGHT_REQUIRED]


def test_optional_zero_stored_as_null(client):
    resp = client.post("/api/body-data", json={"date": "2024-01-16", "weight": 70, "bmi": 0})
    assert resp.status_code == 200
    assert resp.json()["data"]["bmi"] is None


def test_commit_failure_is_500(app, client):
    session = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.commit = AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception("connection lost")))
    app.dependency_overrides[get_repository] = lambda: SqlBodyDataRepository(session)
    try:
        resp = client.post("/api/body-data", json={"date": "2024-01-16", "weight": 70})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to save body data"
    session.rollback.assert_awaited_once()
