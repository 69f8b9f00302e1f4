from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from monthweek.main import create_app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(create_app()) as test_client:
        yield test_client


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_week_of_month_for_first_thursday(client: TestClient) -> None:
    response = client.get("/week-of-month", params={"date": "2024-08-01"})

    assert response.status_code == 200
    assert response.json() == {
        "date": "2024-08-01",
        "year": 2024,
        "month": 8,
        "week": 1,
        "key": "2024-08-W1",
    }


def test_week_of_month_reassigned_to_previous_year(client: TestClient) -> None:
    response = client.get("/week-of-month", params={"date": "2023-01-01"})

    assert response.status_code == 200
    body = response.json()
    assert (body["year"], body["month"], body["week"]) == (2022, 12, 5)


def test_week_of_month_rejects_garbage(client: TestClient) -> None:
    response = client.get("/week-of-month", params={"date": "not-a-date"})

    assert response.status_code == 400


def test_week_of_month_requires_date(client: TestClient) -> None:
    response = client.get("/week-of-month")

    assert response.status_code == 422


def test_range(client: TestClient) -> None:
    response = client.get("/week-of-month/range", params={"start": "2025-03-30", "end": "2025-04-01"})

    assert response.status_code == 200
    body = response.json()
    assert body["start"] == "2025-03-30"
    assert body["end"] == "2025-04-01"
    assert [item["key"] for item in body["items"]] == ["2025-03-W4", "2025-04-W1", "2025-04-W1"]


def test_range_rejects_reversed_bounds(client: TestClient) -> None:
    response = client.get("/week-of-month/range", params={"start": "2025-04-01", "end": "2025-03-01"})

    assert response.status_code == 400
    assert response.json()["detail"] == "end must not be before start"


def test_range_limit_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONTHWEEK_MAX_RANGE_DAYS", "7")

    with TestClient(create_app()) as client:
        ok = client.get("/week-of-month/range", params={"start": "2025-01-01", "end": "2025-01-07"})
        too_long = client.get("/week-of-month/range", params={"start": "2025-01-01", "end": "2025-01-08"})

    assert ok.status_code == 200
    assert len(ok.json()["items"]) == 7
    assert too_long.status_code == 400
    assert "limit is 7" in too_long.json()["detail"]


def test_weeks_of_month(client: TestClient) -> None:
    response = client.get("/weeks", params={"month": "2024-11"})

    assert response.status_code == 200
    body = response.json()
    assert body["month"] == "2024-11"
    assert [w["week"] for w in body["weeks"]] == [1, 2, 3, 4]
    assert body["weeks"][0] == {"week": 1, "start": "2024-11-04", "end": "2024-11-10", "key": "2024-11-W1"}
    assert body["weeks"][-1]["end"] == "2024-12-01"


def test_weeks_rejects_bad_month(client: TestClient) -> None:
    response = client.get("/weeks", params={"month": "2024-13"})

    assert response.status_code == 400


def test_openapi_lists_routes() -> None:
    schema = create_app().openapi()

    for path in ("/health", "/week-of-month", "/week-of-month/range", "/weeks"):
        assert path in schema["paths"]
