# This file tests the admin reporting endpoints against the seeded demo payments.
# Only paid jobs inside the inclusive [start, end] window may contribute to a report.

from __future__ import annotations

from decimal import Decimal

import pytest

from tests.api.support import api_test_client, as_profile, build_seeded_database, set_balance


def test_best_profession_over_full_month() -> None:
    with api_test_client() as client:
        response = client.get(
            "/admin/best-profession?start=2020-08-01&end=2020-08-31", headers=as_profile(1)
        )

    assert response.status_code == 200
    assert response.json() == {"profession": "Programmer", "total_earnings": 2683}


def test_best_profession_date_only_end_covers_the_whole_day() -> None:
    with api_test_client() as client:
        response = client.get(
            "/admin/best-profession?start=2020-08-10&end=2020-08-10", headers=as_profile(1)
        )

    assert response.status_code == 200
    assert response.json() == {"profession": "Musician", "total_earnings": 21}


def test_best_profession_window_bounds_are_inclusive() -> None:
    instant = "2020-08-17T19:11:26.737000Z"
    with api_test_client() as client:
        response = client.get(
            "/admin/best-profession",
            params={"start": instant, "end": instant},
            headers=as_profile(1),
        )

    assert response.status_code == 200
    payload = response.json()
    assert payload["total_earnings"] == 200
    assert payload["profession"] == "Fighter"


def test_best_profession_ignores_payments_outside_window() -> None:
    db = build_seeded_database()
    set_balance(db, 2, Decimal("5000"))

    with api_test_client(db_client=db) as client:
        before = client.get(
            "/admin/best-profession?start=2020-08-01&end=2020-08-31", headers=as_profile(1)
        )
        paid_now = client.post("/jobs/3/pay", headers=as_profile(2))
        after = client.get(
            "/admin/best-profession?start=2020-08-01&end=2020-08-31", headers=as_profile(1)
        )

    assert paid_now.status_code == 200
    assert before.json() == after.json()


def test_best_profession_empty_window_returns_404() -> None:
    with api_test_client() as client:
        response = client.get(
            "/admin/best-profession?start=2021-01-01&end=2021-12-31", headers=as_profile(1)
        )

    assert response.status_code == 404
    payload = response.json()
    assert payload["error"] == "No data found for the given time range"
    assert payload["error_code"] == "NO_REPORT_DATA"


def test_best_clients_default_limit() -> None:
    with api_test_client() as client:
        response = client.get(
            "/admin/best-clients?start=2020-08-01&end=2020-08-31", headers=as_profile(1)
        )

    assert response.status_code == 200
    assert response.json() == [
        {"id": 4, "firstName": "Ash", "lastName": "Kethcum", "total_paid": 2020},
        {"id": 1, "firstName": "Harry", "lastName": "Potter", "total_paid": 442},
    ]


def test_best_clients_respects_limit_and_order() -> None:
    with api_test_client() as client:
        response = client.get(
            "/admin/best-clients?start=2020-08-01&end=2020-08-31&limit=10", headers=as_profile(1)
        )

    assert response.status_code == 200
    payload = response.json()
    assert [row["id"] for row in payload] == [4, 1, 2, 3]
    totals = [row["total_paid"] for row in payload]
    assert totals == sorted(totals, reverse=True)


def test_best_clients_narrow_window() -> None:
    with api_test_client() as client:
        response = client.get(
            "/admin/best-clients?start=2020-08-16&end=2020-08-16&limit=5", headers=as_profile(1)
        )

    assert response.status_code == 200
    assert response.json() == [
        {"id": 2, "firstName": "Mr", "lastName": "Robot", "total_paid": 200},
    ]


def test_best_clients_empty_window_returns_404() -> None:
    with api_test_client() as client:
        response = client.get(
            "/admin/best-clients?start=2019-01-01&end=2019-12-31", headers=as_profile(1)
        )

    assert response.status_code == 404
    assert response.json()["error_code"] == "NO_REPORT_DATA"


@pytest.mark.parametrize(
    ("query", "error_code"),
    [
        ("start=2020-08-31&end=2020-08-01", "INVALID_TIME_WINDOW"),
        ("start=yesterday&end=2020-08-01", "INVALID_QUERY_PARAM"),
        ("start=2020-08-01&end=2020-08-31&limit=1000", "INVALID_QUERY_PARAM"),
    ],
)
def test_best_clients_rejects_bad_query(query: str, error_code: str) -> None:
    with api_test_client() as client:
        response = client.get(f"/admin/best-clients?{query}", headers=as_profile(1))

    assert response.status_code == 400
    assert response.json()["error_code"] == error_code


def test_reports_require_start_and_end() -> None:
    with api_test_client() as client:
        response = client.get("/admin/best-profession?start=2020-08-01", headers=as_profile(1))

    assert response.status_code == 422


def test_reports_require_a_resolved_profile() -> None:
    with api_test_client() as client:
        response = client.get("/admin/best-profession?start=2020-08-01&end=2020-08-31")

    assert response.status_code == 401
