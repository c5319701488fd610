# This file tests client deposits and the cap on the deposit amount.

from __future__ import annotations

from decimal import Decimal

import pytest

from tests.api.support import (
    api_test_client,
    as_profile,
    build_seeded_database,
    build_test_config,
    profile_balance,
    set_balance,
)


def test_deposit_within_cap_increases_balance_exactly() -> None:
    db = build_seeded_database()

    with api_test_client(db_client=db) as client:
        response = client.post("/balances/deposit/1", headers=as_profile(1), json={"amount": 100})

    assert response.status_code == 200
    assert response.json() == {"message": "Deposit successful"}
    assert profile_balance(db, 1) == Decimal("1250")


def test_deposit_over_cap_is_rejected() -> None:
    db = build_seeded_database()
    set_balance(db, 1, Decimal("1000"))

    with api_test_client(db_client=db) as client:
        response = client.post("/balances/deposit/1", headers=as_profile(1), json={"amount": 300})

    assert response.status_code == 400
    payload = response.json()
    assert payload["error"] == "Deposited amount exceeds 25% of the total jobs to pay"
    assert payload["error_code"] == "DEPOSIT_LIMIT_EXCEEDED"
    assert payload["details"]["max_deposit"] == 250
    assert profile_balance(db, 1) == Decimal("1000")


def test_deposit_exactly_at_cap_is_accepted() -> None:
    db = build_seeded_database()
    set_balance(db, 1, Decimal("1000"))

    with api_test_client(db_client=db) as client:
        response = client.post("/balances/deposit/1", headers=as_profile(1), json={"amount": 250})

    assert response.status_code == 200
    assert profile_balance(db, 1) == Decimal("1250")


def test_deposit_cap_ratio_comes_from_config() -> None:
    db = build_seeded_database()
    set_balance(db, 1, Decimal("1000"))
    config = build_test_config(deposit_cap_ratio=Decimal("0.5"))

    with api_test_client(config=config, db_client=db) as client:
        accepted = client.post("/balances/deposit/1", headers=as_profile(1), json={"amount": 300})

    assert accepted.status_code == 200
    assert profile_balance(db, 1) == Decimal("1300")


@pytest.mark.parametrize("user_id", ["5", "999", "9" * 25])
def test_deposit_target_must_be_a_client(user_id: str) -> None:
    with api_test_client() as client:
        response = client.post(
            f"/balances/deposit/{user_id}", headers=as_profile(1), json={"amount": 1}
        )

    assert response.status_code == 404
    payload = response.json()
    assert payload["error"] == "Client not found"
    assert payload["error_code"] == "CLIENT_NOT_FOUND"


@pytest.mark.parametrize("body", [{}, {"amount": 0}, {"amount": -5}, {"amount": "lots"}, {"amount": 1.234}])
def test_deposit_rejects_invalid_amount(body: dict[str, object]) -> None:
    db = build_seeded_database()

    with api_test_client(db_client=db) as client:
        response = client.post("/balances/deposit/1", headers=as_profile(1), json=body)

    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"
    assert profile_balance(db, 1) == Decimal("1150")
