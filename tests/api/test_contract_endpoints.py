# This file tests contract endpoints against the seeded demo dataset.
# Only the client or contractor of a contract may read it, and listings exclude terminated contracts.

from __future__ import annotations

import pytest

from tests.api.support import api_test_client, as_profile


@pytest.mark.parametrize("profile_id", [1, 5])
def test_contract_by_id_visible_to_both_parties(profile_id: int) -> None:
    with api_test_client() as client:
        response = client.get("/contracts/1", headers=as_profile(profile_id))

    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == 1
    assert payload["terms"] == "bla bla bla"
    assert payload["status"] == "terminated"
    assert payload["ClientId"] == 1
    assert payload["ContractorId"] == 5
    assert "createdAt" in payload
    assert "updatedAt" in payload


def test_contract_by_id_forbidden_for_other_profiles() -> None:
    with api_test_client() as client:
        response = client.get("/contracts/1", headers=as_profile(2))

    assert response.status_code == 403
    payload = response.json()
    assert payload["error"] == "Unauthorized access to the contract"
    assert payload["error_code"] == "FORBIDDEN"


@pytest.mark.parametrize("contract_id", ["999", "9" * 25])
def test_contract_by_id_not_found(contract_id: str) -> None:
    with api_test_client() as client:
        response = client.get(f"/contracts/{contract_id}", headers=as_profile(1))

    assert response.status_code == 404
    assert response.json()["error_code"] == "CONTRACT_NOT_FOUND"


def test_contract_by_id_rejects_non_integer_id() -> None:
    with api_test_client() as client:
        response = client.get("/contracts/abc", headers=as_profile(1))

    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize(
    ("profile_id", "expected_ids"),
    [
        (1, [2]),
        (4, [7, 8, 9]),
        (5, []),
        (6, [2, 3, 8]),
        (8, [5, 9]),
    ],
)
def test_list_contracts_excludes_terminated(profile_id: int, expected_ids: list[int]) -> None:
    with api_test_client() as client:
        response = client.get("/contracts", headers=as_profile(profile_id))

    assert response.status_code == 200
    payload = response.json()
    assert [row["id"] for row in payload] == expected_ids
    assert all(row["status"] != "terminated" for row in payload)
    assert all(profile_id in (row["ClientId"], row["ContractorId"]) for row in payload)
