from __future__ import annotations

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker


def test_get_user_dues_returns_contract_shape(
    client: TestClient, seeded_session_factory: sessionmaker[Session]
) -> None:
    response = client.get("/v1/dues/0xUUU")

    assert response.status_code == 200
    assert response.json() == {
        "userWallet": "0xuuu",
        "totalOwed": 0,
        "totalOwedToUser": 30,
        "netBalance": 30,
        "pendingGroups": [
            {
                "groupId": "g2",
                "name": "Lunch",
                "netPosition": -50,
                "amountOwed": 50,
                "amountOwedToUser": 0,
                "transactions": [{"from": "0xuuu", "to": "0xvvv", "amount": 50}],
            },
            {
                "groupId": "g3",
                "name": "Rent",
                "netPosition": 80,
                "amountOwed": 0,
                "amountOwedToUser": 80,
                "transactions": [{"from": "0xvvv", "to": "0xuuu", "amount": 80}],
            },
        ],
        "globalOptimalTransactions": [{"from": "0xvvv", "to": "0xuuu", "amount": 30}],
    }


def test_get_user_dues_for_unknown_wallet_is_empty(
    client: TestClient, seeded_session_factory: sessionmaker[Session]
) -> None:
    response = client.get("/v1/dues/0xnobody")

    assert response.status_code == 200
    assert response.json() == {
        "userWallet": "0xnobody",
        "totalOwed": 0,
        "totalOwedToUser": 0,
        "netBalance": 0,
        "pendingGroups": [],
        "globalOptimalTransactions": [],
    }


def test_get_user_dues_is_stable_across_calls(
    client: TestClient, seeded_session_factory: sessionmaker[Session]
) -> None:
    first = client.get("/v1/dues/0xbbb")
    second = client.get("/v1/dues/0xbbb")

    assert first.status_code == 200
    assert first.content == second.content
    assert first.json()["totalOwed"] == 40
