"""Tests for program domain router."""

from fastapi.testclient import TestClient
from sqlmodel import Session, select

from fitzone.program.models import Program
from fitzone.user.models import ProgramPurchase, User

# --- GET /api/programs ---


def test_list_programs_empty(client: TestClient):
    response = client.get("/api/programs")

    assert response.status_code == 200
    assert response.json() == []


def test_list_programs(client: TestClient, session: Session, program: Program):
    session.add(Program(id="yoga-flow", title="Yoga Flow", price=49.0))
    session.commit()

    response = client.get("/api/programs")

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data] == ["hiit-bootcamp", "yoga-flow"]
    assert data[0]["instructor"]["name"] == "Alex Rivera"
    assert data[0]["schedule"][0]["day"] == "Monday"
    assert data[1]["benefits"] == []


def test_list_programs_is_public(client: TestClient, program: Program):
    """No token is needed to browse the catalog."""
    response = client.get("/api/programs")

    assert response.status_code == 200


# --- GET /api/programs/{program_id} ---


def test_get_program(client: TestClient, program: Program):
    response = client.get("/api/programs/hiit-bootcamp")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "HIIT Bootcamp"
    assert data["price"] == 79.0
    assert data["equipment"] == ["Kettlebell"]
    assert data["createdAt"].endswith("Z")


def test_get_program_not_found(client: TestClient):
    response = client.get("/api/programs/missing")

    assert response.status_code == 404
    assert response.json() == {
        "type": "program_not_found",
        "message": "Program not found",
    }


# --- POST /api/programs/{program_id}/purchase ---


def test_purchase_program(
    client: TestClient,
    session: Session,
    test_user: User,
    program: Program,
    auth_header,
):
    response = client.post(
        "/api/programs/hiit-bootcamp/purchase", headers=auth_header(test_user)
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Program purchased successfully"}

    session.refresh(test_user)
    assert test_user.purchased_programs == ["hiit-bootcamp"]


def test_purchase_program_twice_is_idempotent(
    client: TestClient,
    session: Session,
    test_user: User,
    program: Program,
    auth_header,
):
    headers = auth_header(test_user)

    first = client.post("/api/programs/hiit-bootcamp/purchase", headers=headers)
    second = client.post("/api/programs/hiit-bootcamp/purchase", headers=headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json() == {"message": "Program purchased successfully"}

    purchases = session.exec(
        select(ProgramPurchase).where(ProgramPurchase.user_id == test_user.id)
    ).all()
    assert [p.program_id for p in purchases] == ["hiit-bootcamp"]


def test_purchase_unknown_program_is_recorded(
    client: TestClient, session: Session, test_user: User, auth_header
):
    """The catalog is not consulted; any identifier can be unlocked."""
    response = client.post(
        "/api/programs/not-in-catalog/purchase", headers=auth_header(test_user)
    )

    assert response.status_code == 200
    session.refresh(test_user)
    assert test_user.purchased_programs == ["not-in-catalog"]


def test_purchase_requires_token(client: TestClient, program: Program):
    response = client.post("/api/programs/hiit-bootcamp/purchase")

    assert response.status_code == 401
    assert response.json()["message"] == "Access token required"


def test_purchase_with_invalid_token(client: TestClient, program: Program):
    response = client.post(
        "/api/programs/hiit-bootcamp/purchase",
        headers={"Authorization": "Bearer not.a.token"},
    )

    assert response.status_code == 403
