from fastapi.testclient import TestClient

from conftest import auth_headers
from salon.core.roles import Role
from salon.dependencies import get_repository
from salon.main import app
from salon.models.profile import Profile
from salon.repositories.memory import InMemoryRepository


class BrokenRepository(InMemoryRepository):
    def list_clients(self):
        raise RuntimeError("conexão perdida com 10.0.0.5")


def test_unhandled_errors_become_generic_500():
    repo = BrokenRepository()
    admin = repo.save_profile(
        Profile(first_name="A", last_name="B", email="a@salon.dz", role=Role.ADMIN, password_hash="x")
    )
    app.dependency_overrides[get_repository] = lambda: repo
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/api/clients", headers=auth_headers(admin))
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Erro interno do servidor"}


def test_routes_work_over_in_memory_repository():
    repo = InMemoryRepository()
    admin = repo.save_profile(
        Profile(first_name="A", last_name="B", email="a@salon.dz", role=Role.ADMIN, password_hash="x")
    )
    app.dependency_overrides[get_repository] = lambda: repo
    try:
        client = TestClient(app)
        created = client.post(
            "/api/clients", json={"full_name": "Imane", "phone": "0770"}, headers=auth_headers(admin)
        )
        listing = client.get("/api/clients", headers=auth_headers(admin))
    finally:
        app.dependency_overrides.clear()

    assert created.status_code == 201
    assert [c["full_name"] for c in listing.json()] == ["Imane"]
