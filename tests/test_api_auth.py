from conftest import PASSWORD


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200


def test_login_returns_user_and_token(client, salon):
    response = client.post("/api/auth/login", json={"email": "admin@salon.dz", "password": PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "admin@salon.dz"
    assert body["user"]["role"] == "admin"
    assert "password_hash" not in body["user"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == salon.admin.id


def test_login_wrong_password(client, salon):
    response = client.post("/api/auth/login", json={"email": "admin@salon.dz", "password": "nope"})
    assert response.status_code == 401


def test_login_unknown_email(client, salon):
    response = client.post("/api/auth/login", json={"email": "ghost@salon.dz", "password": PASSWORD})
    assert response.status_code == 401


def test_login_missing_fields(client):
    response = client.post("/api/auth/login", json={"email": "admin@salon.dz"})
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "password"


def test_token_form_login(client, salon):
    response = client.post("/api/auth/token", data={"username": "amina@salon.dz", "password": PASSWORD})
    assert response.status_code == 200
    assert response.json()["access_token"]


def test_me_includes_skills(client, salon):
    response = client.get("/api/auth/me", headers=salon.amina_headers)
    assert response.json()["skills"] == [salon.hair.id]


def test_requests_without_token_are_rejected(client, salon):
    assert client.get("/api/clients").status_code == 401
    assert client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"}).status_code == 401
