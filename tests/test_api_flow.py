import uuid


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def _register(client, username, email, password="pw123"):
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()["token"]


def test_full_session_scenario(client):
    t1 = _register(client, "alice", "alice@x.com")

    duplicate = client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "alice@x.com", "password": "pw123"},
    )
    assert duplicate.status_code == 409

    wrong = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "wrong"})
    assert wrong.status_code == 401

    login = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "pw123"})
    assert login.status_code == 200
    t2 = login.json()["token"]
    assert t2 != t1

    created = client.post("/api/todos", json={"title": "Write report"}, headers=_auth(t2))
    assert created.status_code == 201
    todo_id = created.json()["id"]

    assert client.get(f"/api/todos/{todo_id}", headers=_auth(t2)).status_code == 200

    bob = _register(client, "bob", "bob@x.com")
    assert client.get(f"/api/todos/{todo_id}", headers=_auth(bob)).status_code == 404

    logout = client.post("/api/auth/logout", headers=_auth(t2))
    assert logout.status_code == 200

    rejected = client.get("/api/todos", headers=_auth(t2))
    assert rejected.status_code == 401

    t3 = client.post(
        "/api/auth/login", json={"email": "alice@x.com", "password": "pw123"}
    ).json()["token"]
    listing = client.get("/api/todos", headers=_auth(t3))
    assert listing.status_code == 200
    assert [todo["id"] for todo in listing.json()] == [todo_id]


def test_unknown_email_and_wrong_password_same_response(client):
    _register(client, "alice", "alice@x.com")
    wrong_password = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "pw123"})
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json()["error"] == unknown_email.json()["error"]


def test_missing_and_malformed_headers_rejected(client):
    token = _register(client, "alice", "alice@x.com")
    for headers in ({}, {"Authorization": token}, {"Authorization": f"Basic {token}"}, {"Authorization": "Bearer"}):
        response = client.get("/api/todos", headers=headers)
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"


def test_rejections_are_indistinguishable(client):
    token = _register(client, "alice", "alice@x.com")
    client.post("/api/auth/logout", headers=_auth(token))

    bodies = set()
    for bad in (token, "garbage", token[:-4] + "abcd"):
        response = client.get("/api/todos", headers=_auth(bad))
        assert response.status_code == 401
        bodies.add(response.json()["error"])
    assert bodies == {"Invalid or expired token"}


def test_cross_user_update_and_delete_rejected(client):
    alice = _register(client, "alice", "alice@x.com")
    bob = _register(client, "bob", "bob@x.com")
    todo_id = client.post("/api/todos", json={"title": "mine"}, headers=_auth(alice)).json()["id"]

    assert client.put(f"/api/todos/{todo_id}", json={"title": "x"}, headers=_auth(bob)).status_code == 404
    assert client.delete(f"/api/todos/{todo_id}", headers=_auth(bob)).status_code == 404
    assert client.get("/api/todos", headers=_auth(bob)).json() == []

    unchanged = client.get(f"/api/todos/{todo_id}", headers=_auth(alice)).json()
    assert unchanged["title"] == "mine"


def test_todo_crud(client):
    token = _register(client, "alice", "alice@x.com")
    todo = client.post(
        "/api/todos", json={"title": "t", "description": "d"}, headers=_auth(token)
    ).json()
    assert todo["completed"] is False

    updated = client.put(f"/api/todos/{todo['id']}", json={"completed": True}, headers=_auth(token))
    assert updated.status_code == 200
    assert updated.json()["completed"] is True
    assert updated.json()["description"] == "d"

    assert client.delete(f"/api/todos/{todo['id']}", headers=_auth(token)).status_code == 204
    assert client.get(f"/api/todos/{todo['id']}", headers=_auth(token)).status_code == 404
    assert client.get(f"/api/todos/{uuid.uuid4()}", headers=_auth(token)).status_code == 404


def test_validation_errors(client):
    bad_email = client.post(
        "/api/auth/register", json={"username": "a", "email": "nope", "password": "pw"}
    )
    assert bad_email.status_code == 422

    token = _register(client, "alice", "alice@x.com")
    assert client.post("/api/todos", json={"title": "  "}, headers=_auth(token)).status_code == 422
    assert client.get("/api/todos/not-a-uuid", headers=_auth(token)).status_code == 422


def test_me_returns_profile_without_password(client):
    token = _register(client, "alice", "alice@x.com")
    response = client.get("/api/auth/me", headers=_auth(token))
    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "alice@x.com"
    assert "password" not in body and "password_hash" not in body


def test_logout_requires_valid_token(client):
    assert client.post("/api/auth/logout").status_code == 401
    assert client.post("/api/auth/logout", headers=_auth("garbage")).status_code == 401


def test_responses_carry_request_id(client):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "req-123"
