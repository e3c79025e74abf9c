"""Tests for user registration and lookup."""


def test_register_user(client):
    r = client.post("/users", json={"username": "dicoding", "password": "secret", "fullname": "Dicoding Indonesia"})
    assert r.status_code == 201
    body = r.json()
    assert body["status"] == "success"
    assert body["data"]["userId"].startswith("user-")


def test_register_duplicate_username_fails(client):
    payload = {"username": "dicoding", "password": "secret", "fullname": "Dicoding"}
    assert client.post("/users", json=payload).status_code == 201

    r = client.post("/users", json=payload)
    assert r.status_code == 400
    assert r.json() == {"status": "fail", "message": "Failed to add user. Username is already taken"}


def test_register_missing_field_is_rejected(client):
    r = client.post("/users", json={"username": "dicoding", "password": "secret"})
    assert r.status_code == 400
    assert r.json()["status"] == "fail"
    assert "fullname" in r.json()["message"]


def test_get_user_hides_password(client, make_user):
    user_id, _ = make_user("alice", fullname="Alice Liddell")

    r = client.get(f"/users/{user_id}")
    assert r.status_code == 200
    assert r.json()["data"]["user"] == {"id": user_id, "username": "alice", "fullname": "Alice Liddell"}


def test_get_unknown_user(client):
    r = client.get("/users/user-doesnotexist0000")
    assert r.status_code == 404
    assert r.json()["status"] == "fail"


def test_password_is_stored_hashed(client, context, make_user):
    from openmusic.db.models.user import User

    user_id, _ = make_user("bob", password="hunter2")
    with context.session_factory() as db:
        stored = db.query(User.password).filter(User.id == user_id).scalar()
    assert stored != "hunter2"
    assert stored.startswith("$2")


def test_password_over_bcrypt_limit_is_rejected(client):
    r = client.post("/users", json={"username": "longpw", "password": "x" * 100, "fullname": "Long"})
    assert r.status_code == 400
    assert r.json()["status"] == "fail"
    assert "password" in r.json()["message"]


def test_password_limit_counts_utf8_bytes(client):
    # 25 three-byte characters are 75 bytes
    r = client.post("/users", json={"username": "euro", "password": "€" * 25, "fullname": "Euro"})
    assert r.status_code == 400


def test_password_at_bcrypt_limit_can_log_in(client, make_user):
    user_id, _ = make_user("maxpw", password="x" * 72)
    assert user_id.startswith("user-")
