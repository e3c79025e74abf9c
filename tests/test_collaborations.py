"""Tests for adding and removing playlist collaborators."""


def test_add_collaboration(client, make_user, make_playlist):
    _, alice = make_user("alice")
    bob_id, _ = make_user("bob")
    playlist_id = make_playlist(alice)

    r = client.post("/collaborations", json={"playlistId": playlist_id, "userId": bob_id}, headers=alice)
    assert r.status_code == 201
    assert r.json()["data"]["collaborationId"].startswith("collab-")


def test_add_collaboration_twice(client, make_user, make_playlist):
    _, alice = make_user("alice")
    bob_id, _ = make_user("bob")
    playlist_id = make_playlist(alice)
    payload = {"playlistId": playlist_id, "userId": bob_id}

    client.post("/collaborations", json=payload, headers=alice)
    r = client.post("/collaborations", json=payload, headers=alice)
    assert r.status_code == 400
    assert r.json()["status"] == "fail"


def test_add_unknown_user_as_collaborator(client, make_user, make_playlist):
    _, alice = make_user("alice")
    playlist_id = make_playlist(alice)
    r = client.post("/collaborations", json={"playlistId": playlist_id, "userId": "user-ghost"}, headers=alice)
    assert r.status_code == 404


def test_only_owner_manages_collaborators(client, make_user, make_playlist):
    _, alice = make_user("alice")
    bob_id, bob = make_user("bob")
    carol_id, _ = make_user("carol")
    playlist_id = make_playlist(alice)
    client.post("/collaborations", json={"playlistId": playlist_id, "userId": bob_id}, headers=alice)

    r = client.post("/collaborations", json={"playlistId": playlist_id, "userId": carol_id}, headers=bob)
    assert r.status_code == 403

    r = client.request("DELETE", "/collaborations", json={"playlistId": playlist_id, "userId": bob_id}, headers=bob)
    assert r.status_code == 403


def test_collaboration_on_missing_playlist(client, make_user):
    _, alice = make_user("alice")
    bob_id, _ = make_user("bob")
    r = client.post("/collaborations", json={"playlistId": "playlist-missing", "userId": bob_id}, headers=alice)
    assert r.status_code == 404


def test_delete_collaboration_revokes_access(client, make_user, make_playlist):
    _, alice = make_user("alice")
    bob_id, bob = make_user("bob")
    playlist_id = make_playlist(alice)
    payload = {"playlistId": playlist_id, "userId": bob_id}
    client.post("/collaborations", json=payload, headers=alice)

    assert [p["id"] for p in client.get("/playlists", headers=bob).json()["data"]["playlists"]] == [playlist_id]

    r = client.request("DELETE", "/collaborations", json=payload, headers=alice)
    assert r.status_code == 200

    assert client.get("/playlists", headers=bob).json()["data"]["playlists"] == []
    assert client.get(f"/playlists/{playlist_id}/songs", headers=bob).status_code == 403

    r = client.request("DELETE", "/collaborations", json=payload, headers=alice)
    assert r.status_code == 400


def test_collaboration_requires_authentication(client):
    r = client.post("/collaborations", json={"playlistId": "playlist-x", "userId": "user-y"})
    assert r.status_code == 401
