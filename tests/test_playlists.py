"""Tests for playlists, playlist songs, activities and access control."""

import pytest


def test_create_playlist(client, make_user):
    _, alice = make_user("alice")
    r = client.post("/playlists", json={"name": "Road Trip"}, headers=alice)
    assert r.status_code == 201
    assert r.json()["data"]["playlistId"].startswith("playlist-")


def test_create_playlist_requires_name(client, make_user):
    _, alice = make_user("alice")
    assert client.post("/playlists", json={}, headers=alice).status_code == 400


def test_owner_is_registered_as_collaborator(client, context, make_user, make_playlist):
    from openmusic.db.models.playlist import Collaboration

    alice_id, alice = make_user("alice")
    playlist_id = make_playlist(alice)

    with context.session_factory() as db:
        users = db.query(Collaboration.user_id).filter(Collaboration.playlist_id == playlist_id).all()
    assert [u.user_id for u in users] == [alice_id]


def test_list_playlists_owned_and_shared(client, make_user, make_playlist):
    alice_id, alice = make_user("alice")
    bob_id, bob = make_user("bob")
    _, carol = make_user("carol")

    road_trip = make_playlist(alice, "Road Trip")
    gym = make_playlist(bob, "Gym")
    make_playlist(carol, "Secret")

    r = client.post("/collaborations", json={"playlistId": road_trip, "userId": bob_id}, headers=alice)
    assert r.status_code == 201

    playlists = client.get("/playlists", headers=bob).json()["data"]["playlists"]
    assert sorted(playlists, key=lambda p: p["id"]) == sorted([
        {"id": road_trip, "name": "Road Trip", "username": "alice"},
        {"id": gym, "name": "Gym", "username": "bob"},
    ], key=lambda p: p["id"])

    playlists = client.get("/playlists", headers=alice).json()["data"]["playlists"]
    assert playlists == [{"id": road_trip, "name": "Road Trip", "username": "alice"}]


def test_road_trip_scenario(client, make_user, make_playlist, make_song):
    _, alice = make_user("alice")
    bob_id, bob = make_user("bob")
    song_id = make_song("Drive", "Incubus")

    playlist_id = make_playlist(alice, "Road Trip")
    r = client.post(f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=alice)
    assert r.status_code == 201

    activities = client.get(f"/playlists/{playlist_id}/activities", headers=alice).json()["data"]["activities"]
    assert [(a["username"], a["title"], a["action"]) for a in activities] == [("alice", "Drive", "add")]

    r = client.get(f"/playlists/{playlist_id}/songs", headers=bob)
    assert r.status_code == 403
    assert r.json()["status"] == "fail"

    client.post("/collaborations", json={"playlistId": playlist_id, "userId": bob_id}, headers=alice)

    r = client.get(f"/playlists/{playlist_id}/songs", headers=bob)
    assert r.status_code == 200
    playlist = r.json()["data"]["playlist"]
    assert playlist["id"] == playlist_id
    assert playlist["name"] == "Road Trip"
    assert playlist["username"] == "alice"
    assert playlist["songs"] == [{"id": song_id, "title": "Drive", "performer": "Incubus"}]


def test_add_then_remove_logs_two_activities(client, make_user, make_playlist, make_song):
    _, alice = make_user("alice")
    playlist_id = make_playlist(alice)
    song_id = make_song("Yellow")

    client.post(f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=alice)
    r = client.request("DELETE", f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=alice)
    assert r.status_code == 200

    songs = client.get(f"/playlists/{playlist_id}/songs", headers=alice).json()["data"]["playlist"]["songs"]
    assert songs == []

    r = client.get(f"/playlists/{playlist_id}/activities", headers=alice)
    data = r.json()["data"]
    assert data["playlistId"] == playlist_id
    assert [a["action"] for a in data["activities"]] == ["add", "delete"]
    assert all(a["username"] == "alice" and a["title"] == "Yellow" for a in data["activities"])
    assert all(a["time"] for a in data["activities"])


def test_add_missing_song_to_playlist(client, make_user, make_playlist):
    _, alice = make_user("alice")
    playlist_id = make_playlist(alice)
    r = client.post(f"/playlists/{playlist_id}/songs", json={"songId": "song-missing"}, headers=alice)
    assert r.status_code == 404

    activities = client.get(f"/playlists/{playlist_id}/activities", headers=alice).json()["data"]["activities"]
    assert activities == []


def test_add_song_twice_is_rejected(client, make_user, make_playlist, make_song):
    _, alice = make_user("alice")
    playlist_id = make_playlist(alice)
    song_id = make_song()

    assert client.post(f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=alice).status_code == 201
    r = client.post(f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=alice)
    assert r.status_code == 400


def test_remove_song_not_in_playlist(client, make_user, make_playlist, make_song):
    _, alice = make_user("alice")
    playlist_id = make_playlist(alice)
    song_id = make_song()

    r = client.request("DELETE", f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=alice)
    assert r.status_code == 404


def test_deleted_song_leaves_playlist(client, make_user, make_playlist, make_song):
    _, alice = make_user("alice")
    playlist_id = make_playlist(alice)
    song_id = make_song("Gone")
    client.post(f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=alice)
    client.get(f"/playlists/{playlist_id}/songs", headers=alice)

    client.delete(f"/songs/{song_id}")

    r = client.get(f"/playlists/{playlist_id}/songs", headers=alice)
    assert r.json()["data"]["playlist"]["songs"] == []


def test_delete_playlist_cascades(client, context, make_user, make_playlist, make_song):
    from openmusic.db.models.playlist import Collaboration, PlaylistSong, PlaylistSongActivity

    _, alice = make_user("alice")
    playlist_id = make_playlist(alice)
    song_id = make_song()
    client.post(f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=alice)

    assert client.delete(f"/playlists/{playlist_id}", headers=alice).status_code == 200
    assert client.get(f"/playlists/{playlist_id}/songs", headers=alice).status_code == 404
    assert client.get("/playlists", headers=alice).json()["data"]["playlists"] == []

    with context.session_factory() as db:
        for model in (PlaylistSong, Collaboration, PlaylistSongActivity):
            assert db.query(model).filter(model.playlist_id == playlist_id).count() == 0


@pytest.fixture
def shared_playlist(client, make_user, make_playlist, make_song):
    """A playlist owned by alice, shared with bob, and invisible to carol"""
    _, alice = make_user("alice")
    bob_id, bob = make_user("bob")
    _, carol = make_user("carol")
    playlist_id = make_playlist(alice, "Shared")
    client.post("/collaborations", json={"playlistId": playlist_id, "userId": bob_id}, headers=alice)
    return playlist_id, {"owner": alice, "collaborator": bob, "stranger": carol}, make_song()


@pytest.mark.parametrize("role, expected", [
    ("owner", 200),
    ("collaborator", 200),
    ("stranger", 403),
])
def test_read_access(client, shared_playlist, role, expected):
    playlist_id, headers, _ = shared_playlist
    assert client.get(f"/playlists/{playlist_id}/songs", headers=headers[role]).status_code == expected
    assert client.get(f"/playlists/{playlist_id}/activities", headers=headers[role]).status_code == expected


@pytest.mark.parametrize("role, expected", [
    ("owner", 201),
    ("collaborator", 201),
    ("stranger", 403),
])
def test_song_write_access(client, shared_playlist, role, expected):
    playlist_id, headers, song_id = shared_playlist
    r = client.post(f"/playlists/{playlist_id}/songs", json={"songId": song_id}, headers=headers[role])
    assert r.status_code == expected


@pytest.mark.parametrize("role, expected", [
    ("owner", 200),
    ("collaborator", 403),
    ("stranger", 403),
])
def test_delete_access(client, shared_playlist, role, expected):
    playlist_id, headers, _ = shared_playlist
    assert client.delete(f"/playlists/{playlist_id}", headers=headers[role]).status_code == expected


def test_missing_playlist_is_not_found_for_everyone(client, shared_playlist):
    _, headers, song_id = shared_playlist
    for role in ("owner", "stranger"):
        h = headers[role]
        assert client.get("/playlists/playlist-missing/songs", headers=h).status_code == 404
        assert client.get("/playlists/playlist-missing/activities", headers=h).status_code == 404
        assert client.delete("/playlists/playlist-missing", headers=h).status_code == 404
        r = client.post("/playlists/playlist-missing/songs", json={"songId": song_id}, headers=h)
        assert r.status_code == 404
