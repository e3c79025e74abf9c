"""Shared fixtures: an app over in-memory SQLite and an in-process Redis stand-in."""

from typing import Callable, Dict, List, Optional, Tuple

import pytest
import redis
from fastapi.testclient import TestClient
from sqlalchemy import event

from openmusic.config import Settings
from openmusic.context import AppContext
from openmusic.main import create_app


class FakeRedis:
    """In-memory Redis stub covering the commands the app uses.

    Every call is recorded in `calls` as (method, args) so tests can assert
    which keys were read, written or invalidated.
    """

    def __init__(self) -> None:
        self.strings: Dict[str, str] = {}
        self.lists: Dict[str, List[str]] = {}
        self.expiry: Dict[str, int] = {}
        self.calls: List[Tuple[str, tuple]] = []
        self.closed = False
        # simulates an outage: every command raises until reset
        self.down = False

    def _record(self, method: str, *args) -> None:
        if self.down:
            raise redis.exceptions.ConnectionError(f"{method}: connection refused")
        self.calls.append((method, args))

    def get_calls(self, method: str) -> List[tuple]:
        return [args for name, args in self.calls if name == method]

    def deleted_keys(self) -> List[str]:
        return [key for args in self.get_calls("delete") for key in args]

    def reset_calls(self) -> None:
        self.calls.clear()

    def ping(self) -> bool:
        self._record("ping")
        return True

    def get(self, key: str) -> Optional[str]:
        self._record("get", key)
        return self.strings.get(key)

    def setex(self, key: str, seconds: int, value: str) -> bool:
        self._record("setex", key, seconds, value)
        self.strings[key] = value
        self.expiry[key] = seconds
        return True

    def delete(self, *keys: str) -> int:
        self._record("delete", *keys)
        removed = 0
        for key in keys:
            if self.strings.pop(key, None) is not None:
                removed += 1
            self.expiry.pop(key, None)
        return removed

    def rpush(self, name: str, *values: str) -> int:
        self._record("rpush", name, *values)
        self.lists.setdefault(name, []).extend(values)
        return len(self.lists[name])

    def close(self) -> None:
        self._record("close")
        self.closed = True


class StatementLog:
    """Collects SQL statements executed against an engine."""

    def __init__(self) -> None:
        self.statements: List[str] = []

    def __call__(self, conn, cursor, statement, parameters, context, executemany) -> None:
        self.statements.append(statement)

    def clear(self) -> None:
        self.statements.clear()

    def touching(self, table: str) -> List[str]:
        return [s for s in self.statements if table in s]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        ACCESS_TOKEN_KEY="test-access-key-0123456789abcdef0123456789",
        REFRESH_TOKEN_KEY="test-refresh-key-0123456789abcdef012345678",
        UPLOAD_DIR=str(tmp_path / "covers"),
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def context(settings: Settings, fake_redis: FakeRedis) -> AppContext:
    return AppContext(settings, redis_client=fake_redis)


@pytest.fixture
def statement_log(context: AppContext) -> StatementLog:
    log = StatementLog()
    event.listen(context.engine, "before_cursor_execute", log)
    yield log
    event.remove(context.engine, "before_cursor_execute", log)


@pytest.fixture
def client(context: AppContext):
    app = create_app(context=context)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(client: TestClient) -> Callable[..., Tuple[str, Dict[str, str]]]:
    """Register a user, log in, and return (user_id, auth headers)."""

    def _make_user(username: str, password: str = "secret", fullname: Optional[str] = None):
        r = client.post(
            "/users",
            json={"username": username, "password": password, "fullname": fullname or username.title()},
        )
        assert r.status_code == 201, r.text
        user_id = r.json()["data"]["userId"]

        r = client.post("/authentications", json={"username": username, "password": password})
        assert r.status_code == 201, r.text
        token = r.json()["data"]["accessToken"]
        return user_id, {"Authorization": f"Bearer {token}"}

    return _make_user


@pytest.fixture
def make_song(client: TestClient) -> Callable[..., str]:
    def _make_song(title: str = "Song", performer: str = "Artist", **extra) -> str:
        payload = {"title": title, "year": 2020, "genre": "Pop", "performer": performer, **extra}
        r = client.post("/songs", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["data"]["songId"]

    return _make_song


@pytest.fixture
def make_playlist(client: TestClient) -> Callable[[Dict[str, str], str], str]:
    def _make_playlist(headers: Dict[str, str], name: str = "Playlist") -> str:
        r = client.post("/playlists", json={"name": name}, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()["data"]["playlistId"]

    return _make_playlist
