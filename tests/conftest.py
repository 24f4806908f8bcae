"""테스트 인프라 — 인메모리 저장소, 서비스, httpx 클라이언트 픽스처.

Test infrastructure — In-memory stores, service, and httpx client fixtures.
PostService receives fake repositories through its constructor; the HTTP
tests swap the service and DB session via ``app.dependency_overrides``,
so no database server is needed.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_post_service
from app.database import get_db
from app.main import app
from app.models import Post, User
from app.services.post_service import PostService


# ---------------------------------------------------------------------------
# 인메모리 저장소 — In-memory stores mirroring the repository interface
# ---------------------------------------------------------------------------
class InMemoryUserRepository:
    """사용자 저장소 대역 (Fake user store)."""

    def __init__(self) -> None:
        self.rows: dict[int, User] = {}
        self.lookups: list[int] = []

    def add(self, user: User) -> User:
        self.rows[user.id] = user
        return user

    async def find_by_id(self, db: Any, record_id: int) -> User | None:
        self.lookups.append(record_id)
        return self.rows.get(record_id)


class InMemoryPostRepository:
    """게시글 저장소 대역 (Fake post store)."""

    def __init__(self) -> None:
        self.rows: dict[int, Post] = {}
        self.persisted: list[Post] = []
        self._next_id: int = 1

    def add(self, post: Post) -> Post:
        if post.id is None:
            post.id = self._next_id
        self._next_id = max(self._next_id, post.id) + 1
        self.rows[post.id] = post
        return post

    async def list_all(self, db: Any, filters: dict[str, Any] | None = None) -> list[Post]:
        return list(self.rows.values())

    async def find_by_id(self, db: Any, record_id: int) -> Post | None:
        return self.rows.get(record_id)

    async def find_all_by_owner(self, db: Any, owner_id: int) -> list[Post]:
        return [p for p in self.rows.values() if p.owner_id == owner_id]

    async def persist(self, db: Any, db_obj: Post) -> Post:
        self.persisted.append(db_obj)
        return self.add(db_obj)

    async def delete_by_id(self, db: Any, record_id: int) -> bool:
        return self.rows.pop(record_id, None) is not None


class FakeSession:
    """커밋 횟수만 기록하는 세션 대역 (Session stand-in counting commits)."""

    def __init__(self) -> None:
        self.commits: int = 0

    async def commit(self) -> None:
        self.commits += 1


# ---------------------------------------------------------------------------
# 픽스처 — Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def posts() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def user(users: InMemoryUserRepository) -> User:
    """기본 작성자 (id=1)."""
    return users.add(User(id=1, username="username", name="user", email="email"))


@pytest.fixture
def post(posts: InMemoryPostRepository, user: User) -> Post:
    """기본 게시글 (id=7, 작성자 id=1)."""
    return posts.add(Post(id=7, title="title", body="body", owner=user, owner_id=user.id))


@pytest.fixture
def service(posts: InMemoryPostRepository, users: InMemoryUserRepository) -> PostService:
    return PostService(posts, users)  # type: ignore[arg-type]


@pytest.fixture
def db() -> FakeSession:
    return FakeSession()


@pytest_asyncio.fixture
async def client(service: PostService, db: FakeSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 서비스와 DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[FakeSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_post_service] = lambda: service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
