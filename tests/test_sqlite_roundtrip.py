"""실제 ORM 경로 테스트 — async SQLite 인메모리 DB.

ORM-path tests against an in-memory async SQLite database.
Exercises flush/refresh in ``persist``, the bulk ``delete_by_id`` rowcount,
and owner reassignment through the real repositories and PostService.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.models import Post, User
from app.repositories.post_repository import post_repository
from app.repositories.user_repository import user_repository
from app.schemas.post import PostInput
from app.services.post_service import PostService
from app.utils.exceptions import EntityNotFoundError

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 테스트마다 새 스키마."""
    eng = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as s:
        yield s


@pytest_asyncio.fixture
async def owners(session: AsyncSession) -> list[User]:
    """작성자 2명을 생성합니다."""
    result = [
        User(username="alice", name="Alice", email="alice@example.com"),
        User(username="bob", name="Bob", email="bob@example.com"),
    ]
    session.add_all(result)
    await session.flush()
    return result


@pytest.fixture
def real_service() -> PostService:
    return PostService(post_repository, user_repository)


async def count_posts(session: AsyncSession) -> int:
    return (await session.execute(select(func.count()).select_from(Post))).scalar() or 0


class TestRepositoriesOnSqlite:
    """레포지토리 — 실제 DB 경로."""

    async def test_persist_assigns_id_and_defaults(self, session, owners):
        post = await post_repository.persist(
            session, Post(title="t", body="b", owner_id=owners[0].id)
        )
        assert post.id is not None
        assert post.created_at is not None
        assert await post_repository.find_by_id(session, post.id) is post

    async def test_find_all_by_owner(self, session, owners):
        alice, bob = owners
        mine = await post_repository.persist(session, Post(title="a", body="a", owner_id=alice.id))
        await post_repository.persist(session, Post(title="b", body="b", owner_id=bob.id))

        assert [p.id for p in await post_repository.find_all_by_owner(session, alice.id)] == [mine.id]
        assert list(await post_repository.find_all_by_owner(session, 999)) == []

    async def test_delete_by_id_rowcount(self, session, owners):
        post = await post_repository.persist(session, Post(title="t", body="b", owner_id=owners[0].id))

        assert await post_repository.delete_by_id(session, post.id) is True
        assert await post_repository.delete_by_id(session, post.id) is False
        assert await post_repository.find_by_id(session, post.id) is None

    async def test_user_lookup(self, session, owners):
        assert await user_repository.find_by_id(session, owners[1].id) is owners[1]
        assert await user_repository.find_by_id(session, 999) is None


class TestPostServiceOnSqlite:
    """게시글 서비스 — 실제 DB 경로."""

    async def test_create_update_delete(self, session, owners, real_service):
        alice, bob = owners

        created = await real_service.create_post(
            session, PostInput(title="title", body="body", owner_id=alice.id)
        )
        assert created.status_code == 201
        post_id = created.content.id

        # 작성자 변경 + 부분 수정 — owner reassignment with partial update
        updated = await real_service.update_post(
            session, post_id, PostInput(title="new", owner_id=bob.id)
        )
        assert updated.status_code == 201
        assert (updated.content.title, updated.content.body, updated.content.owner_id) == (
            "new", "body", bob.id,
        )
        assert (await real_service.get_posts_by_user(session, alice.id)).content == []

        # 빈 문자열은 저장된 값을 유지 — blank strings keep stored values
        kept = await real_service.update_post(session, post_id, PostInput(title="", body=""))
        assert (kept.content.title, kept.content.body) == ("new", "body")

        assert (await real_service.delete_post(session, post_id)).status_code == 204
        assert (await real_service.delete_post(session, post_id)).status_code == 404
        assert (await real_service.get_post(session, post_id)).status_code == 404

    async def test_unknown_owner_persists_nothing(self, session, owners, real_service):
        with pytest.raises(EntityNotFoundError):
            await real_service.create_post(
                session, PostInput(title="t", body="b", owner_id=999)
            )
        await session.rollback()

        assert await count_posts(session) == 0
