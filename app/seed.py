"""초기 데이터 시드 스크립트 — 데모 사용자 및 게시글 생성.

Seed script — Creates demo users and a sample post.
Users cannot be created through the API, so run this once to bootstrap
the database.

Usage:
    python -m app.seed

Creates:
    - 2명의 사용자: alice, bob (2 users)
    - 1개의 게시글: alice 작성 (1 post owned by alice)
"""

import asyncio

from app.database import async_session, engine, Base
from app.models import Post, User
from app.repositories.user_repository import user_repository

# 시드 사용자 — (username, name, email)
SEED_USERS: list[tuple[str, str, str]] = [
    ("alice", "Alice Kim", "alice@example.com"),
    ("bob", "Bob Lee", "bob@example.com"),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts demo users and a post.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        # 첫 번째 사용자가 있으면 이미 시드된 것으로 간주
        # (Treat the presence of the first seed user as already seeded)
        if await user_repository.exists(db, {"username": SEED_USERS[0][0]}):
            print("Already seeded. Skipping.")
            return

        users: list[User] = []
        for username, name, email in SEED_USERS:
            user: User = User(username=username, name=name, email=email)
            db.add(user)
            users.append(user)
        await db.flush()  # flush로 user.id 생성 (Flush to generate user ids)

        db.add(Post(title="Hello", body="First post on the board.", owner_id=users[0].id))

        await db.commit()
        print(f"Seeded: users={[u.id for u in users]}")


if __name__ == "__main__":
    asyncio.run(seed())
