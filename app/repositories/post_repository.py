"""게시글 레포지토리 — 게시글 CRUD 및 작성자별 조회.

Post Repository — CRUD and owner-scoped queries for posts.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Post
from app.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """게시글 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the posts table.
    """

    def __init__(self) -> None:
        super().__init__(Post)

    async def find_all_by_owner(
        self,
        db: AsyncSession,
        owner_id: int,
    ) -> Sequence[Post]:
        """작성자의 모든 게시글을 조회합니다.

        Retrieve all posts owned by a user. The user itself is not checked;
        an unknown owner simply yields an empty list.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            owner_id: 작성자 ID (Owning user ID)

        Returns:
            Sequence[Post]: 게시글 목록 (List of posts)
        """
        return await self.list_all(db, filters={"owner_id": owner_id})


# 싱글턴 인스턴스 — Singleton instance
post_repository: PostRepository = PostRepository()
