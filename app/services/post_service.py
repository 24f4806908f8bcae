"""게시글 서비스 — 게시글 CRUD 비즈니스 로직.

Post Service — Business logic for post CRUD operations.

Every operation returns a ``ServiceResult`` (status code + body). Expected
failures (missing fields, unknown post) come back as ``ErrorResponse``
results; an unresolvable owner reference raises ``EntityNotFoundError``
and is not converted here.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Post
from app.models.user import User
from app.repositories.post_repository import PostRepository, post_repository
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.common import ErrorResponse, ServiceResult
from app.schemas.post import PostInput
from app.services import post_mapper
from app.utils.exceptions import EntityNotFoundError

# 오류 메시지 — Error message templates
POST_NOT_FOUND_MESSAGE: str = "Post not found for ID: {post_id}"
POST_FIELDS_REQUIRED_MESSAGE: str = "Post title, body and user ID must not be null"


class PostService:
    """게시글 관련 비즈니스 로직을 처리하는 서비스.

    Service handling post business logic.
    Both stores are injected through the constructor so tests can pass
    in-memory fakes.

    Attributes:
        posts: 게시글 저장소 (Post store)
        users: 사용자 저장소 (User store)
    """

    def __init__(
        self,
        posts: PostRepository,
        users: UserRepository,
    ) -> None:
        self.posts: PostRepository = posts
        self.users: UserRepository = users

    def _not_found(self, post_id: int) -> ServiceResult:
        """404 결과 생성 (Build the standard post-not-found result)."""
        return ServiceResult(
            status_code=404,
            content=ErrorResponse(message=POST_NOT_FOUND_MESSAGE.format(post_id=post_id)),
        )

    async def _resolve_owner(self, db: AsyncSession, owner_id: int) -> User:
        """작성자를 조회하고, 없으면 EntityNotFoundError를 발생시킵니다.

        Resolve an owner reference or raise.

        Raises:
            EntityNotFoundError: 사용자가 존재하지 않을 때 (User does not exist)
        """
        owner: User | None = await self.users.find_by_id(db, owner_id)
        if owner is None:
            raise EntityNotFoundError("User", owner_id)
        return owner

    async def list_posts(self, db: AsyncSession) -> ServiceResult:
        """모든 게시글을 조회합니다.

        List every post in persistence-layer order.
        """
        posts: Sequence[Post] = await self.posts.list_all(db)
        return ServiceResult(
            status_code=200,
            content=[post_mapper.to_response(p) for p in posts],
        )

    async def get_post(self, db: AsyncSession, post_id: int) -> ServiceResult:
        """게시글 단건을 조회합니다.

        Retrieve a single post.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post identifier)

        Returns:
            ServiceResult: 200 + 게시글, 또는 404 + 오류 메시지
                           (200 with the post, or 404 with an error message)
        """
        post: Post | None = await self.posts.find_by_id(db, post_id)
        if post is None:
            return self._not_found(post_id)
        return ServiceResult(status_code=200, content=post_mapper.to_response(post))

    async def get_posts_by_user(self, db: AsyncSession, user_id: int) -> ServiceResult:
        """작성자별 게시글 목록을 조회합니다.

        List posts owned by ``user_id``. The user's existence is not checked.
        """
        posts: Sequence[Post] = await self.posts.find_all_by_owner(db, user_id)
        return ServiceResult(
            status_code=200,
            content=[post_mapper.to_response(p) for p in posts],
        )

    async def create_post(self, db: AsyncSession, data: PostInput) -> ServiceResult:
        """새 게시글을 생성합니다.

        Create a post. Title, body and owner are all required.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 게시글 생성 데이터 (Post write-view)

        Returns:
            ServiceResult: 201 + 생성된 게시글, 또는 400 + 오류 메시지
                           (201 with the created post, or 400 with an error message)

        Raises:
            EntityNotFoundError: 작성자가 존재하지 않을 때 (Owner does not exist)
        """
        # 필수 필드 검증 — Required field validation (nothing is persisted on failure)
        if not data.title or not data.body or data.owner_id is None:
            return ServiceResult(
                status_code=400,
                content=ErrorResponse(message=POST_FIELDS_REQUIRED_MESSAGE),
            )

        # 작성자 확인은 저장 전에 — Owner is resolved before anything is persisted
        owner: User = await self._resolve_owner(db, data.owner_id)

        post: Post = await self.posts.persist(db, post_mapper.to_entity(data, owner))
        return ServiceResult(status_code=201, content=post_mapper.to_response(post))

    async def update_post(
        self,
        db: AsyncSession,
        post_id: int,
        data: PostInput,
    ) -> ServiceResult:
        """게시글을 부분 수정합니다.

        Partially update a post. Provided fields overwrite, omitted fields
        keep their stored value.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post identifier)
            data: 부분 수정 데이터 (Partial write-view)

        Returns:
            ServiceResult: 201 + 수정된 게시글, 또는 404 + 오류 메시지
                           (201 with the merged post, or 404 with an error message)

        Raises:
            EntityNotFoundError: 새 작성자가 존재하지 않을 때 (New owner does not exist)
        """
        post: Post | None = await self.posts.find_by_id(db, post_id)
        if post is None:
            return self._not_found(post_id)

        owner: User | None = None
        if data.owner_id is not None:
            owner = await self._resolve_owner(db, data.owner_id)

        post = await self.posts.persist(db, post_mapper.apply_update(post, data, owner))
        return ServiceResult(status_code=201, content=post_mapper.to_response(post))

    async def delete_post(self, db: AsyncSession, post_id: int) -> ServiceResult:
        """게시글을 삭제합니다.

        Delete a post; 204 with no body when a row was removed, 404 otherwise.
        """
        deleted: bool = await self.posts.delete_by_id(db, post_id)
        if not deleted:
            return self._not_found(post_id)
        return ServiceResult(status_code=204)


# 싱글턴 인스턴스 — Singleton instance
post_service: PostService = PostService(post_repository, user_repository)
