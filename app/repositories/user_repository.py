"""사용자 레포지토리 — 게시글 작성자 조회.

User Repository — Lookup of users referenced as post owners.
"""

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    Only ``find_by_id`` is used by the API; users are created by the seed script.
    """

    def __init__(self) -> None:
        super().__init__(User)


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
