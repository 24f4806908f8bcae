"""FastAPI 의존성 주입 모듈 — 서비스 인스턴스 제공.

FastAPI dependency injection module — Service providers.
Routes receive their service through ``Depends`` so tests can swap in a
service built on in-memory stores via ``app.dependency_overrides``.
"""

from app.services.post_service import PostService, post_service


def get_post_service() -> PostService:
    """게시글 서비스 싱글턴을 반환합니다.

    Return the application-wide PostService wired to the SQLAlchemy repositories.
    """
    return post_service
