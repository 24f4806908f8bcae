"""커스텀 예외 클래스 모듈.

Custom exception classes module.

Expected domain conditions (missing fields, unknown post) are not
exceptions in this service; they are returned as ``ServiceResult`` values.
Only broken references raise, and they propagate out of the service.

Usage:
    from app.utils.exceptions import EntityNotFoundError
    raise EntityNotFoundError("User", user_id)
"""

from typing import Any


class EntityNotFoundError(Exception):
    """참조 엔티티 없음 예외 — 요청이 존재하지 않는 엔티티를 참조할 때 사용.

    Raised when a request references an entity that does not exist
    (e.g. a post whose ``ownerId`` points to no user). Services let it
    propagate; nothing is persisted once it has been raised.

    Args:
        entity: 엔티티 이름 (Entity name, e.g. "User")
        entity_id: 찾지 못한 ID (Identifier that could not be resolved)
    """

    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity: str = entity
        self.entity_id: Any = entity_id
        super().__init__(f"{entity} not found for ID: {entity_id}")
