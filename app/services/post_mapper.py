"""게시글 엔티티 ↔ 전송 객체 변환 모듈.

Post entity/transfer-object mapping.
The ORM entity never leaves the service layer; these functions are the
only place where the two shapes meet.
"""

from app.models.post import Post
from app.models.user import User
from app.schemas.post import PostInput, PostResponse


def to_response(post: Post) -> PostResponse:
    """게시글 모델을 응답 스키마로 변환합니다.

    Convert a Post entity to its read-view.
    """
    return PostResponse(
        id=post.id,
        title=post.title,
        body=post.body,
        owner_id=post.owner_id,
    )


def to_entity(data: PostInput, owner: User) -> Post:
    """요청 데이터와 작성자로 새 게시글 엔티티를 생성합니다.

    Build a new, not yet persisted Post from a validated write-view
    and its resolved owner.
    """
    # owner_id도 함께 설정 — flush 전에도 응답 변환이 가능하도록
    # Set owner_id explicitly so the entity maps before flush
    return Post(
        title=data.title,
        body=data.body,
        owner=owner,
        owner_id=owner.id,
    )


def apply_update(post: Post, data: PostInput, owner: User | None = None) -> Post:
    """부분 업데이트 — 전달된 필드만 덮어씁니다.

    Overlay a partial write-view onto an existing entity.
    Fields that are ``None`` or empty in ``data`` keep their stored value,
    so title and body never become blank. The owner is replaced only when
    a resolved ``owner`` is given.

    Args:
        post: 기존 게시글 (Existing post entity, mutated in place)
        data: 부분 수정 데이터 (Partial write-view)
        owner: 새 작성자, 없으면 유지 (New resolved owner, None keeps current)

    Returns:
        Post: 병합된 게시글 (The same entity with merged state)
    """
    if data.title:
        post.title = data.title
    if data.body:
        post.body = data.body
    if owner is not None:
        post.owner = owner
        post.owner_id = owner.id
    return post
