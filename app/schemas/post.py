"""게시글 관련 Pydantic 요청/응답 스키마 정의.

Post Pydantic request/response schema definitions.
Transfer objects are kept separate from the ORM entity; the wire format
uses camelCase ``ownerId`` while Python code uses ``owner_id``.
"""

from pydantic import BaseModel, ConfigDict, Field


class PostInput(BaseModel):
    """게시글 생성/수정 요청 스키마.

    Post write-view used for both create and partial update.
    All fields are optional at the schema level; the service decides
    which ones are required (create needs all three).

    Attributes:
        title: 제목 (Title)
        body: 본문 (Body)
        owner_id: 작성자 ID (Owning user ID, wire name ``ownerId``)
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    body: str | None = None
    owner_id: int | None = Field(default=None, alias="ownerId")


class PostResponse(BaseModel):
    """게시글 응답 스키마.

    Post read-view returned by every successful post operation.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None  # 게시글 ID (Post identifier)
    title: str  # 제목 (Title)
    body: str  # 본문 (Body)
    owner_id: int = Field(alias="ownerId")  # 작성자 ID (Owner identifier)
