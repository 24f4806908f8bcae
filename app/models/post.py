"""게시글 SQLAlchemy ORM 모델 정의.

Post SQLAlchemy ORM model definition.

Tables:
    - posts: 게시글 (Posts, each owned by exactly one user)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Post(Base):
    """게시글 모델 — 사용자가 소유한 글.

    Post model — A titled text body owned by a user.
    A post cannot be created without an existing owner.

    Attributes:
        id: 고유 식별자 (Unique identifier, auto-generated, immutable)
        title: 제목 (Title, required)
        body: 본문 (Body text, required)
        owner_id: 작성자 FK (Owning user foreign key)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        owner: 작성자 (Owning user)
    """

    __tablename__ = "posts"

    # 게시글 고유 식별자 — Post unique identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 제목 — Post title
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # 본문 — Post body
    body: Mapped[str] = mapped_column(Text, nullable=False)
    # 작성자 FK — Owning user (CASCADE: 사용자 삭제 시 게시글도 삭제)
    owner_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    owner = relationship("User", back_populates="posts")
