"""사용자 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
Users are created out-of-band (seed script / migrations); the API only
references them as post owners.

Tables:
    - users: 사용자 계정 (User accounts owning posts)
"""

from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class User(Base):
    """사용자 모델 — 게시글 소유자.

    User model — Owner of zero or more posts.

    Attributes:
        id: 고유 식별자 (Unique identifier, auto-generated)
        username: 로그인 아이디 (Login username)
        name: 표시 이름 (Display name)
        email: 이메일 (Email address)
        created_at: 생성 일시 UTC (Creation timestamp)

    Relationships:
        posts: 이 사용자가 작성한 게시글 (Posts owned by this user, cascade delete)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 로그인 아이디 — Login username (전역 고유, globally unique)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    # 표시 이름 — Display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 — Email address
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    posts = relationship("Post", back_populates="owner", cascade="all, delete-orphan")
