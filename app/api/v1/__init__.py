"""API v1 라우터 패키지 — 모든 v1 엔드포인트 통합.

API v1 Router package — Aggregates all v1 endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - posts: 게시글 CRUD (Post CRUD and per-user listing)
"""

from fastapi import APIRouter

from app.api.v1.posts import router as posts_router

v1_router: APIRouter = APIRouter()

v1_router.include_router(posts_router, prefix="/posts", tags=["Posts"])
