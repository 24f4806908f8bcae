"""게시글 라우터 — 게시글 CRUD 엔드포인트.

Post Router — CRUD endpoints for posts.
Routes only translate HTTP to service calls; status codes and bodies are
decided by ``PostService`` and rendered with ``to_http_response``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_post_service
from app.database import get_db
from app.schemas.common import ErrorResponse, ServiceResult
from app.schemas.post import PostInput, PostResponse
from app.services.post_service import PostService
from app.utils.responses import to_http_response

router: APIRouter = APIRouter()

# OpenAPI 문서용 오류 응답 정의 — Error responses for OpenAPI docs
_NOT_FOUND: dict = {404: {"model": ErrorResponse}}


@router.get("/", response_model=list[PostResponse])
async def list_posts(
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PostService, Depends(get_post_service)],
) -> Response:
    """게시글 목록을 조회합니다.

    List all posts.
    """
    return to_http_response(await service.list_posts(db))


@router.get("/user/{user_id}", response_model=list[PostResponse])
async def list_posts_by_user(
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PostService, Depends(get_post_service)],
) -> Response:
    """작성자별 게시글 목록을 조회합니다.

    List posts owned by a user (empty list for unknown users).
    """
    return to_http_response(await service.get_posts_by_user(db, user_id))


@router.get("/{post_id}", response_model=PostResponse, responses=_NOT_FOUND)
async def get_post(
    post_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PostService, Depends(get_post_service)],
) -> Response:
    """게시글 상세를 조회합니다.

    Retrieve a single post.
    """
    return to_http_response(await service.get_post(db, post_id))


@router.post(
    "/",
    response_model=PostResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def create_post(
    data: PostInput,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PostService, Depends(get_post_service)],
) -> Response:
    """새 게시글을 생성합니다.

    Create a new post.
    """
    result: ServiceResult = await service.create_post(db, data)
    if not result.is_error:
        await db.commit()
    return to_http_response(result)


@router.put("/{post_id}", response_model=PostResponse, status_code=201, responses=_NOT_FOUND)
async def update_post(
    post_id: int,
    data: PostInput,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PostService, Depends(get_post_service)],
) -> Response:
    """게시글을 부분 수정합니다.

    Partially update a post; omitted fields are kept.
    """
    result: ServiceResult = await service.update_post(db, post_id, data)
    if not result.is_error:
        await db.commit()
    return to_http_response(result)


@router.delete("/{post_id}", status_code=204, responses=_NOT_FOUND)
async def delete_post(
    post_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PostService, Depends(get_post_service)],
) -> Response:
    """게시글을 삭제합니다.

    Delete a post by its ID.
    """
    result: ServiceResult = await service.delete_post(db, post_id)
    if not result.is_error:
        await db.commit()
    return to_http_response(result)
