"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared by service and API layers.
"""

from typing import Union

from pydantic import BaseModel

from app.schemas.post import PostResponse


class ErrorResponse(BaseModel):
    """오류 응답 스키마.

    Error response body. Every handled failure is rendered as
    ``{"message": "..."}``.
    """

    message: str


class ServiceResult(BaseModel):
    """서비스 처리 결과 — 상태 코드와 응답 본문.

    Result-with-status returned by service operations.
    The API layer turns it into an HTTP response without further decisions.

    Attributes:
        status_code: HTTP 상태 코드 (HTTP status code)
        content: 응답 본문, 204이면 None (Response body, None for 204)
    """

    status_code: int
    content: Union[PostResponse, list[PostResponse], ErrorResponse, None] = None

    @property
    def is_error(self) -> bool:
        """4xx/5xx 여부 (Whether the result carries an error)."""
        return self.status_code >= 400
