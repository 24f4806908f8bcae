"""서비스 결과 → HTTP 응답 변환 유틸리티.

Conversion of ``ServiceResult`` values into Starlette responses.
Bodies are serialized by alias so the wire format uses ``ownerId``.
"""

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.schemas.common import ServiceResult


def to_http_response(result: ServiceResult) -> Response:
    """ServiceResult를 HTTP 응답으로 변환합니다.

    Render a service result. A result without content becomes an empty
    response (used for 204 No Content).

    Args:
        result: 서비스 처리 결과 (Service result)

    Returns:
        Response: JSON 응답 또는 빈 응답 (JSON response or empty response)
    """
    if result.content is None:
        return Response(status_code=result.status_code)
    return JSONResponse(
        status_code=result.status_code,
        content=jsonable_encoder(result.content, by_alias=True),
    )
