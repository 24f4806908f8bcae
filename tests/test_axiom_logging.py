"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests with a mocked Axiom client.
"""

from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from app.middleware.axiom_logging import AxiomLoggingMiddleware, extract_error


def make_app(client: MagicMock) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=client)

    @app.post("/echo")
    async def echo(payload: dict) -> dict:
        return payload

    @app.get("/missing")
    async def missing() -> JSONResponse:
        return JSONResponse(status_code=404, content={"message": "Post not found for ID: 1"})

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


async def test_logs_masked_request_body():
    axiom = MagicMock()
    app = make_app(axiom)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        res = await ac.post("/echo", json={"title": "t", "api_key": "secret"})

    assert res.status_code == 200
    assert res.json() == {"title": "t", "api_key": "secret"}
    dataset, events = axiom.ingest_events.call_args.args
    assert events[0]["method"] == "POST"
    assert events[0]["path"] == "/echo"
    assert events[0]["request_body"] == {"title": "t", "api_key": "***"}


async def test_logs_error_message():
    axiom = MagicMock()
    app = make_app(axiom)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        res = await ac.get("/missing")

    assert res.status_code == 404
    assert res.json() == {"message": "Post not found for ID: 1"}
    events = axiom.ingest_events.call_args.args[1]
    assert events[0]["status_code"] == 404
    assert events[0]["error"] == "Post not found for ID: 1"


async def test_skips_health_and_survives_ingest_failure():
    axiom = MagicMock()
    axiom.ingest_events.side_effect = RuntimeError("axiom down")
    app = make_app(axiom)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        assert (await ac.get("/health")).status_code == 200
        axiom.ingest_events.assert_not_called()
        assert (await ac.get("/missing")).status_code == 404


def test_extract_error_uses_detail_and_raw_text():
    assert extract_error(b'{"detail": "Not Found"}') == "Not Found"
    assert extract_error(b"plain failure") == "plain failure"
