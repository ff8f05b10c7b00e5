"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data of the option endpoints and sends one
structured event per request to Axiom.
Logs: option type, endpoint, method, data (body/params), status code, error message.
Sensitive fields (password, token, secret) are automatically masked.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and query params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# /api/{slug}/... 에서 옵션 유형 추출 — Option slug in /api/{slug}/...
_OPTION_PATH = re.compile(r"^/api/(?P<slug>[a-z0-9_]+)/")

# 로그 크기 제한 — Size limits for logged values
_MAX_BODY_ITEMS = 20
_MAX_ERROR_LEN = 500


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask(item, depth + 1) for item in data[:_MAX_BODY_ITEMS]]
    return data


def _query_params(request: Request) -> dict[str, Any] | None:
    """반복 키(idList 등)를 리스트로 모은 쿼리 파라미터.

    Query params with repeated keys (``idList``, ``id_list``) collected into lists.
    """
    if not request.query_params:
        return None
    params: dict[str, Any] = {}
    for key in request.query_params.keys():
        values: list[str] = request.query_params.getlist(key)
        params[key] = values if len(values) > 1 else values[0]
    return _mask(params)


def _error_message(body: bytes) -> str:
    """오류 응답 본문에서 메시지 추출.

    Extract the error text from an error response body. The option API's
    envelope carries it under ``message``; FastAPI validation errors under ``detail``.
    """
    try:
        data: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_ERROR_LEN]

    if isinstance(data, dict):
        detail: Any = data.get("message", data.get("detail", data))
    else:
        detail = data
    text: str = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    if len(text) > _MAX_ERROR_LEN:
        text = text[:_MAX_ERROR_LEN] + "..."
    return text


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 옵션 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every option API request and response to Axiom.
    Pass-through when ``AXIOM_API_TOKEN`` or ``AXIOM_DATASET`` is unset.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 및 미설정시 패스스루 — Skip excluded paths, pass through if unconfigured
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time: float = time.perf_counter()
        method: str = request.method
        path: str = request.url.path
        match = _OPTION_PATH.match(path)
        option_type: str | None = match.group("slug") if match else None

        # Request body 읽기 — Read JSON body of create/update calls
        request_body: Any = None
        if method in ("POST", "PUT"):
            body_bytes: bytes = await request.body()
            if body_bytes:
                try:
                    request_body = _mask(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    request_body = "(non-json body)"

        error_detail: str | None = None
        status_code: int = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 envelope에서 메시지 추출 — Pull the message out of error envelopes
            if status_code >= 400:
                resp_body: bytes = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_message(resp_body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event: dict[str, Any] = {
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
            }
            if option_type:
                log_event["option_type"] = option_type
            query_params: dict[str, Any] | None = _query_params(request)
            if query_params:
                log_event["query_params"] = query_params
            if request.path_params:
                log_event["path_params"] = dict(request.path_params)
            if request_body is not None:
                log_event["request_body"] = request_body
            if error_detail:
                log_event["error"] = error_detail

            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

        return response
