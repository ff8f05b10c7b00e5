"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 오류 핸들러 및 라우터 등록.

FastAPI application entry point — Middleware, error handlers and router registration.
Configures CORS, request logging, health check, the message envelope for every
failed request, and one router per option type under /api/{slug}.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.schemas.common import message_response
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 옵션 서비스가 발생시키는 오류 — Errors raised by the option services
_SERVICE_ERRORS = (BadRequestError, DuplicateError, NotFoundError)


def _envelope(message: str, status_code: int) -> JSONResponse:
    """오류 메시지 envelope 응답 — Error message envelope response."""
    body = message_response(message, status_code)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException을 메시지 envelope으로 변환합니다.

    Render HTTPException subclasses (NotFoundError, DuplicateError, BadRequestError)
    as the message envelope. With ``LEGACY_ERROR_STATUS`` those service errors
    become a 500; routing errors (unknown path, wrong method) keep their status.
    """
    message: str = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if settings.LEGACY_ERROR_STATUS and isinstance(exc, _SERVICE_ERRORS):
        return _envelope(f"Internal Server Error: {message}", 500)
    return _envelope(message, exc.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 예외를 500 envelope으로 변환합니다.

    Render any other exception as a 500 envelope.
    """
    return _envelope(f"Internal Server Error: {exc}", 500)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — 옵션 유형별 라우터를 /api/{slug} 아래에 등록
# Router registration — One router per option type under /api/{slug}
# ---------------------------------------------------------------------------
from app.api import option_router  # noqa: E402

app.include_router(option_router, prefix="/api")
