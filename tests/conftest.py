"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Every test gets freshly created option tables on a StaticPool engine, so
the single in-memory connection is shared by the session and the app.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models import OPTION_MODELS  # noqa: F401 — register all option models with metadata
from app.schemas.option import OPTION_SCHEMAS, OptionIn
from app.services.option_service import OptionService, option_services

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다.

    처리되지 않은 예외도 500 응답으로 받도록 raise_app_exceptions=False.
    """
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def legacy_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """모든 서비스 오류를 500으로 응답하는 호환 모드를 켭니다."""
    monkeypatch.setattr(settings, "LEGACY_ERROR_STATUS", True)


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 서비스 및 요청 생성
# ---------------------------------------------------------------------------
@pytest.fixture
def country_service() -> OptionService:
    """국가 옵션 서비스 (추가 필드 dial_code, code 포함)."""
    return option_services["country_option"]


@pytest.fixture
def scheme_service() -> OptionService:
    """추가 필드가 없는 일반 옵션 서비스."""
    return option_services["scheme_option"]


def country(record_id: str | None, name: str, **fields) -> OptionIn:
    """국가 옵션 요청 스키마를 생성합니다."""
    data = {"dial_code": "+250", "code": "RW", **fields}
    return OPTION_SCHEMAS["country_option"].request(id=record_id, name=name, **data)


def scheme(record_id: str | None, name: str, **fields) -> OptionIn:
    """일반 옵션 요청 스키마를 생성합니다."""
    return OPTION_SCHEMAS["scheme_option"].request(id=record_id, name=name, **fields)
