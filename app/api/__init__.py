"""옵션 API 라우터 패키지 — 카탈로그의 모든 옵션 유형 엔드포인트 통합.

Option API Router package — Aggregates the endpoints of every option type in
the catalog into a single router for inclusion in the FastAPI application.
Each option type is mounted under /{slug}, e.g. /country_option/read/all.
"""

from fastapi import APIRouter

from app.api.options import build_option_router
from app.catalog import OPTION_TYPES

# 옵션 통합 라우터 — Aggregated option router
option_router: APIRouter = APIRouter()

for _option_type in OPTION_TYPES:
    option_router.include_router(build_option_router(_option_type), prefix=f"/{_option_type.slug}")
