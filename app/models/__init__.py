"""SQLAlchemy ORM 모델 패키지 — 모든 옵션 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all option models.
Importing from this package ensures every generated option model is
registered with the SQLAlchemy metadata, which is required for Alembic
migrations and test schema creation.

Modules:
    option: 공통 컬럼 믹스인과 카탈로그 기반 모델 생성 (Shared mixin and catalog-driven model factory)
"""

from app.models.option import OPTION_MODELS, OptionMixin, build_option_model

__all__ = [
    "OPTION_MODELS",
    "OptionMixin",
    "build_option_model",
]
