"""조회용 옵션 SQLAlchemy ORM 모델 정의.

Lookup option SQLAlchemy ORM model definitions.
Every option type in the catalog gets its own table with identical columns
(plus any extra columns the type declares). The classes are generated from
the catalog instead of being written by hand for each table.

Tables:
    - <slug>: 옵션 유형별 테이블 (One table per option type, e.g. country_option)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.catalog import OPTION_TYPES, OptionType
from app.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OptionMixin:
    """모든 옵션 테이블의 공통 컬럼.

    Columns shared by every option table.

    Attributes:
        id: 외부에서 생성된 문자열 식별자 (Externally generated string identifier)
        name: 옵션 이름, 생성 시에만 중복 검사 (Option name, uniqueness checked on create only)
        description: 설명 (Optional free text)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)
        updated_at: 수정 일시 UTC (Last update timestamp in UTC)
        deleted_at: 소프트 삭제 일시, None이면 활성 (Soft-delete timestamp, None means active)
    """

    # 옵션 고유 식별자 — "<PREFIX>_<timestamp>_<random>" 형식 (assigned before insert)
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    # 옵션 이름 — DB 유니크 제약 없음, 서비스에서 생성 시 검사 (No DB unique constraint)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # 설명 — Optional description
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, default=utcnow, onupdate=utcnow)
    # 소프트 삭제 일시 — None이면 활성 행 (None means active row)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @property
    def is_deleted(self) -> bool:
        """소프트 삭제 여부 (Whether the row is soft-deleted)."""
        return self.deleted_at is not None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} name={self.name!r}>"


def build_option_model(option_type: OptionType) -> type[OptionMixin]:
    """카탈로그 항목으로부터 ORM 모델 클래스를 생성합니다.

    Build the declarative ORM class for one option type.
    Extra fields become plain String columns, NOT NULL when required.

    Args:
        option_type: 카탈로그 항목 (Catalog entry)

    Returns:
        type[OptionMixin]: Base에 등록된 모델 클래스 (Model class registered on Base.metadata)
    """
    attrs: dict = {
        "__module__": __name__,
        "__tablename__": option_type.table_name,
    }
    for field in option_type.extra_fields:
        attrs[field.name] = mapped_column(String(field.max_length), nullable=not field.required)
    return type(option_type.model_name, (OptionMixin, Base), attrs)


# 슬러그별 모델 레지스트리 — Model registry keyed by option slug
OPTION_MODELS: dict[str, type[OptionMixin]] = {
    option_type.slug: build_option_model(option_type) for option_type in OPTION_TYPES
}
