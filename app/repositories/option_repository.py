"""옵션 레포지토리 — 조회용 옵션 CRUD 및 소프트 삭제 관련 쿼리.

Option Repository — CRUD and soft-delete aware queries for lookup options.
Extends BaseRepository with name lookups, active-row queries and upserts.
One instance exists per option type, each bound to its own table.
"""

from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog import OPTION_TYPES
from app.models.option import OPTION_MODELS, OptionMixin, utcnow
from app.repositories.base import BaseRepository


class OptionRepository(BaseRepository[OptionMixin]):
    """옵션 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for one option table.
    Name lookups deliberately include soft-deleted rows.
    """

    def __init__(self, model: type[OptionMixin]) -> None:
        """OptionRepository를 초기화합니다.

        Initialize the OptionRepository with a generated option model.
        """
        super().__init__(model)

    async def exists_by_name(self, db: AsyncSession, name: str) -> bool:
        """이름이 같은 행이 있는지 확인합니다 (소프트 삭제 포함).

        Check whether any row, active or soft-deleted, has this name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 옵션 이름 (Option name)

        Returns:
            bool: 존재 여부 (Whether a row with that name exists)
        """
        return await self.exists(db, {"name": name})

    async def exists_by_id(self, db: AsyncSession, record_id: str) -> bool:
        """ID가 같은 행이 있는지 확인합니다 (소프트 삭제 포함).

        Check whether a row with this id exists, active or soft-deleted.
        """
        return await self.exists(db, {"id": record_id})

    async def get_active(self, db: AsyncSession) -> list[OptionMixin]:
        """소프트 삭제되지 않은 모든 행을 조회합니다.

        Retrieve every row whose ``deleted_at`` is NULL.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OptionMixin]: 활성 행 목록 (Active rows)
        """
        query: Select = self._ordered(select(self.model).where(self.model.deleted_at.is_(None)))
        result = await db.execute(query)
        return list(result.scalars().all())

    async def update(
        self,
        db: AsyncSession,
        db_obj: OptionMixin,
        update_data: dict[str, Any],
    ) -> OptionMixin:
        """데이터 필드를 적용하고 updated_at을 항상 현재 시각으로 갱신합니다.

        Apply ``update_data`` and always stamp ``updated_at``, even when every
        value matches the stored row and no column would otherwise change.
        """
        return await super().update(db, db_obj, {**update_data, "updated_at": utcnow()})

    async def upsert(self, db: AsyncSession, record_id: str, obj_data: dict[str, Any]) -> OptionMixin:
        """ID 기준으로 행을 수정하거나, 없으면 새로 생성합니다.

        Update the row with ``record_id`` in place, or insert a new row with
        that id when none exists. Soft-deleted rows are updated like any other.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 대상 ID (Target id)
            obj_data: 적용할 데이터 필드 (Data fields to apply)

        Returns:
            OptionMixin: 저장된 행 (Saved row)
        """
        existing: OptionMixin | None = await self.get_by_id(db, record_id)
        if existing is None:
            return await self.create(db, {**obj_data, "id": record_id})
        return await self.update(db, existing, obj_data)


# 슬러그별 레포지토리 싱글턴 — Repository singletons keyed by option slug
option_repositories: dict[str, OptionRepository] = {
    option_type.slug: OptionRepository(OPTION_MODELS[option_type.slug]) for option_type in OPTION_TYPES
}
