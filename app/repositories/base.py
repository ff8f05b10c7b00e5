"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all repositories.
Provides generic Create, Read, Update, Delete operations for models keyed by
a string primary key named ``id``. Repositories only flush; committing is the
caller's unit of work.

Usage:
    class OptionRepository(BaseRepository[OptionMixin]):
        def __init__(self, model: type[OptionMixin]) -> None:
            super().__init__(model)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select, delete
from sqlalchemy.ext.asyncio import AsyncSession

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def _ordered(self, query: Select) -> Select:
        """목록 조회 기본 정렬 — created_at, id 순 (Default list ordering)."""
        if hasattr(self.model, "created_at"):
            query = query.order_by(self.model.created_at, self.model.id)
        return query

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: str,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (Id of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_ids(
        self,
        db: AsyncSession,
        record_ids: Sequence[str],
    ) -> list[ModelType]:
        """여러 ID로 레코드를 조회합니다. 없는 ID는 무시합니다.

        Retrieve all records whose id is in ``record_ids``.
        Ids that do not exist are silently omitted.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_ids: 조회할 ID 목록 (Ids to retrieve)

        Returns:
            list[ModelType]: 조회된 레코드 목록 (Found records)
        """
        if not record_ids:
            return []
        query: Select = self._ordered(select(self.model).where(self.model.id.in_(list(record_ids))))
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_all(self, db: AsyncSession) -> list[ModelType]:
        """테이블의 모든 레코드를 조회합니다.

        Retrieve every record of the table.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[ModelType]: 조회된 레코드 목록 (List of all records)
        """
        result = await db.execute(self._ordered(select(self.model)))
        return list(result.scalars().all())

    async def save(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> ModelType:
        """레코드를 세션에 추가하고 flush 합니다.

        Add a new or modified record to the session and flush it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 저장할 레코드 (Record to persist)

        Returns:
            ModelType: 저장된 레코드 (The persisted record, refreshed)
        """
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def save_all(
        self,
        db: AsyncSession,
        db_objs: Sequence[ModelType],
    ) -> list[ModelType]:
        """여러 레코드를 한 번에 flush 합니다.

        Add several records to the session and flush them in one round trip.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_objs: 저장할 레코드 목록 (Records to persist)

        Returns:
            list[ModelType]: 저장된 레코드 목록 (The persisted records, refreshed)
        """
        db.add_all(db_objs)
        await db.flush()
        for db_obj in db_objs:
            await db.refresh(db_obj)
        return list(db_objs)

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        return await self.save(db, db_obj)

    async def update(
        self,
        db: AsyncSession,
        db_obj: ModelType,
        update_data: dict[str, Any],
    ) -> ModelType:
        """이미 조회된 레코드에 값을 적용하고 flush 합니다.

        Apply ``update_data`` to an already loaded record and flush it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 업데이트할 레코드 (Loaded record to update)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType: 업데이트된 레코드 (Updated record)
        """
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        return await self.save(db, db_obj)

    async def delete(
        self,
        db: AsyncSession,
        record_id: str,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드의 ID (Id of the record to delete)

        Returns:
            bool: 삭제 성공 여부 (Whether a record was deleted)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def delete_many(
        self,
        db: AsyncSession,
        record_ids: Sequence[str],
    ) -> int:
        """여러 레코드를 삭제합니다. 없는 ID는 무시합니다.

        Delete every record whose id is in ``record_ids``; missing ids are ignored.

        Returns:
            int: 삭제된 레코드 수 (Number of deleted records)
        """
        if not record_ids:
            return 0
        result = await db.execute(delete(self.model).where(self.model.id.in_(list(record_ids))))
        await db.flush()
        return result.rowcount or 0

    async def delete_all(self, db: AsyncSession) -> int:
        """테이블의 모든 레코드를 삭제합니다.

        Delete every record of the table.

        Returns:
            int: 삭제된 레코드 수 (Number of deleted records)
        """
        result = await db.execute(delete(self.model))
        await db.flush()
        return result.rowcount or 0

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given filters exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
