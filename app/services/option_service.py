"""옵션 서비스 — 조회용 옵션의 소프트/하드 삭제 CRUD 비즈니스 로직.

Option Service — Business logic for the soft/hard delete CRUD lifecycle of
lookup options. One instance exists per option type; all of them share this
single implementation.

Lifecycle:
    Active (deleted_at 없음) -> SoftDeleted (deleted_at 설정) -> Purged (행 삭제, 종료 상태)
    복원 작업은 없습니다 (There is no SoftDeleted -> Active transition).

Rules:
    - 이름 중복은 생성 시에만 검사하며 소프트 삭제된 행도 포함합니다
      (Name uniqueness is checked on create only, soft-deleted rows included)
    - "hard"가 아닌 조회/수정은 소프트 삭제된 행을 없는 것으로 취급합니다
      (Non-"hard" reads and updates treat soft-deleted rows as not found)
    - 수정은 데이터 필드만 복사하며 id/created_at/deleted_at은 보존됩니다
      (Updates copy data fields only; id, created_at and deleted_at are preserved)
"""

from datetime import datetime, timezone
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog import OPTION_TYPES, OptionType
from app.models.option import OptionMixin
from app.repositories.option_repository import OptionRepository, option_repositories
from app.schemas.option import OPTION_SCHEMAS, OptionIn, OptionOut, OptionSchemas
from app.utils.exceptions import (
    DuplicateError,
    InvalidArgumentError,
    NotFoundError,
    NullArgumentError,
)


class OptionService:
    """조회용 옵션 비즈니스 로직을 처리하는 서비스.

    Service handling lookup option business logic for a single option type.
    Methods only flush through the repository; the caller commits.

    Attributes:
        option_type: 카탈로그 항목 (Catalog entry)
        repository: 옵션 레포지토리 (Repository bound to the option table)
        schemas: 요청/응답 스키마 (Request/response schemas)
    """

    def __init__(
        self,
        option_type: OptionType,
        repository: OptionRepository,
        schemas: OptionSchemas,
    ) -> None:
        self.option_type: OptionType = option_type
        self.repository: OptionRepository = repository
        self.schemas: OptionSchemas = schemas

    @property
    def label(self) -> str:
        return self.option_type.label

    def to_response(self, option: OptionMixin) -> OptionOut:
        """옵션 모델을 응답 스키마로 변환합니다.

        Convert an option model instance to its response schema.
        """
        return self.schemas.response.model_validate(option)

    def _data(self, entity: OptionIn) -> dict[str, Any]:
        """요청에서 데이터 필드만 추출 — Extract the data fields of a request."""
        return {field: getattr(entity, field, None) for field in self.schemas.data_fields}

    def _require_entity(self, entity: OptionIn | None) -> str:
        if entity is None:
            raise NullArgumentError(f"{self.label} cannot be null")
        if entity.id is None:
            raise NullArgumentError(f"{self.label} ID cannot be null")
        return entity.id

    async def _get_active(self, db: AsyncSession, record_id: str) -> OptionMixin:
        """활성 행을 조회하고, 없거나 소프트 삭제되었으면 NotFoundError.

        Fetch the stored row and reject it when missing or soft-deleted.
        """
        option: OptionMixin | None = await self.repository.get_by_id(db, record_id)
        if option is None:
            raise NotFoundError(f"{self.label} not found with ID: {record_id}")
        if option.is_deleted:
            raise NotFoundError(f"{self.label} with ID: {record_id} is not found")
        return option

    # ------------------------------------------------------------------
    # 생성 — Create
    # ------------------------------------------------------------------
    async def save(self, db: AsyncSession, entity: OptionIn | None) -> OptionMixin:
        """단일 옵션을 생성합니다.

        Create a single option. The id must already be assigned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 생성할 옵션 (Option to create, with id)

        Returns:
            OptionMixin: 저장된 옵션 (Persisted option)

        Raises:
            NullArgumentError: 옵션 또는 ID가 None일 때 (Option or id is None)
            DuplicateError: 같은 이름 또는 ID가 이미 존재할 때
                            (Name exists in any row, or id already taken)
        """
        record_id: str = self._require_entity(entity)
        if await self.repository.exists_by_name(db, entity.name):
            raise DuplicateError(f"{self.label} already exists: {entity.name}")
        if await self.repository.exists_by_id(db, record_id):
            raise DuplicateError(f"{self.label} already exists with ID: {record_id}")
        return await self.repository.create(db, {"id": record_id, **self._data(entity)})

    async def save_many(
        self,
        db: AsyncSession,
        entities: Sequence[OptionIn] | None,
    ) -> list[OptionMixin]:
        """여러 옵션을 한 번에 생성합니다.

        Create several options. Every name is checked before anything is
        written, so one collision rejects the whole batch.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entities: 생성할 옵션 목록 (Options to create)

        Returns:
            list[OptionMixin]: 저장된 옵션 목록 (Persisted options)

        Raises:
            InvalidArgumentError: 목록이 None이거나 비었을 때 (List None or empty)
            NullArgumentError: 요소 또는 요소의 ID가 None일 때 (Element or its id None)
            DuplicateError: 이름 또는 ID 충돌 시 — 배치 내부 중복 포함
                            (Name or id collision, including inside the batch)
        """
        if not entities:
            raise InvalidArgumentError(f"{self.label} list cannot be null or empty")

        seen_names: set[str] = set()
        seen_ids: set[str] = set()
        for entity in entities:
            record_id: str = self._require_entity(entity)
            if entity.name in seen_names or await self.repository.exists_by_name(db, entity.name):
                raise DuplicateError(f"{self.label} already exists: {entity.name}")
            if record_id in seen_ids or await self.repository.exists_by_id(db, record_id):
                raise DuplicateError(f"{self.label} already exists with ID: {record_id}")
            seen_names.add(entity.name)
            seen_ids.add(record_id)

        options: list[OptionMixin] = [
            self.repository.model(id=entity.id, **self._data(entity)) for entity in entities
        ]
        return await self.repository.save_all(db, options)

    # ------------------------------------------------------------------
    # 조회 — Read
    # ------------------------------------------------------------------
    async def read_one(self, db: AsyncSession, record_id: str | None) -> OptionMixin:
        """ID로 활성 옵션을 조회합니다.

        Retrieve an active option by id.

        Raises:
            NullArgumentError: ID가 None일 때 (Id is None)
            NotFoundError: 없거나 소프트 삭제되었을 때 (Missing or soft-deleted)
        """
        if record_id is None:
            raise NullArgumentError(f"{self.label} ID cannot be null")
        return await self._get_active(db, record_id)

    async def read_many(
        self,
        db: AsyncSession,
        record_ids: Sequence[str | None] | None,
    ) -> list[OptionMixin]:
        """여러 ID로 활성 옵션을 조회합니다.

        Retrieve active options for the given ids, in input order.
        Missing and soft-deleted ids are skipped without error, but a single
        None element fails the whole call.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_ids: 조회할 ID 목록 (Ids to retrieve)

        Returns:
            list[OptionMixin]: 활성 옵션 목록 (Active options)

        Raises:
            NullArgumentError: 목록이 None/비었거나 요소가 None일 때
                               (List None/empty or any element None)
        """
        if not record_ids:
            raise NullArgumentError(f"{self.label} ID list cannot be null")
        if any(record_id is None for record_id in record_ids):
            raise NullArgumentError(f"{self.label} ID cannot be null")

        found: dict[str, OptionMixin] = {
            option.id: option for option in await self.repository.get_by_ids(db, record_ids)
        }
        return [
            found[record_id]
            for record_id in record_ids
            if record_id in found and not found[record_id].is_deleted
        ]

    async def read_all(self, db: AsyncSession) -> list[OptionMixin]:
        """소프트 삭제되지 않은 모든 옵션을 조회합니다 (All active options)."""
        return await self.repository.get_active(db)

    async def hard_read_all(self, db: AsyncSession) -> list[OptionMixin]:
        """소프트 삭제된 옵션을 포함한 모든 옵션을 조회합니다 (All options, deleted included)."""
        return await self.repository.get_all(db)

    # ------------------------------------------------------------------
    # 수정 — Update
    # ------------------------------------------------------------------
    async def update_one(self, db: AsyncSession, entity: OptionIn | None) -> OptionMixin:
        """활성 옵션을 수정합니다.

        Update an active option. The stored row decides existence; the
        request only contributes its data fields.

        Raises:
            NullArgumentError: 옵션 또는 ID가 None일 때 (Option or id is None)
            NotFoundError: 저장된 행이 없거나 소프트 삭제되었을 때
                           (Stored row missing or soft-deleted)
        """
        record_id: str = self._require_entity(entity)
        option: OptionMixin = await self._get_active(db, record_id)
        return await self.repository.update(db, option, self._data(entity))

    async def update_many(
        self,
        db: AsyncSession,
        entities: Sequence[OptionIn] | None,
    ) -> list[OptionMixin]:
        """여러 활성 옵션을 수정합니다.

        Update several active options. Every target is resolved before any
        change is applied; the first failing element aborts the call.

        Raises:
            InvalidArgumentError: 목록이 None이거나 비었을 때 (List None or empty)
            NullArgumentError: 요소 또는 ID가 None일 때 (Element or id None)
            NotFoundError: 대상이 없거나 소프트 삭제되었을 때 (Target missing or soft-deleted)
        """
        if not entities:
            raise InvalidArgumentError(f"{self.label} list cannot be null or empty")

        targets: list[tuple[OptionMixin, OptionIn]] = []
        for entity in entities:
            record_id: str = self._require_entity(entity)
            targets.append((await self._get_active(db, record_id), entity))

        updated: list[OptionMixin] = []
        for option, entity in targets:
            updated.append(await self.repository.update(db, option, self._data(entity)))
        return updated

    async def hard_update(self, db: AsyncSession, entity: OptionIn | None) -> OptionMixin:
        """소프트 삭제 여부와 무관하게 옵션을 저장합니다 (upsert).

        Save an option regardless of its soft-delete state. A missing id is
        inserted as a new row.

        Raises:
            NullArgumentError: 옵션 또는 ID가 None일 때 (Option or id is None)
        """
        record_id: str = self._require_entity(entity)
        return await self.repository.upsert(db, record_id, self._data(entity))

    async def hard_update_all(
        self,
        db: AsyncSession,
        entities: Sequence[OptionIn] | None,
    ) -> list[OptionMixin]:
        """여러 옵션을 upsert 합니다.

        Upsert several options, soft-deleted ones included.

        Raises:
            InvalidArgumentError: 목록이 None이거나 비었을 때 (List None or empty)
            NullArgumentError: 요소 또는 ID가 None일 때 (Element or id None)
        """
        if not entities:
            raise InvalidArgumentError(f"{self.label} list cannot be null or empty")
        record_ids: list[str] = [self._require_entity(entity) for entity in entities]

        saved: list[OptionMixin] = []
        for record_id, entity in zip(record_ids, entities):
            saved.append(await self.repository.upsert(db, record_id, self._data(entity)))
        return saved

    # ------------------------------------------------------------------
    # 삭제 — Delete
    # ------------------------------------------------------------------
    async def soft_delete(self, db: AsyncSession, record_id: str | None) -> OptionMixin:
        """옵션을 소프트 삭제합니다.

        Soft delete an option by setting ``deleted_at`` to now. Not
        idempotent: an already soft-deleted row gets a new timestamp.

        Raises:
            NullArgumentError: ID가 None일 때 (Id is None)
            NotFoundError: 옵션이 없을 때 (Option missing)
        """
        if record_id is None:
            raise NullArgumentError(f"{self.label} ID cannot be null")
        option: OptionMixin | None = await self.repository.get_by_id(db, record_id)
        if option is None:
            raise NotFoundError(f"{self.label} not found with id: {record_id}")
        option.deleted_at = datetime.now(timezone.utc)
        return await self.repository.save(db, option)

    async def hard_delete(self, db: AsyncSession, record_id: str | None) -> None:
        """옵션을 물리적으로 삭제합니다.

        Permanently delete an option, soft-deleted or not.

        Raises:
            NullArgumentError: ID가 None일 때 (Id is None)
            NotFoundError: 옵션이 없을 때 (Option missing)
        """
        if record_id is None:
            raise NullArgumentError(f"{self.label} ID cannot be null")
        if not await self.repository.exists_by_id(db, record_id):
            raise NotFoundError(f"{self.label} not found with id: {record_id}")
        await self.repository.delete(db, record_id)

    async def soft_delete_many(
        self,
        db: AsyncSession,
        record_ids: Sequence[str | None] | None,
    ) -> list[OptionMixin]:
        """여러 옵션을 소프트 삭제합니다.

        Soft delete every option that resolves from ``record_ids``;
        unresolved ids are skipped.

        Returns:
            list[OptionMixin]: 소프트 삭제된 옵션 목록 (Soft-deleted options)

        Raises:
            NotFoundError: 하나도 찾지 못했을 때 (No id resolved to a row)
        """
        ids: list[str] = [record_id for record_id in record_ids or [] if record_id is not None]
        options: list[OptionMixin] = await self.repository.get_by_ids(db, ids)
        if not options:
            raise NotFoundError(f"No {self.option_type.plural_label} found with provided ID list: {list(record_ids or [])}")

        deleted_at: datetime = datetime.now(timezone.utc)
        for option in options:
            option.deleted_at = deleted_at
        return await self.repository.save_all(db, options)

    async def hard_delete_many(
        self,
        db: AsyncSession,
        record_ids: Sequence[str | None] | None,
    ) -> None:
        """여러 옵션을 물리적으로 삭제합니다. 없는 ID는 무시합니다.

        Permanently delete the options matching ``record_ids``; missing ids are ignored.
        """
        ids: list[str] = [record_id for record_id in record_ids or [] if record_id is not None]
        await self.repository.delete_many(db, ids)

    async def hard_delete_all(self, db: AsyncSession) -> None:
        """이 유형의 모든 옵션을 물리적으로 삭제합니다 (Purge every row of this type)."""
        await self.repository.delete_all(db)


def _build_service(option_type: OptionType) -> OptionService:
    return OptionService(
        option_type,
        option_repositories[option_type.slug],
        OPTION_SCHEMAS[option_type.slug],
    )


# 슬러그별 서비스 싱글턴 — Service singletons keyed by option slug
option_services: dict[str, OptionService] = {
    option_type.slug: _build_service(option_type) for option_type in OPTION_TYPES
}


def get_option_service(slug: str) -> OptionService:
    """슬러그로 옵션 서비스를 조회합니다.

    Return the service registered for an option slug.

    Raises:
        KeyError: 등록되지 않은 슬러그 (Unknown slug)
    """
    try:
        return option_services[slug]
    except KeyError:
        raise KeyError(f"Unknown option type: {slug}") from None
