"""옵션 라우터 팩토리 — 옵션 유형별 CRUD 및 소프트/하드 삭제 엔드포인트.

Option Router factory — CRUD and soft/hard delete endpoints for one option type.
Each option type in the catalog gets its own router from ``build_option_router``,
mounted under /api/{slug}.

Endpoint groups:
    - create: 생성 (id가 없으면 생성기로 발급 — id generated when absent)
    - read: 조회 (소프트 삭제 제외, hard/all은 포함 — hard/all includes deleted rows)
    - update: 수정 (hard 변형은 upsert — hard variants upsert)
    - delete: 소프트/하드 삭제 (Soft and hard deletion)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog import OptionType
from app.database import get_db
from app.schemas.common import MessageResponse, message_response
from app.schemas.option import OptionIn, OptionOut
from app.services.option_service import OptionService, get_option_service
from app.utils.id_generator import generate_option_id


def build_option_router(option_type: OptionType) -> APIRouter:
    """옵션 유형 하나에 대한 라우터를 생성합니다.

    Build the router exposing the full lifecycle of one option type.
    Routes without a path prefix; the caller mounts it under /api/{slug}.

    Args:
        option_type: 카탈로그 항목 (Catalog entry)

    Returns:
        APIRouter: 15개 엔드포인트를 가진 라우터 (Router with the lifecycle endpoints)
    """
    service: OptionService = get_option_service(option_type.slug)
    request_schema: type[OptionIn] = service.schemas.request
    response_schema: type[OptionOut] = service.schemas.response
    label: str = option_type.label
    plural: str = option_type.plural_label

    router: APIRouter = APIRouter(tags=[f"{label} API"])

    # ------------------------------------------------------------------
    # 생성 — Create
    # ------------------------------------------------------------------
    @router.post("/create/one", response_model=MessageResponse)
    async def create_one(
        data: request_schema,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> MessageResponse:
        """옵션 하나를 생성합니다. ID가 없으면 새로 발급합니다.

        Create a single option, generating its id when the request has none.
        """
        if data.id is None:
            data.id = generate_option_id(option_type.id_prefix)
        await service.save(db, data)
        await db.commit()
        return message_response(f"{label} created successfully")

    @router.post("/create/many", response_model=MessageResponse)
    async def create_many(
        data: list[request_schema],
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> MessageResponse:
        """여러 옵션을 생성합니다 (Create several options)."""
        for item in data:
            if item.id is None:
                item.id = generate_option_id(option_type.id_prefix)
        await service.save_many(db, data)
        await db.commit()
        return message_response(f"{plural} created successfully")

    # ------------------------------------------------------------------
    # 조회 — Read
    # ------------------------------------------------------------------
    @router.get("/read/one", response_model=response_schema)
    async def read_one(
        db: Annotated[AsyncSession, Depends(get_db)],
        record_id: Annotated[str | None, Query(alias="id")] = None,
    ) -> OptionOut:
        """ID로 활성 옵션을 조회합니다 (Retrieve an active option by id)."""
        return service.to_response(await service.read_one(db, record_id))

    @router.get("/read/all", response_model=list[response_schema])
    async def read_all(
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> list[OptionOut]:
        """소프트 삭제되지 않은 모든 옵션을 조회합니다.

        List every active option.
        """
        return [service.to_response(option) for option in await service.read_all(db)]

    @router.get("/read/hard/all", response_model=list[response_schema])
    async def hard_read_all(
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> list[OptionOut]:
        """소프트 삭제된 옵션까지 모두 조회합니다.

        List every option, soft-deleted ones included.
        """
        return [service.to_response(option) for option in await service.hard_read_all(db)]

    @router.post("/read/many", response_model=list[response_schema])
    async def read_many(
        db: Annotated[AsyncSession, Depends(get_db)],
        id_list: Annotated[list[str] | None, Query()] = None,
    ) -> list[OptionOut]:
        """여러 ID로 활성 옵션을 조회합니다. 없는 ID는 건너뜁니다.

        Retrieve active options by id, skipping missing or deleted ones.
        """
        return [service.to_response(option) for option in await service.read_many(db, id_list)]

    # ------------------------------------------------------------------
    # 수정 — Update
    # ------------------------------------------------------------------
    @router.put("/update/one", response_model=response_schema)
    async def update_one(
        data: request_schema,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> OptionOut:
        """활성 옵션을 수정합니다 (Update an active option)."""
        result: OptionOut = service.to_response(await service.update_one(db, data))
        await db.commit()
        return result

    @router.put("/update/many", response_model=list[response_schema])
    async def update_many(
        data: list[request_schema],
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> list[OptionOut]:
        """여러 활성 옵션을 수정합니다 (Update several active options)."""
        result: list[OptionOut] = [
            service.to_response(option) for option in await service.update_many(db, data)
        ]
        await db.commit()
        return result

    @router.put("/update/hard/one", response_model=response_schema)
    async def hard_update_one(
        data: request_schema,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> OptionOut:
        """소프트 삭제 여부와 무관하게 옵션을 저장합니다 (upsert).

        Upsert an option, soft-deleted or not.
        """
        result: OptionOut = service.to_response(await service.hard_update(db, data))
        await db.commit()
        return result

    @router.put("/update/hard/all", response_model=list[response_schema])
    async def hard_update_all(
        data: list[request_schema],
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> list[OptionOut]:
        """여러 옵션을 upsert 합니다 (Upsert several options)."""
        result: list[OptionOut] = [
            service.to_response(option) for option in await service.hard_update_all(db, data)
        ]
        await db.commit()
        return result

    # ------------------------------------------------------------------
    # 삭제 — Delete
    # /hard/delete/many, /hard/delete/all 는 /hard/delete/{id} 보다 먼저 등록
    # Fixed paths are registered before the /hard/delete/{id} catch-all
    # ------------------------------------------------------------------
    @router.put("/soft/delete/one", response_model=MessageResponse)
    async def soft_delete_one(
        db: Annotated[AsyncSession, Depends(get_db)],
        record_id: Annotated[str | None, Query(alias="id")] = None,
    ) -> MessageResponse:
        """옵션을 소프트 삭제합니다 (Soft delete an option)."""
        await service.soft_delete(db, record_id)
        await db.commit()
        return message_response(f"{label} soft deleted successfully")

    @router.put("/soft/delete/many", response_model=MessageResponse)
    async def soft_delete_many(
        db: Annotated[AsyncSession, Depends(get_db)],
        id_list: Annotated[list[str] | None, Query(alias="idList")] = None,
        id_list_snake: Annotated[list[str] | None, Query(alias="id_list", include_in_schema=False)] = None,
    ) -> MessageResponse:
        """여러 옵션을 소프트 삭제합니다.

        Soft delete several options. Accepts ``idList`` and the older ``id_list``.
        """
        await service.soft_delete_many(db, id_list if id_list is not None else id_list_snake)
        await db.commit()
        return message_response(f"{plural} soft deleted successfully")

    @router.get("/hard/delete/many", response_model=MessageResponse)
    async def hard_delete_many(
        db: Annotated[AsyncSession, Depends(get_db)],
        id_list: Annotated[list[str] | None, Query(alias="idList")] = None,
        id_list_snake: Annotated[list[str] | None, Query(alias="id_list", include_in_schema=False)] = None,
        record_id: Annotated[str | None, Query(alias="id")] = None,
    ) -> MessageResponse:
        """여러 옵션을 물리적으로 삭제합니다. 없는 ID는 무시합니다.

        Permanently delete several options; unknown ids are ignored.
        A query ``id`` turns the call into a single hard delete, so a row whose
        id is literally "many" stays reachable.
        """
        if record_id is not None:
            return await _hard_delete_one(db, record_id)
        await service.hard_delete_many(db, id_list if id_list is not None else id_list_snake)
        await db.commit()
        return message_response(f"{plural} hard deleted successfully")

    @router.get("/hard/delete/all", response_model=MessageResponse)
    async def hard_delete_all(
        db: Annotated[AsyncSession, Depends(get_db)],
        record_id: Annotated[str | None, Query(alias="id")] = None,
    ) -> MessageResponse:
        """이 유형의 모든 옵션을 물리적으로 삭제합니다. 쿼리 ``id``가 있으면 그 옵션만 삭제합니다.

        Purge every option of this type, or only the option named by a query ``id``.
        """
        if record_id is not None:
            return await _hard_delete_one(db, record_id)
        await service.hard_delete_all(db)
        await db.commit()
        return message_response(f"All {plural} hard deleted successfully")

    @router.get("/hard/delete/{option_id}", response_model=MessageResponse)
    async def hard_delete_one(
        option_id: str,
        db: Annotated[AsyncSession, Depends(get_db)],
        record_id: Annotated[str | None, Query(alias="id")] = None,
    ) -> MessageResponse:
        """옵션을 물리적으로 삭제합니다. 쿼리 ``id``가 경로 값보다 우선합니다.

        Permanently delete an option. A query ``id`` overrides the path segment.
        """
        return await _hard_delete_one(db, record_id if record_id is not None else option_id)

    async def _hard_delete_one(db: AsyncSession, record_id: str) -> MessageResponse:
        await service.hard_delete(db, record_id)
        await db.commit()
        return message_response(f"{label} hard deleted successfully")

    return router
