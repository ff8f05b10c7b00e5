"""조회용 옵션 Pydantic 요청/응답 스키마 정의.

Lookup option Pydantic request/response schema definitions.
Schemas are generated per option type from the catalog so that types with
extra fields (e.g. country dial codes) get them validated and serialized
explicitly, without reflection-based mapping.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, create_model

from app.catalog import OPTION_TYPES, OptionType

# 기본 데이터 필드 — Data fields every option carries (copied on update)
BASE_DATA_FIELDS: tuple[str, ...] = ("name", "description")


class OptionIn(BaseModel):
    """옵션 요청 스키마 (생성/수정 공용).

    Option request schema shared by create and update endpoints.
    The id is optional on create (generated by the router) and required on
    update, which the service enforces.

    Attributes:
        id: 옵션 ID (Option id, optional on create)
        name: 옵션 이름 (Option name, mandatory)
        description: 설명 (Description, optional)
    """

    id: str | None = Field(default=None, max_length=255)  # 옵션 ID (Option id)
    name: str = Field(..., max_length=255)  # 옵션 이름 (Option name, mandatory)
    description: str | None = Field(default=None, max_length=255)  # 설명 (Optional description)


class OptionOut(BaseModel):
    """옵션 응답 스키마.

    Option response schema returned from every read/update endpoint.

    Attributes:
        id: 옵션 ID (Option identifier)
        name: 옵션 이름 (Option name)
        description: 설명 (Description, nullable)
        created_at: 생성 일시 (Creation timestamp)
        updated_at: 수정 일시 (Last update timestamp, nullable)
        deleted_at: 소프트 삭제 일시 (Soft-delete timestamp, null when active)
    """

    model_config = ConfigDict(from_attributes=True)

    id: str  # 옵션 ID (Option identifier)
    name: str  # 옵션 이름 (Option name)
    description: str | None = None  # 설명 (Description, may be null)
    created_at: datetime | None = None  # 생성 일시 (Creation timestamp)
    updated_at: datetime | None = None  # 수정 일시 (Last update timestamp)
    deleted_at: datetime | None = None  # 삭제 일시 — None이면 활성 (Null when active)


@dataclass(frozen=True)
class OptionSchemas:
    """옵션 유형별 스키마 묶음.

    Request/response schema pair generated for one option type.

    Attributes:
        request: 요청 스키마 (Request schema, subclass of OptionIn)
        response: 응답 스키마 (Response schema, subclass of OptionOut)
        data_fields: 수정 시 복사되는 필드 (Fields copied onto stored rows on update)
    """

    request: type[OptionIn]
    response: type[OptionOut]
    data_fields: tuple[str, ...]


def build_option_schemas(option_type: OptionType) -> OptionSchemas:
    """카탈로그 항목으로부터 요청/응답 스키마를 생성합니다.

    Build the request and response schemas for one option type.
    Extra fields are mandatory in requests when the catalog marks them required.

    Args:
        option_type: 카탈로그 항목 (Catalog entry)

    Returns:
        OptionSchemas: 생성된 스키마 묶음 (Generated schema pair)
    """
    request_fields: dict[str, Any] = {}
    response_fields: dict[str, Any] = {}
    for field in option_type.extra_fields:
        if field.required:
            request_fields[field.name] = (str, Field(..., max_length=field.max_length, description=field.label))
        else:
            request_fields[field.name] = (str | None, Field(default=None, max_length=field.max_length, description=field.label))
        response_fields[field.name] = (str | None, Field(default=None, description=field.label))

    request = create_model(f"{option_type.model_name}In", __base__=OptionIn, **request_fields)
    response = create_model(f"{option_type.model_name}Out", __base__=OptionOut, **response_fields)
    data_fields = BASE_DATA_FIELDS + tuple(field.name for field in option_type.extra_fields)
    return OptionSchemas(request=request, response=response, data_fields=data_fields)


# 슬러그별 스키마 레지스트리 — Schema registry keyed by option slug
OPTION_SCHEMAS: dict[str, OptionSchemas] = {
    option_type.slug: build_option_schemas(option_type) for option_type in OPTION_TYPES
}
