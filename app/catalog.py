"""옵션 카탈로그 — 모든 조회용 옵션 유형의 단일 등록부.

Option catalog — Single registry of every lookup option type.
Each OptionType drives the table, ORM model, schemas, repository, service
and router generated for that entity type. Adding a new lookup table means
adding one entry here and one Alembic revision.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtraField:
    """옵션 유형별 추가 문자열 컬럼.

    Additional string column declared by a single option type
    (e.g. ``dial_code`` on country options).

    Attributes:
        name: 컬럼 및 JSON 필드 이름 (Column and JSON field name)
        label: API 문서에 쓰이는 표시 이름 (Display name shown in the OpenAPI schema)
        required: 필수 여부 (Whether the field is mandatory)
        max_length: 최대 길이 (Maximum length)
    """

    name: str
    label: str
    required: bool = True
    max_length: int = 255


@dataclass(frozen=True)
class OptionType:
    """단일 옵션 유형 정의.

    Definition of one lookup option type.

    Attributes:
        slug: 라우트 경로 및 테이블 이름 (Route segment and table name)
        label: 사람이 읽는 이름 (Human readable name, e.g. "Country Option")
        id_prefix: ID 생성 접두사 (Prefix used by the ID generator)
        extra_fields: 추가 컬럼 목록 (Additional columns beyond name/description)
    """

    slug: str
    label: str
    id_prefix: str
    extra_fields: tuple[ExtraField, ...] = ()

    @property
    def table_name(self) -> str:
        return self.slug

    @property
    def model_name(self) -> str:
        """ORM 클래스 이름 — e.g. ``country_option`` -> ``CountryOption``."""
        return "".join(part.capitalize() for part in self.slug.split("_"))

    @property
    def plural_label(self) -> str:
        return f"{self.label}s"


def _opt(slug: str, label: str, id_prefix: str, *extra: ExtraField) -> OptionType:
    return OptionType(slug=slug, label=label, id_prefix=id_prefix, extra_fields=tuple(extra))


# 전체 옵션 유형 — All option types, grouped by the platform area that owns them
OPTION_TYPES: tuple[OptionType, ...] = (
    # 계획 (Plan options)
    _opt("execution_period_option", "Execution Period Option", "EXECUTION_PERIOD_OPT"),
    _opt("plan_status_option", "Plan Status Option", "PLAN_STATUS"),
    _opt("prerequisites_activity_type_option", "Prerequisites Activity Type Option", "PREREQUISITE_ACT_OPT"),
    _opt("procurement_method_option", "Procurement Method Option", "PROCURE_METHOD"),
    _opt("procurement_progress_status_option", "Procurement Progress Status Option", "PROCURE_PROGRESS_STATUS_OPT"),
    _opt("procurement_type_option", "Procurement Type Option", "PROCURE_TYPE_OPT"),
    _opt("scheme_option", "Scheme Option", "SCHEME_OPT"),
    _opt("source_of_fund_option", "Source Of Fund Option", "SOURCE_OF_FUND_OPT"),
    _opt("unit_of_measure_option", "Unit Of Measure Option", "UNIT_OF_MEASURE_OPT"),
    # 기관 및 이해관계자 (Institutions and stakeholders)
    _opt("civil_society_type_option", "Civil Society Type Option", "CIVIL_SOCIETY_TYPE_OPT"),
    _opt("authority_type_option", "Authority Type Option", "AUTHORITY_TYPE_OPT"),
    _opt("donor_type_option", "Donor Type Option", "DONOR_TYPE_OPT"),
    _opt("business_category_option", "Business Category Option", "BUSINESS_CATEGORY_OPT"),
    _opt("business_type_option", "Business Type Option", "BUSINESS_TYPE_OPT"),
    _opt("ownership_nature_option", "Ownership Nature Option", "OWNERSHIP_NATURE_OPT"),
    _opt(
        "country_option",
        "Country Option",
        "COUNTRY_OPT",
        ExtraField("dial_code", "Dial code"),
        ExtraField("code", "Country Abbreviation"),
    ),
    _opt("country_code_option", "Country Code Option", "COUNTRY_CODE_OPT"),
    _opt("organization_role_option", "Organization Role Option", "ORGANIZATION_ROLE_OPT"),
    # 로깅 및 감사 (Logging and audit)
    _opt("archive_strategy_option", "Archive Strategy Option", "ARCHIVE_STRATEGY_OPT"),
    _opt("log_level_option", "Log Level Option", "LOG_LEVEL_OPT"),
    _opt("metadata_type_option", "Metadata Type Option", "METADATA_TYPE_OPT"),
    # 조달 요청 및 입찰 (Requisition and tender)
    _opt("clarification_request_status_option", "Clarification Request Status Option", "CLARIFICATION_REQUEST_STATUS_OPT"),
    _opt("procurement_requisition_status_option", "Procurement Requisition Status Option", "PROCURE_REQUISITION_STATUS_OPT"),
    _opt("reason_option", "Reason Option", "REASON_OPT"),
    _opt("selection_method_option", "Selection Method Option", "SELECTION_METHOD_OPT"),
    _opt("bid_security_type_option", "Bid Security Type Option", "BID_SECURITY_TYPE_OPT"),
    _opt("evaluation_criteria_phase_option", "Evaluation Criteria Phase Option", "EVALUATION_CRITERIA_PHASE_OPT"),
    _opt("lot_bidding_eligibility_option", "Lot Bidding Eligibility Option", "LOT_BID_ELIGIBILITY_OPT"),
    _opt("market_scope_option", "Market Scope Option", "MARKET_SCOPE_OPT"),
    _opt("prebid_event_type_option", "Prebid Event Type Option", "PREBID_EVENT_TYPE"),
    _opt("tender_required_document_type_option", "Tender Required Document Type Option", "TENDER_REQUIRED_DOC_TYPE_OPT"),
    _opt("tender_stage_option", "Tender Stage Option", "TENDER_STAGE_OPT"),
    _opt("tender_status_option", "Tender Status Option", "TENDER_STATUS_OPT"),
    # 사용자 (Users)
    _opt("account_type_option", "Account Type Option", "ACCOUNT_TYPE_OPT"),
    _opt("gender_option", "Gender Option", "GENDER_OPT"),
    _opt("position_option", "Position Option", "POSITION_OPT"),
    _opt("user_status_option", "User Status Option", "USER_STATUS_OPT"),
    # 워크플로우 및 워크스페이스 (Workflow and workspace)
    _opt("workflow_stage_status_option", "Workflow Stage Status Option", "WORKFLOW_STAGE_STATUS_OPT"),
    _opt("currency_option", "Currency Option", "CURRENCY_OPT"),
    _opt("language_option", "Language Option", "LANGUAGE_OPT"),
    _opt("procurement_method_threshold_option", "Procurement Method Threshold Option", "PROCURE_METHOD_THRESHOLD_OPT"),
    _opt("theme_status_option", "Theme Status Option", "THEME_STATUS_OPT"),
    _opt("workspace_type_option", "Workspace Type Option", "WORKSPACE_TYPE_OPT"),
)

_BY_SLUG: dict[str, OptionType] = {option_type.slug: option_type for option_type in OPTION_TYPES}


def lookup(slug: str) -> OptionType:
    """슬러그로 옵션 유형을 조회합니다.

    Return the option type registered under ``slug``.

    Raises:
        KeyError: 등록되지 않은 슬러그 (Unknown slug)
    """
    try:
        return _BY_SLUG[slug]
    except KeyError:
        raise KeyError(f"Unknown option type: {slug}") from None
