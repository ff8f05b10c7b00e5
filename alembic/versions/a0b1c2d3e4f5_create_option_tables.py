"""create_option_tables

Revision ID: a0b1c2d3e4f5
Revises:
Create Date: 2026-10-19 09:00:00.000000

조회용 옵션 테이블 생성 (옵션 유형별 1개 테이블).
country_option은 dial_code, code 컬럼을 추가로 가짐.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "a0b1c2d3e4f5"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# 옵션 테이블 목록 — Option tables, one per option type
OPTION_TABLES: tuple[str, ...] = (
    "execution_period_option",
    "plan_status_option",
    "prerequisites_activity_type_option",
    "procurement_method_option",
    "procurement_progress_status_option",
    "procurement_type_option",
    "scheme_option",
    "source_of_fund_option",
    "unit_of_measure_option",
    "civil_society_type_option",
    "authority_type_option",
    "donor_type_option",
    "business_category_option",
    "business_type_option",
    "ownership_nature_option",
    "country_option",
    "country_code_option",
    "organization_role_option",
    "archive_strategy_option",
    "log_level_option",
    "metadata_type_option",
    "clarification_request_status_option",
    "procurement_requisition_status_option",
    "reason_option",
    "selection_method_option",
    "bid_security_type_option",
    "evaluation_criteria_phase_option",
    "lot_bidding_eligibility_option",
    "market_scope_option",
    "prebid_event_type_option",
    "tender_required_document_type_option",
    "tender_stage_option",
    "tender_status_option",
    "account_type_option",
    "gender_option",
    "position_option",
    "user_status_option",
    "workflow_stage_status_option",
    "currency_option",
    "language_option",
    "procurement_method_threshold_option",
    "theme_status_option",
    "workspace_type_option",
)

# 유형별 추가 컬럼 — Extra NOT NULL string columns per table
EXTRA_COLUMNS: dict[str, tuple[str, ...]] = {
    "country_option": ("dial_code", "code"),
}


def upgrade() -> None:
    for table in OPTION_TABLES:
        extra = [sa.Column(column, sa.String(255), nullable=False) for column in EXTRA_COLUMNS.get(table, ())]
        op.create_table(
            table,
            sa.Column("id", sa.String(255), primary_key=True),
            sa.Column("name", sa.String(255), nullable=False),
            sa.Column("description", sa.String(255), nullable=True),
            *extra,
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
            sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        )
        op.create_index(f"ix_{table}_name", table, ["name"])


def downgrade() -> None:
    for table in reversed(OPTION_TABLES):
        op.drop_index(f"ix_{table}_name", table_name=table)
        op.drop_table(table)
