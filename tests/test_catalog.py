"""옵션 카탈로그 및 ID 생성기 테스트.

Option catalog and ID generator tests — Registry invariants, generated
models/schemas, the table list of the Alembic revision, and the id format.
"""

import importlib.util
import re
from datetime import datetime
from pathlib import Path

import pytest

from app.catalog import OPTION_TYPES, lookup
from app.main import app
from app.models import OPTION_MODELS
from app.schemas.option import OPTION_SCHEMAS
from app.utils.id_generator import generate_option_id, timestamp_token

_MIGRATION = Path(__file__).resolve().parent.parent / "alembic" / "versions" / "a0b1c2d3e4f5_create_option_tables.py"


def _load_migration():
    spec = importlib.util.spec_from_file_location("create_option_tables", _MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCatalog:
    """카탈로그 불변 조건 테스트."""

    def test_slugs_unique(self):
        """슬러그가 중복되지 않음."""
        slugs = [option_type.slug for option_type in OPTION_TYPES]
        assert len(slugs) == len(set(slugs)) == 43

    def test_id_prefixes_unique(self):
        """ID 접두사가 유형마다 다름."""
        prefixes = [option_type.id_prefix for option_type in OPTION_TYPES]
        assert len(prefixes) == len(set(prefixes))

    def test_lookup(self):
        """슬러그로 조회."""
        country = lookup("country_option")
        assert country.label == "Country Option"
        assert country.model_name == "CountryOption"
        assert [field.name for field in country.extra_fields] == ["dial_code", "code"]

    def test_lookup_unknown(self):
        """없는 슬러그는 KeyError."""
        with pytest.raises(KeyError):
            lookup("nope_option")

    def test_models_and_schemas_generated(self):
        """모든 유형에 모델과 스키마가 생성됨."""
        for option_type in OPTION_TYPES:
            model = OPTION_MODELS[option_type.slug]
            assert model.__tablename__ == option_type.slug
            assert model.__name__ == option_type.model_name
            assert OPTION_SCHEMAS[option_type.slug].request.__name__ == f"{option_type.model_name}In"

    def test_country_schema_requires_extras(self):
        """국가 옵션 요청은 dial_code, code가 필수."""
        request = OPTION_SCHEMAS["country_option"].request
        assert request.model_fields["dial_code"].is_required()
        assert request.model_fields["code"].is_required()
        assert OPTION_SCHEMAS["country_option"].data_fields == ("name", "description", "dial_code", "code")

    def test_extra_field_labels_in_schema(self):
        """추가 필드 표시 이름이 스키마 설명으로 노출됨."""
        request = OPTION_SCHEMAS["country_option"].request
        response = OPTION_SCHEMAS["country_option"].response
        assert request.model_fields["dial_code"].description == "Dial code"
        assert response.model_fields["code"].description == "Country Abbreviation"

    def test_every_type_has_routes(self):
        """모든 유형이 /api/{slug} 아래에 라우트를 가짐."""
        paths = set(app.openapi()["paths"])
        for option_type in OPTION_TYPES:
            assert f"/api/{option_type.slug}/read/all" in paths
            assert f"/api/{option_type.slug}/hard/delete/{{option_id}}" in paths

    def test_migration_covers_catalog(self):
        """마이그레이션 테이블 목록이 카탈로그와 일치."""
        migration = _load_migration()
        assert set(migration.OPTION_TABLES) == {option_type.table_name for option_type in OPTION_TYPES}
        extras = {
            option_type.slug: tuple(field.name for field in option_type.extra_fields)
            for option_type in OPTION_TYPES
            if option_type.extra_fields
        }
        assert migration.EXTRA_COLUMNS == extras


class TestIdGenerator:
    """ID 생성기 테스트."""

    def test_timestamp_token(self):
        """밀리초까지 17자리."""
        now = datetime(2025, 7, 24, 12, 8, 30, 123456)
        assert timestamp_token(now) == "20250724120830123"

    def test_generate_option_id_format(self):
        """<prefix>_<timestamp>_<random> 형식."""
        now = datetime(2025, 7, 24, 12, 8, 30, 5000)
        record_id = generate_option_id("COUNTRY_OPT", now)
        match = re.fullmatch(r"COUNTRY_OPT_(\d{17})_(\d+)", record_id)
        assert match is not None
        assert match.group(1) == "20250724120830005"
        assert 1 <= int(match.group(2)) < 10_000_000

    def test_generate_option_id_default_now(self):
        """기준 시각 없이도 생성됨."""
        assert re.fullmatch(r"GENDER_OPT_\d{17}_\d+", generate_option_id("GENDER_OPT"))
