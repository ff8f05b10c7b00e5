"""옵션 API 테스트.

Option API tests — Every lifecycle endpoint under /api/{slug}, exercised
through the country option (extra fields) and the plan status option.
"""

from httpx import AsyncClient

COUNTRY = "/api/country_option"
PLAN = "/api/plan_status_option"


def _country(record_id: str | None, name: str, **fields) -> dict:
    body = {"name": name, "dial_code": "+250", "code": "RW", **fields}
    if record_id is not None:
        body["id"] = record_id
    return body


async def _create(client: AsyncClient, url: str, body: dict) -> None:
    res = await client.post(f"{url}/create/one", json=body)
    assert res.status_code == 200, res.text


class TestCreate:
    """옵션 생성 API 테스트."""

    async def test_create_one(self, client: AsyncClient):
        """생성 성공 시 메시지 envelope 반환."""
        res = await client.post(f"{COUNTRY}/create/one", json=_country("C1", "Rwanda"))
        assert res.status_code == 200
        data = res.json()
        assert data["message"] == "Country Option created successfully"
        assert data["status"] == "200 OK"
        assert "timestamp" in data

    async def test_create_one_generates_id(self, client: AsyncClient):
        """ID 없이 생성하면 접두사 기반 ID가 발급됨."""
        await _create(client, COUNTRY, _country(None, "Rwanda"))

        rows = (await client.get(f"{COUNTRY}/read/all")).json()
        assert len(rows) == 1
        assert rows[0]["id"].startswith("COUNTRY_OPT_")

    async def test_create_one_duplicate_name(self, client: AsyncClient):
        """같은 이름 재생성 시 409."""
        await _create(client, COUNTRY, _country("C1", "Rwanda"))

        res = await client.post(f"{COUNTRY}/create/one", json=_country("C2", "Rwanda"))
        assert res.status_code == 409
        assert res.json()["message"] == "Country Option already exists: Rwanda"

    async def test_create_one_missing_required_extra(self, client: AsyncClient):
        """필수 추가 필드 누락 시 422."""
        res = await client.post(f"{COUNTRY}/create/one", json={"id": "C1", "name": "Rwanda"})
        assert res.status_code == 422

    async def test_create_one_name_too_long(self, client: AsyncClient):
        """이름이 255자를 넘으면 422."""
        res = await client.post(f"{PLAN}/create/one", json={"name": "x" * 256})
        assert res.status_code == 422

    async def test_create_many(self, client: AsyncClient):
        """여러 옵션 생성."""
        res = await client.post(f"{PLAN}/create/many", json=[{"name": "Draft"}, {"name": "Approved"}])
        assert res.status_code == 200
        assert res.json()["message"] == "Plan Status Options created successfully"

        rows = (await client.get(f"{PLAN}/read/all")).json()
        assert {row["name"] for row in rows} == {"Draft", "Approved"}
        assert all(row["id"].startswith("PLAN_STATUS_") for row in rows)

    async def test_create_many_empty(self, client: AsyncClient):
        """빈 목록 생성 시 400."""
        res = await client.post(f"{PLAN}/create/many", json=[])
        assert res.status_code == 400


class TestRead:
    """옵션 조회 API 테스트."""

    async def test_read_one(self, client: AsyncClient):
        """ID로 조회."""
        await _create(client, COUNTRY, _country("C1", "Rwanda", description="East Africa"))

        res = await client.get(f"{COUNTRY}/read/one", params={"id": "C1"})
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == "C1"
        assert data["name"] == "Rwanda"
        assert data["description"] == "East Africa"
        assert data["dial_code"] == "+250"
        assert data["code"] == "RW"
        assert data["deleted_at"] is None

    async def test_read_one_missing(self, client: AsyncClient):
        """없는 ID 조회 시 404."""
        res = await client.get(f"{COUNTRY}/read/one", params={"id": "missing"})
        assert res.status_code == 404
        assert res.json()["status"] == "404 Not Found"

    async def test_read_one_without_id(self, client: AsyncClient):
        """id 파라미터 없이 조회 시 400."""
        res = await client.get(f"{COUNTRY}/read/one")
        assert res.status_code == 400

    async def test_read_many(self, client: AsyncClient):
        """여러 ID 조회 — 없는 ID는 건너뜀."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})
        await _create(client, PLAN, {"id": "P2", "name": "Approved"})

        res = await client.post(f"{PLAN}/read/many", params={"id_list": ["P2", "missing", "P1"]})
        assert res.status_code == 200
        assert [row["id"] for row in res.json()] == ["P2", "P1"]

    async def test_read_all_and_hard_read_all(self, client: AsyncClient):
        """read/all은 활성 행만, read/hard/all은 소프트 삭제 포함."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})
        await _create(client, PLAN, {"id": "P2", "name": "Approved"})
        await client.put(f"{PLAN}/soft/delete/one", params={"id": "P1"})

        active = (await client.get(f"{PLAN}/read/all")).json()
        assert [row["id"] for row in active] == ["P2"]

        everything = (await client.get(f"{PLAN}/read/hard/all")).json()
        assert {row["id"] for row in everything} == {"P1", "P2"}
        deleted = next(row for row in everything if row["id"] == "P1")
        assert deleted["deleted_at"] is not None


class TestUpdate:
    """옵션 수정 API 테스트."""

    async def test_update_one(self, client: AsyncClient):
        """활성 옵션 수정."""
        await _create(client, COUNTRY, _country("C1", "Rwanda"))

        res = await client.put(f"{COUNTRY}/update/one", json=_country("C1", "Rwanda", description="updated"))
        assert res.status_code == 200
        assert res.json()["description"] == "updated"

    async def test_update_one_soft_deleted(self, client: AsyncClient):
        """소프트 삭제된 옵션 수정 시 404."""
        await _create(client, COUNTRY, _country("C2", "Kenya"))
        await client.put(f"{COUNTRY}/soft/delete/one", params={"id": "C2"})

        res = await client.put(f"{COUNTRY}/update/one", json=_country("C2", "Kenya"))
        assert res.status_code == 404

    async def test_update_one_without_id(self, client: AsyncClient):
        """ID 없는 수정 요청은 400."""
        res = await client.put(f"{COUNTRY}/update/one", json=_country(None, "Kenya"))
        assert res.status_code == 400
        assert res.json()["message"] == "Country Option ID cannot be null"

    async def test_update_many(self, client: AsyncClient):
        """여러 옵션 수정."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})
        await _create(client, PLAN, {"id": "P2", "name": "Approved"})

        res = await client.put(
            f"{PLAN}/update/many",
            json=[{"id": "P1", "name": "Drafted"}, {"id": "P2", "name": "Approved", "description": "final"}],
        )
        assert res.status_code == 200
        assert [row["name"] for row in res.json()] == ["Drafted", "Approved"]

    async def test_hard_update_one_upserts(self, client: AsyncClient):
        """없는 ID는 hard update로 생성됨."""
        res = await client.put(f"{PLAN}/update/hard/one", json={"id": "P9", "name": "Cancelled"})
        assert res.status_code == 200
        assert res.json()["id"] == "P9"

        everything = (await client.get(f"{PLAN}/read/hard/all")).json()
        assert [row["id"] for row in everything] == ["P9"]

    async def test_hard_update_all(self, client: AsyncClient):
        """소프트 삭제된 옵션도 hard update 가능."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})
        await client.put(f"{PLAN}/soft/delete/one", params={"id": "P1"})

        res = await client.put(
            f"{PLAN}/update/hard/all",
            json=[{"id": "P1", "name": "Draft v2"}, {"id": "P2", "name": "Approved"}],
        )
        assert res.status_code == 200
        data = res.json()
        assert [row["name"] for row in data] == ["Draft v2", "Approved"]
        assert data[0]["deleted_at"] is not None


class TestDelete:
    """옵션 삭제 API 테스트."""

    async def test_soft_delete_one(self, client: AsyncClient):
        """소프트 삭제 후 read/one은 404."""
        await _create(client, COUNTRY, _country("C1", "Rwanda"))

        res = await client.put(f"{COUNTRY}/soft/delete/one", params={"id": "C1"})
        assert res.status_code == 200
        assert res.json()["message"] == "Country Option soft deleted successfully"

        res = await client.get(f"{COUNTRY}/read/one", params={"id": "C1"})
        assert res.status_code == 404

    async def test_hard_delete_by_path(self, client: AsyncClient):
        """경로 ID로 하드 삭제, 두 번째 삭제는 404."""
        await _create(client, COUNTRY, _country("C1", "Rwanda"))

        res = await client.get(f"{COUNTRY}/hard/delete/C1")
        assert res.status_code == 200
        assert res.json()["message"] == "Country Option hard deleted successfully"
        assert (await client.get(f"{COUNTRY}/read/hard/all")).json() == []

        res = await client.get(f"{COUNTRY}/hard/delete/C1")
        assert res.status_code == 404

    async def test_hard_delete_query_id_wins(self, client: AsyncClient):
        """쿼리 id가 경로 값보다 우선함."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})
        await _create(client, PLAN, {"id": "P2", "name": "Approved"})

        res = await client.get(f"{PLAN}/hard/delete/P1", params={"id": "P2"})
        assert res.status_code == 200
        remaining = (await client.get(f"{PLAN}/read/hard/all")).json()
        assert [row["id"] for row in remaining] == ["P1"]

    async def test_hard_delete_row_named_like_fixed_path(self, client: AsyncClient):
        """ID가 "many"/"all"인 행도 쿼리 id로 하드 삭제 가능."""
        await _create(client, PLAN, {"id": "many", "name": "Draft"})
        await _create(client, PLAN, {"id": "all", "name": "Approved"})
        await _create(client, PLAN, {"id": "P3", "name": "Closed"})

        res = await client.get(f"{PLAN}/hard/delete/many", params={"id": "many"})
        assert res.status_code == 200
        assert res.json()["message"] == "Plan Status Option hard deleted successfully"

        res = await client.get(f"{PLAN}/hard/delete/all", params={"id": "all"})
        assert res.status_code == 200
        remaining = (await client.get(f"{PLAN}/read/hard/all")).json()
        assert [row["id"] for row in remaining] == ["P3"]

    async def test_hard_delete_many_with_missing_query_id(self, client: AsyncClient):
        """쿼리 id가 없는 행이면 무시하지 않고 404."""
        res = await client.get(f"{PLAN}/hard/delete/many", params={"id": "missing"})
        assert res.status_code == 404

    async def test_soft_delete_many(self, client: AsyncClient):
        """여러 옵션 소프트 삭제."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})
        await _create(client, PLAN, {"id": "P2", "name": "Approved"})

        res = await client.put(f"{PLAN}/soft/delete/many", params={"idList": ["P1", "missing"]})
        assert res.status_code == 200
        assert res.json()["message"] == "Plan Status Options soft deleted successfully"
        assert [row["id"] for row in (await client.get(f"{PLAN}/read/all")).json()] == ["P2"]

    async def test_soft_delete_many_accepts_snake_case(self, client: AsyncClient):
        """id_list 파라미터도 허용."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})

        res = await client.put(f"{PLAN}/soft/delete/many", params={"id_list": ["P1"]})
        assert res.status_code == 200
        assert (await client.get(f"{PLAN}/read/all")).json() == []

    async def test_soft_delete_many_none_found(self, client: AsyncClient):
        """하나도 찾지 못하면 404."""
        res = await client.put(f"{PLAN}/soft/delete/many", params={"idList": ["missing"]})
        assert res.status_code == 404

    async def test_hard_delete_many(self, client: AsyncClient):
        """여러 옵션 하드 삭제 — 없는 ID는 무시."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})
        await _create(client, PLAN, {"id": "P2", "name": "Approved"})

        res = await client.get(f"{PLAN}/hard/delete/many", params={"idList": ["P1", "missing"]})
        assert res.status_code == 200
        assert res.json()["message"] == "Plan Status Options hard deleted successfully"
        assert [row["id"] for row in (await client.get(f"{PLAN}/read/hard/all")).json()] == ["P2"]

    async def test_hard_delete_many_without_ids(self, client: AsyncClient):
        """ID 목록 없이 호출해도 성공 (아무것도 삭제하지 않음)."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})

        res = await client.get(f"{PLAN}/hard/delete/many")
        assert res.status_code == 200
        assert len((await client.get(f"{PLAN}/read/hard/all")).json()) == 1

    async def test_hard_delete_all(self, client: AsyncClient):
        """모든 옵션 하드 삭제 — 다른 옵션 유형에는 영향 없음."""
        await _create(client, PLAN, {"id": "P1", "name": "Draft"})
        await _create(client, COUNTRY, _country("C1", "Rwanda"))

        res = await client.get(f"{PLAN}/hard/delete/all")
        assert res.status_code == 200
        assert res.json()["message"] == "All Plan Status Options hard deleted successfully"
        assert (await client.get(f"{PLAN}/read/hard/all")).json() == []
        assert len((await client.get(f"{COUNTRY}/read/hard/all")).json()) == 1


class TestHealth:
    """헬스 체크 테스트."""

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}
