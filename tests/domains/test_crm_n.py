# tests/domains/test_crm_n.py

"""
'crm' 도메인 (고객 및 주소 관리) 관련 API 엔드포인트와 서비스에 대한 통합 테스트를 정의하는 모듈입니다.

- 고객: 이메일 고유성, 전체 교체 수정, 검색/필터, 활성화
- 주소: (도로명, 도시, 우편번호) 조합 고유성, 우편번호 형식, 좌표 영역 조회, 대표 주소 지정
"""

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import ConflictError
from app.domains.crm import schemas as crm_schemas
from app.domains.crm.services import address_service


def _customer_payload(**overrides) -> dict:
    payload = {
        "company_name": "Acme Corp",
        "contact_name": "Jane Doe",
        "email": "jane@acme.com",
        "city": "Seoul",
        "country": "KR",
        "credit_limit": 5000.0,
    }
    payload.update(overrides)
    return payload


def _address_payload(**overrides) -> dict:
    payload = {
        "street": "123 Main Street",
        "city": "Seoul",
        "country": "KR",
        "postal_code": "04524",
        "address_type": "HOME",
    }
    payload.update(overrides)
    return payload


# --- 고객 관리 엔드포인트 테스트 ---

@pytest.mark.asyncio
async def test_create_customer_and_duplicate_email(client: AsyncClient):
    """
    고객 생성 후 같은 이메일로 다시 생성하면 400과 중복 메시지를 반환하는지 테스트합니다.
    """
    print("\n--- Running test_create_customer_and_duplicate_email ---")
    created = await client.post("/api/customers", json=_customer_payload())
    print(f"Create response: {created.status_code} {created.json()}")
    assert created.status_code == 201
    assert created.json()["active"] is True

    duplicate = await client.post("/api/customers", json=_customer_payload(company_name="Other Inc"))
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "Email already exists: jane@acme.com"

    by_email = await client.get("/api/customers/email/jane@acme.com")
    assert by_email.status_code == 200
    assert by_email.json()["id"] == created.json()["id"]

    missing = await client.get("/api/customers/email/nobody@acme.com")
    assert missing.status_code == 404
    print("test_create_customer_and_duplicate_email passed.")


@pytest.mark.asyncio
async def test_create_customer_invalid_email_returns_400(client: AsyncClient):
    print("\n--- Running test_create_customer_invalid_email_returns_400 ---")
    response = await client.post("/api/customers", json=_customer_payload(email="not-an-email"))
    assert response.status_code == 400
    print("test_create_customer_invalid_email_returns_400 passed.")


@pytest.mark.asyncio
async def test_update_customer_email_conflict(client: AsyncClient):
    """다른 고객의 이메일로 수정하면 400, 같은 이메일로 수정하면 성공하는지 테스트합니다."""
    print("\n--- Running test_update_customer_email_conflict ---")
    first = (await client.post("/api/customers", json=_customer_payload())).json()
    await client.post("/api/customers", json=_customer_payload(email="john@acme.com", contact_name="John"))

    conflict = await client.put(
        f"/api/customers/{first['id']}", json=_customer_payload(email="john@acme.com")
    )
    assert conflict.status_code == 400
    assert conflict.json()["detail"] == "Email already exists: john@acme.com"

    same = await client.put(
        f"/api/customers/{first['id']}", json=_customer_payload(company_name="Acme Holdings")
    )
    assert same.status_code == 200
    assert same.json()["company_name"] == "Acme Holdings"
    print("test_update_customer_email_conflict passed.")


@pytest.mark.asyncio
async def test_customer_queries(client: AsyncClient):
    """고객 검색/필터 엔드포인트를 테스트합니다."""
    print("\n--- Running test_customer_queries ---")
    await client.post("/api/customers", json=_customer_payload())
    await client.post(
        "/api/customers",
        json=_customer_payload(
            company_name="Globex", contact_name="Hank Scorpio", email="hank@globex.com",
            city="Springfield", country="US", credit_limit=100.0, active=False,
        ),
    )

    company = await client.get("/api/customers/search/company", params={"name": "glob"})
    assert [c["company_name"] for c in company.json()] == ["Globex"]

    contact = await client.get("/api/customers/search/contact", params={"name": "DOE"})
    assert [c["contact_name"] for c in contact.json()] == ["Jane Doe"]

    by_country = await client.get("/api/customers/country/US")
    assert len(by_country.json()) == 1

    credit = await client.get("/api/customers/credit-limit", params={"min": 1000})
    assert [c["email"] for c in credit.json()] == ["jane@acme.com"]

    inactive = await client.get("/api/customers/inactive")
    assert [c["email"] for c in inactive.json()] == ["hank@globex.com"]

    filtered = await client.get("/api/customers/filter", params={"active": "true", "country": "KR"})
    assert [c["email"] for c in filtered.json()] == ["jane@acme.com"]
    print("test_customer_queries passed.")


@pytest.mark.asyncio
async def test_customer_activation_and_delete(client: AsyncClient):
    print("\n--- Running test_customer_activation_and_delete ---")
    customer_id = (await client.post("/api/customers", json=_customer_payload())).json()["id"]

    deactivated = await client.put(f"/api/customers/{customer_id}/deactivate")
    assert deactivated.json()["active"] is False

    deleted = await client.delete(f"/api/customers/{customer_id}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Customer deleted successfully"}

    missing = await client.delete(f"/api/customers/{customer_id}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == f"Customer not found with id: {customer_id}"
    print("test_customer_activation_and_delete passed.")


# --- 주소 관리 엔드포인트 테스트 ---

@pytest.mark.asyncio
async def test_address_composite_uniqueness(client: AsyncClient):
    """
    (도로명, 도시, 우편번호) 조합이 같으면 400, 하나라도 다르면 생성되는지 테스트합니다.
    """
    print("\n--- Running test_address_composite_uniqueness ---")
    first = await client.post("/api/addresses", json=_address_payload())
    assert first.status_code == 201
    assert first.json()["is_primary"] is False

    duplicate = await client.post("/api/addresses", json=_address_payload(address_type="WORK"))
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "Address already exists with same street, city, and postal code"

    other_postal = await client.post("/api/addresses", json=_address_payload(postal_code="04525"))
    assert other_postal.status_code == 201
    print("test_address_composite_uniqueness passed.")


@pytest.mark.asyncio
async def test_address_update_rechecks_only_changed_combination(client: AsyncClient):
    print("\n--- Running test_address_update_rechecks_only_changed_combination ---")
    first = (await client.post("/api/addresses", json=_address_payload())).json()
    await client.post("/api/addresses", json=_address_payload(street="456 Second Avenue"))

    unchanged = await client.put(
        f"/api/addresses/{first['id']}", json=_address_payload(additional_info="Apt 3")
    )
    assert unchanged.status_code == 200
    assert unchanged.json()["additional_info"] == "Apt 3"

    conflict = await client.put(
        f"/api/addresses/{first['id']}", json=_address_payload(street="456 Second Avenue")
    )
    assert conflict.status_code == 400
    print("test_address_update_rechecks_only_changed_combination passed.")


@pytest.mark.asyncio
async def test_address_invalid_postal_code_returns_400(client: AsyncClient):
    print("\n--- Running test_address_invalid_postal_code_returns_400 ---")
    response = await client.post("/api/addresses", json=_address_payload(postal_code="ab"))
    assert response.status_code == 400
    print("test_address_invalid_postal_code_returns_400 passed.")


@pytest.mark.asyncio
async def test_address_coordinates_box(client: AsyncClient):
    """좌표 영역 조회가 경계를 포함하고 좌표가 없는 주소는 제외하는지 테스트합니다."""
    print("\n--- Running test_address_coordinates_box ---")
    inside = (await client.post(
        "/api/addresses", json=_address_payload(latitude=37.5, longitude=127.0)
    )).json()
    await client.post(
        "/api/addresses",
        json=_address_payload(street="1 Harbor Road", city="Busan", postal_code="48058", latitude=35.1, longitude=129.0),
    )
    no_coords = (await client.post(
        "/api/addresses", json=_address_payload(street="9 Unknown Lane", postal_code="00000")
    )).json()

    box = await client.get(
        "/api/addresses/coordinates",
        params={"min_lat": 37.0, "max_lat": 37.5, "min_lng": 126.5, "max_lng": 127.5},
    )
    assert [a["id"] for a in box.json()] == [inside["id"]]

    updated = await client.put(
        f"/api/addresses/{no_coords['id']}/coordinates", json={"latitude": 37.1, "longitude": 127.1}
    )
    assert updated.status_code == 200
    assert updated.json()["latitude"] == 37.1

    box_again = await client.get(
        "/api/addresses/coordinates",
        params={"min_lat": 37.0, "max_lat": 37.5, "min_lng": 126.5, "max_lng": 127.5},
    )
    assert len(box_again.json()) == 2
    print("test_address_coordinates_box passed.")


@pytest.mark.asyncio
async def test_address_primary_flag_and_queries(client: AsyncClient):
    print("\n--- Running test_address_primary_flag_and_queries ---")
    home = (await client.post("/api/addresses", json=_address_payload(additional_info="near park"))).json()
    await client.post(
        "/api/addresses",
        json=_address_payload(street="77 Ocean Drive", city="Busan", postal_code="48000", address_type="WORK"),
    )

    primary = await client.put(f"/api/addresses/{home['id']}/set-primary")
    assert primary.json()["is_primary"] is True

    primaries = await client.get("/api/addresses/primary")
    assert [a["id"] for a in primaries.json()] == [home["id"]]

    non_primary = await client.put(f"/api/addresses/{home['id']}/set-non-primary")
    assert non_primary.json()["is_primary"] is False

    ordered = await client.get("/api/addresses/ordered/city")
    assert [a["city"] for a in ordered.json()] == ["Busan", "Seoul"]

    pattern = await client.get("/api/addresses/postal-code-pattern", params={"pattern": "48%"})
    assert [a["city"] for a in pattern.json()] == ["Busan"]

    info = await client.get("/api/addresses/search/additional-info", params={"info": "park"})
    assert [a["id"] for a in info.json()] == [home["id"]]

    type_active = await client.get("/api/addresses/filter/type-active", params={"type": "WORK", "active": "true"})
    assert [a["city"] for a in type_active.json()] == ["Busan"]
    print("test_address_primary_flag_and_queries passed.")


@pytest.mark.asyncio
async def test_address_service_treats_missing_postal_code_as_value(db_session: AsyncSession):
    """우편번호가 없는 주소끼리도 도로명/도시가 같으면 중복으로 판단하는지 테스트합니다."""
    print("\n--- Running test_address_service_treats_missing_postal_code_as_value ---")
    await address_service.create(
        db_session, crm_schemas.AddressCreate(street="10 Hill Street", city="Incheon", country="KR")
    )
    with pytest.raises(ConflictError):
        await address_service.create(
            db_session, crm_schemas.AddressCreate(street="10 Hill Street", city="Incheon", country="KR")
        )
    print("test_address_service_treats_missing_postal_code_as_value passed.")


# --- 생성 후 조회 일치 및 없는 ID 수정 테스트 ---

@pytest.mark.asyncio
async def test_create_customer_round_trip(client: AsyncClient):
    """생성 후 ID로 조회하면 입력값과 같은 고객이 반환되는지 테스트합니다."""
    print("\n--- Running test_create_customer_round_trip ---")
    payload = _customer_payload(phone="010-1234-5678", address="1 Tower Road", active=False)
    created = await client.post("/api/customers", json=payload)
    assert created.status_code == 201

    fetched = await client.get(f"/api/customers/{created.json()['id']}")
    assert fetched.status_code == 200
    body = fetched.json()
    body.pop("id")
    assert body == payload
    print("test_create_customer_round_trip passed.")


@pytest.mark.asyncio
async def test_create_address_round_trip(client: AsyncClient):
    """생성 후 ID로 조회하면 입력값과 같은 주소가 반환되는지 테스트합니다."""
    print("\n--- Running test_create_address_round_trip ---")
    payload = _address_payload(
        state="Seoul-si",
        additional_info="Apt 1203",
        latitude=37.5665,
        longitude=126.978,
        is_primary=True,
        active=True,
    )
    created = await client.post("/api/addresses", json=payload)
    assert created.status_code == 201

    fetched = await client.get(f"/api/addresses/{created.json()['id']}")
    assert fetched.status_code == 200
    body = fetched.json()
    body.pop("id")
    assert body == payload
    print("test_create_address_round_trip passed.")


@pytest.mark.asyncio
async def test_update_missing_customer_returns_404(client: AsyncClient):
    print("\n--- Running test_update_missing_customer_returns_404 ---")
    assert (await client.post("/api/customers", json=_customer_payload())).status_code == 201
    before = (await client.get("/api/customers")).json()

    response = await client.put("/api/customers/12345", json=_customer_payload(email="ghost@acme.com"))
    assert response.status_code == 404
    assert response.json()["detail"] == "Customer not found with id: 12345"

    deactivate = await client.put("/api/customers/12345/deactivate")
    assert deactivate.status_code == 404

    assert (await client.get("/api/customers")).json() == before
    print("test_update_missing_customer_returns_404 passed.")


@pytest.mark.asyncio
async def test_update_missing_address_returns_404(client: AsyncClient):
    print("\n--- Running test_update_missing_address_returns_404 ---")
    assert (await client.post("/api/addresses", json=_address_payload())).status_code == 201
    before = (await client.get("/api/addresses")).json()

    response = await client.put("/api/addresses/12345", json=_address_payload(street="9 Nowhere Lane"))
    assert response.status_code == 404
    assert response.json()["detail"] == "Address not found with id: 12345"

    primary = await client.put("/api/addresses/12345/set-primary")
    assert primary.status_code == 404

    assert (await client.get("/api/addresses")).json() == before
    print("test_update_missing_address_returns_404 passed.")
