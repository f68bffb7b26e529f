# app/domains/crm/routers.py

"""
'crm' 도메인 (고객 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- /customers: 고객 CRUD, 검색/필터, 활성화
- /addresses: 주소 CRUD, 검색/필터/정렬, 대표 주소 지정, 좌표 변경
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.exceptions import NotFoundError
from app.core.schemas import MessageResponse

from . import crud as crm_crud
from . import schemas as crm_schemas
from .services import address_service, customer_service

router = APIRouter(
    tags=["Customer Management (고객 및 주소 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 고객 (Customer) API
# =============================================================================
@router.post(
    "/customers",
    response_model=crm_schemas.CustomerRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 고객 생성",
)
async def create_customer(customer_in: crm_schemas.CustomerCreate, db: AsyncSession = Depends(deps.get_db_session)):
    """
    새로운 고객을 생성합니다.
    - **email**: 이메일 (필수, 고유)
    """
    return await customer_service.create(db, customer_in)


@router.get("/customers", response_model=List[crm_schemas.CustomerRead], summary="모든 고객 조회")
async def read_customers(db: AsyncSession = Depends(deps.get_db_session)):
    return await customer_service.get_all(db)


@router.get("/customers/email/{email}", response_model=crm_schemas.CustomerRead, summary="이메일로 고객 조회")
async def read_customer_by_email(email: str, db: AsyncSession = Depends(deps.get_db_session)):
    db_customer = await crm_crud.customer.get_customer_by_email(db, email=email)
    if not db_customer:
        raise NotFoundError(f"Customer not found with email: {email}")
    return db_customer


@router.get("/customers/search/company", response_model=List[crm_schemas.CustomerRead], summary="회사명 부분 검색")
async def search_customers_by_company(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.customer.search_contains(db, attribute="company_name", value=name)


@router.get("/customers/search/contact", response_model=List[crm_schemas.CustomerRead], summary="담당자명 부분 검색")
async def search_customers_by_contact(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.customer.search_contains(db, attribute="contact_name", value=name)


@router.get("/customers/city/{city}", response_model=List[crm_schemas.CustomerRead], summary="도시별 고객 조회")
async def read_customers_by_city(city: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.customer.get_all_by(db, city=city)


@router.get("/customers/country/{country}", response_model=List[crm_schemas.CustomerRead], summary="국가별 고객 조회")
async def read_customers_by_country(country: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.customer.get_all_by(db, country=country)


@router.get("/customers/active", response_model=List[crm_schemas.CustomerRead], summary="활성 고객 조회")
async def read_active_customers(db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.customer.get_all_by(db, active=True)


@router.get("/customers/inactive", response_model=List[crm_schemas.CustomerRead], summary="비활성 고객 조회")
async def read_inactive_customers(db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.customer.get_all_by(db, active=False)


@router.get("/customers/credit-limit", response_model=List[crm_schemas.CustomerRead], summary="신용 한도가 기준보다 큰 고객")
async def read_customers_by_credit_limit(
    min_credit: float = Query(..., alias="min"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await crm_crud.customer.get_greater_than(db, attribute="credit_limit", value=min_credit)


@router.get("/customers/phone/{phone}", response_model=List[crm_schemas.CustomerRead], summary="전화번호로 고객 조회")
async def read_customers_by_phone(phone: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.customer.get_all_by(db, phone=phone)


@router.get("/customers/filter", response_model=List[crm_schemas.CustomerRead], summary="활성 여부 + 국가 필터")
async def filter_customers(active: bool, country: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.customer.get_all_by(db, active=active, country=country)


@router.get("/customers/{customer_id}", response_model=crm_schemas.CustomerRead, summary="특정 고객 조회")
async def read_customer(customer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await customer_service.get_or_404(db, customer_id)


@router.put("/customers/{customer_id}", response_model=crm_schemas.CustomerRead, summary="고객 정보 수정")
async def update_customer(
    customer_id: int,
    customer_in: crm_schemas.CustomerUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await customer_service.update(db, customer_id, customer_in)


@router.delete("/customers/{customer_id}", response_model=MessageResponse, summary="고객 삭제")
async def delete_customer(customer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    await customer_service.delete(db, customer_id)
    return MessageResponse(message="Customer deleted successfully")


@router.put("/customers/{customer_id}/activate", response_model=crm_schemas.CustomerRead, summary="고객 활성화")
async def activate_customer(customer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await customer_service.activate(db, customer_id)


@router.put("/customers/{customer_id}/deactivate", response_model=crm_schemas.CustomerRead, summary="고객 비활성화")
async def deactivate_customer(customer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await customer_service.deactivate(db, customer_id)


# =============================================================================
# 2. 주소 (Address) API
# =============================================================================
@router.post(
    "/addresses",
    response_model=crm_schemas.AddressRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 주소 생성",
)
async def create_address(address_in: crm_schemas.AddressCreate, db: AsyncSession = Depends(deps.get_db_session)):
    """
    새로운 주소를 생성합니다.
    도로명 + 도시 + 우편번호 조합이 이미 존재하면 400을 반환합니다.
    """
    return await address_service.create(db, address_in)


@router.get("/addresses", response_model=List[crm_schemas.AddressRead], summary="모든 주소 조회")
async def read_addresses(db: AsyncSession = Depends(deps.get_db_session)):
    return await address_service.get_all(db)


@router.get("/addresses/search/street", response_model=List[crm_schemas.AddressRead], summary="도로명 부분 검색")
async def search_addresses_by_street(street: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.search_contains(db, attribute="street", value=street)


@router.get("/addresses/city/{city}", response_model=List[crm_schemas.AddressRead], summary="도시별 주소 조회")
async def read_addresses_by_city(city: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, city=city)


@router.get("/addresses/search/city", response_model=List[crm_schemas.AddressRead], summary="도시 부분 검색")
async def search_addresses_by_city(city: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.search_contains(db, attribute="city", value=city)


@router.get("/addresses/state/{state}", response_model=List[crm_schemas.AddressRead], summary="주(State)별 주소 조회")
async def read_addresses_by_state(state: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, state=state)


@router.get("/addresses/country/{country}", response_model=List[crm_schemas.AddressRead], summary="국가별 주소 조회")
async def read_addresses_by_country(country: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, country=country)


@router.get("/addresses/search/country", response_model=List[crm_schemas.AddressRead], summary="국가 부분 검색")
async def search_addresses_by_country(country: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.search_contains(db, attribute="country", value=country)


@router.get("/addresses/postal-code/{postal_code}", response_model=List[crm_schemas.AddressRead], summary="우편번호로 조회")
async def read_addresses_by_postal_code(postal_code: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, postal_code=postal_code)


@router.get("/addresses/postal-code-pattern", response_model=List[crm_schemas.AddressRead], summary="우편번호 LIKE 패턴 검색")
async def read_addresses_by_postal_code_pattern(pattern: str, db: AsyncSession = Depends(deps.get_db_session)):
    """
    SQL LIKE 패턴을 그대로 사용합니다. (예: `100%`)
    """
    return await crm_crud.address.search_like(db, attribute="postal_code", pattern=pattern)


@router.get("/addresses/type/{address_type}", response_model=List[crm_schemas.AddressRead], summary="주소 유형별 조회")
async def read_addresses_by_type(address_type: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, address_type=address_type)


@router.get("/addresses/active", response_model=List[crm_schemas.AddressRead], summary="활성 주소 조회")
async def read_active_addresses(db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, active=True)


@router.get("/addresses/inactive", response_model=List[crm_schemas.AddressRead], summary="비활성 주소 조회")
async def read_inactive_addresses(db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, active=False)


@router.get("/addresses/primary", response_model=List[crm_schemas.AddressRead], summary="대표 주소 조회")
async def read_primary_addresses(db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, is_primary=True)


@router.get("/addresses/non-primary", response_model=List[crm_schemas.AddressRead], summary="대표가 아닌 주소 조회")
async def read_non_primary_addresses(db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, is_primary=False)


@router.get("/addresses/filter/city-country", response_model=List[crm_schemas.AddressRead], summary="도시 + 국가 필터")
async def filter_addresses_by_city_and_country(city: str, country: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, city=city, country=country)


@router.get("/addresses/filter/state-country", response_model=List[crm_schemas.AddressRead], summary="주 + 국가 필터")
async def filter_addresses_by_state_and_country(state: str, country: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, state=state, country=country)


@router.get("/addresses/filter/active-country", response_model=List[crm_schemas.AddressRead], summary="활성 여부 + 국가 필터")
async def filter_addresses_by_active_and_country(active: bool, country: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, active=active, country=country)


@router.get("/addresses/filter/active-city", response_model=List[crm_schemas.AddressRead], summary="활성 여부 + 도시 필터")
async def filter_addresses_by_active_and_city(active: bool, city: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_all_by(db, active=active, city=city)


@router.get("/addresses/filter/type-active", response_model=List[crm_schemas.AddressRead], summary="주소 유형 + 활성 여부 필터")
async def filter_addresses_by_type_and_active(
    active: bool,
    address_type: str = Query(..., alias="type"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await crm_crud.address.get_all_by(db, address_type=address_type, active=active)


@router.get("/addresses/coordinates", response_model=List[crm_schemas.AddressRead], summary="좌표 영역 내 주소 조회")
async def read_addresses_within_coordinates(
    min_lat: float,
    max_lat: float,
    min_lng: float,
    max_lng: float,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await crm_crud.address.get_addresses_within_coordinates(
        db, min_latitude=min_lat, max_latitude=max_lat, min_longitude=min_lng, max_longitude=max_lng
    )


@router.get("/addresses/search/additional-info", response_model=List[crm_schemas.AddressRead], summary="추가 정보 부분 검색")
async def search_addresses_by_additional_info(info: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_containing(db, attribute="additional_info", value=info)


@router.get("/addresses/ordered/city", response_model=List[crm_schemas.AddressRead], summary="도시순 정렬")
async def read_addresses_ordered_by_city(db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_ordered(db, "city")


@router.get("/addresses/ordered/country-city", response_model=List[crm_schemas.AddressRead], summary="국가, 도시순 정렬")
async def read_addresses_ordered_by_country_and_city(db: AsyncSession = Depends(deps.get_db_session)):
    return await crm_crud.address.get_ordered(db, "country", "city")


@router.get("/addresses/{address_id}", response_model=crm_schemas.AddressRead, summary="특정 주소 조회")
async def read_address(address_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await address_service.get_or_404(db, address_id)


@router.put("/addresses/{address_id}", response_model=crm_schemas.AddressRead, summary="주소 정보 수정")
async def update_address(
    address_id: int,
    address_in: crm_schemas.AddressUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    주소의 모든 필드를 교체합니다.
    도로명/도시/우편번호 중 하나라도 바뀐 경우에만 조합 중복을 검사합니다.
    """
    return await address_service.update(db, address_id, address_in)


@router.delete("/addresses/{address_id}", response_model=MessageResponse, summary="주소 삭제")
async def delete_address(address_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    await address_service.delete(db, address_id)
    return MessageResponse(message="Address deleted successfully")


@router.put("/addresses/{address_id}/activate", response_model=crm_schemas.AddressRead, summary="주소 활성화")
async def activate_address(address_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await address_service.activate(db, address_id)


@router.put("/addresses/{address_id}/deactivate", response_model=crm_schemas.AddressRead, summary="주소 비활성화")
async def deactivate_address(address_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await address_service.deactivate(db, address_id)


@router.put("/addresses/{address_id}/set-primary", response_model=crm_schemas.AddressRead, summary="대표 주소로 지정")
async def set_primary_address(address_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await address_service.set_primary(db, address_id)


@router.put("/addresses/{address_id}/set-non-primary", response_model=crm_schemas.AddressRead, summary="대표 주소 지정 해제")
async def set_non_primary_address(address_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await address_service.set_non_primary(db, address_id)


@router.put("/addresses/{address_id}/coordinates", response_model=crm_schemas.AddressRead, summary="좌표 변경")
async def update_address_coordinates(
    address_id: int,
    coordinates_in: crm_schemas.AddressCoordinatesUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await address_service.update_coordinates(
        db, address_id, coordinates_in.latitude, coordinates_in.longitude
    )
