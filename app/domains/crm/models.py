# app/domains/crm/models.py

"""
'crm' 도메인 (고객 관리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 고객(customers)과 주소(addresses) 테이블에 대한 SQLModel 클래스를 포함합니다.
고유성은 데이터베이스 제약으로도 보장됩니다.
- customers.email (단일 고유)
- addresses (street, city, postal_code) 조합 고유
"""

from typing import Optional
from sqlmodel import Field, SQLModel
from sqlalchemy import UniqueConstraint


# =============================================================================
# 1. customers 테이블 모델
# =============================================================================
class CustomerBase(SQLModel):
    """
    customers 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    company_name: str = Field(max_length=100, description="회사명")
    contact_name: str = Field(max_length=50, description="담당자명")
    email: str = Field(max_length=100, unique=True, description="이메일 (고유)")
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=200)
    city: Optional[str] = Field(default=None, max_length=100)
    country: Optional[str] = Field(default=None, max_length=100)
    credit_limit: Optional[float] = Field(default=None, description="신용 한도 (0 이상)")
    active: bool = Field(default=True)


class Customer(CustomerBase, table=True):
    """
    customers 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "customers"


# =============================================================================
# 2. addresses 테이블 모델
# =============================================================================
class AddressBase(SQLModel):
    """
    addresses 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    street: str = Field(max_length=200, description="도로명 주소")
    city: str = Field(max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    country: str = Field(max_length=100)
    postal_code: Optional[str] = Field(default=None, max_length=20, description="우편번호")
    address_type: Optional[str] = Field(default=None, max_length=50, description="HOME, WORK, BILLING, SHIPPING 등")
    additional_info: Optional[str] = Field(default=None, max_length=200)
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)
    is_primary: bool = Field(default=False, description="대표 주소 여부")
    active: bool = Field(default=True)


class Address(AddressBase, table=True):
    """
    addresses 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "addresses"
    __table_args__ = (
        UniqueConstraint("street", "city", "postal_code", name="uq_addresses_street_city_postal_code"),
    )
