# app/domains/crm/schemas.py

"""
'crm' 도메인 (고객 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Annotated, Optional
from sqlmodel import SQLModel, Field
from pydantic import EmailStr, StringConstraints

# 우편번호: 숫자, 대문자, 공백, 하이픈 3 ~ 20자
PostalCode = Annotated[str, StringConstraints(pattern=r"^[0-9A-Z\s-]{3,20}$")]


# =============================================================================
# 1. 고객 (Customer) 스키마
# =============================================================================
class CustomerBase(SQLModel):
    company_name: str = Field(..., min_length=2, max_length=100)
    contact_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    credit_limit: Optional[float] = Field(None, ge=0)
    active: bool = True


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CustomerBase):
    pass


class CustomerRead(CustomerBase):
    id: int

    class Config:
        from_attributes = True


# =============================================================================
# 2. 주소 (Address) 스키마
# =============================================================================
class AddressBase(SQLModel):
    street: str = Field(..., min_length=5, max_length=200)
    city: str = Field(..., min_length=2, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    country: str = Field(..., min_length=2, max_length=100)
    postal_code: Optional[PostalCode] = None
    address_type: Optional[str] = Field(None, max_length=50)
    additional_info: Optional[str] = Field(None, max_length=200)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    is_primary: bool = False
    active: bool = True


class AddressCreate(AddressBase):
    pass


class AddressUpdate(AddressBase):
    pass


class AddressRead(AddressBase):
    id: int

    class Config:
        from_attributes = True


class AddressCoordinatesUpdate(SQLModel):
    """PUT /addresses/{id}/coordinates 요청 본문"""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
