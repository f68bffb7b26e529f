# app/domains/prd/schemas.py

"""
'prd' 도메인 (상품 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.

생성 일시/수정 일시/게시 일시와 조회수/판매수/평점 같은 통계 필드는
서버가 관리하므로 Create/Update 스키마에 포함되지 않습니다.
"""

from decimal import Decimal
from typing import Annotated, Optional
from datetime import datetime
from pydantic import StringConstraints
from sqlmodel import SQLModel, Field

from .models import ProductStatus

CategoryCode = Annotated[str, StringConstraints(pattern=r"^[A-Z0-9_]{2,20}$")]
Sku = Annotated[str, StringConstraints(pattern=r"^[A-Z0-9_-]{3,50}$")]


# =============================================================================
# 1. 상품 카테고리 (ProductCategory) 스키마
# =============================================================================
class ProductCategoryBase(SQLModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    category_code: Optional[CategoryCode] = None
    parent_category_id: Optional[int] = None
    display_order: int = Field(0, ge=0)
    image_url: Optional[str] = Field(None, max_length=200)
    icon: Optional[str] = Field(None, max_length=200)
    color: Optional[str] = Field(None, max_length=50)
    product_count: Optional[int] = Field(None, ge=0)  # 생성 시 None이면 0
    is_featured: bool = False
    is_visible: bool = True
    meta_title: Optional[str] = Field(None, max_length=200)
    meta_description: Optional[str] = Field(None, max_length=500)
    tags: Optional[str] = Field(None, max_length=200)
    active: bool = True


class ProductCategoryCreate(ProductCategoryBase):
    pass


class ProductCategoryUpdate(ProductCategoryBase):
    pass


class ProductCategoryRead(ProductCategoryBase):
    id: int
    product_count: int
    created_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None

    class Config:
        from_attributes = True


# =============================================================================
# 2. 상품 (Product) 스키마
# =============================================================================
class ProductBase(SQLModel):
    name: str = Field(..., min_length=2, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    long_description: Optional[str] = Field(None, max_length=2000)
    sku: Optional[Sku] = None
    brand: Optional[str] = Field(None, max_length=100)
    model: Optional[str] = Field(None, max_length=100)

    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    cost: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    sale_price: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)

    stock_quantity: int = Field(0, ge=0)
    min_stock_level: int = Field(0, ge=0)
    max_stock_level: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None

    weight: Optional[float] = Field(None, ge=0)
    weight_unit: Optional[str] = Field(None, max_length=50)
    dimensions: Optional[str] = Field(None, max_length=100)
    color: Optional[str] = Field(None, max_length=50)
    size: Optional[str] = Field(None, max_length=50)
    image_url: Optional[str] = Field(None, max_length=500)
    image_gallery: Optional[str] = Field(None, max_length=1000)

    is_featured: bool = False
    is_digital: bool = False
    requires_shipping: bool = True
    is_taxable: bool = True
    track_inventory: bool = True
    allow_backorder: bool = False

    meta_title: Optional[str] = Field(None, max_length=200)
    meta_description: Optional[str] = Field(None, max_length=500)
    tags: Optional[str] = Field(None, max_length=200)
    status: ProductStatus = ProductStatus.DRAFT
    active: bool = True


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductRead(ProductBase):
    id: int
    rating: float
    review_count: int
    view_count: int
    sales_count: int
    created_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None
    published_date: Optional[datetime] = None

    class Config:
        from_attributes = True
