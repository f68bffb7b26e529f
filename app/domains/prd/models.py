# app/domains/prd/models.py

"""
'prd' 도메인 (상품 관리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 상품 카테고리(product_categories)와 상품(products) 테이블에 대한
SQLModel 클래스를 포함합니다. 카테고리의 상위 카테고리와 상품의 카테고리는
외래 키가 아닌 소프트 참조(ID 값만 저장)이며, 존재 여부는 서비스 계층에서 검사합니다.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Numeric, String
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# =============================================================================
# 1. product_categories 테이블 모델
# =============================================================================
class ProductCategoryBase(SQLModel):
    """
    product_categories 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True, description="카테고리명 (고유)")
    description: Optional[str] = Field(default=None, max_length=500)
    category_code: Optional[str] = Field(default=None, max_length=20, unique=True, description="카테고리 코드 (고유)")
    parent_category_id: Optional[int] = Field(default=None, index=True, description="상위 카테고리 ID (소프트 참조)")
    display_order: int = Field(default=0)
    image_url: Optional[str] = Field(default=None, max_length=200)
    icon: Optional[str] = Field(default=None, max_length=200)
    color: Optional[str] = Field(default=None, max_length=50)
    product_count: int = Field(default=0, description="소속 상품 수 (비정규화 카운터)")
    is_featured: bool = Field(default=False)
    is_visible: bool = Field(default=True)
    meta_title: Optional[str] = Field(default=None, max_length=200)
    meta_description: Optional[str] = Field(default=None, max_length=500)
    tags: Optional[str] = Field(default=None, max_length=200)
    active: bool = Field(default=True)

    created_date: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="생성 일시"
    )
    last_modified_date: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="마지막 수정 일시"
    )


class ProductCategory(ProductCategoryBase, table=True):
    """
    product_categories 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "product_categories"


# =============================================================================
# 2. products 테이블 모델
# =============================================================================
class ProductStatus(str, Enum):
    """
    상품 상태를 정의하는 Enum
    DRAFT -> PUBLISHED -> ARCHIVED | OUT_OF_STOCK | DISCONTINUED
    PUBLISHED <-> OUT_OF_STOCK 전이는 재고 수량 변경 시 자동으로 일어납니다.
    """
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DISCONTINUED = "DISCONTINUED"


class ProductBase(SQLModel):
    """
    products 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=200, unique=True, description="상품명 (고유)")
    description: Optional[str] = Field(default=None, max_length=1000)
    long_description: Optional[str] = Field(default=None, max_length=2000)
    sku: Optional[str] = Field(default=None, max_length=50, unique=True, description="재고 관리 코드 (고유)")
    brand: Optional[str] = Field(default=None, max_length=100)
    model: Optional[str] = Field(default=None, max_length=100)

    # 가격
    price: Decimal = Field(sa_column=Column(Numeric(12, 2), nullable=False), description="판매가 (0 초과)")
    cost: Optional[Decimal] = Field(default=None, sa_column=Column(Numeric(12, 2)), description="원가")
    sale_price: Optional[Decimal] = Field(default=None, sa_column=Column(Numeric(12, 2)), description="할인가")

    # 재고
    stock_quantity: int = Field(default=0)
    min_stock_level: int = Field(default=0)
    max_stock_level: Optional[int] = Field(default=None)
    category_id: Optional[int] = Field(default=None, index=True, description="카테고리 ID (소프트 참조)")

    # 물리 속성
    weight: Optional[float] = Field(default=None)
    weight_unit: Optional[str] = Field(default=None, max_length=50)
    dimensions: Optional[str] = Field(default=None, max_length=100)
    color: Optional[str] = Field(default=None, max_length=50)
    size: Optional[str] = Field(default=None, max_length=50)
    image_url: Optional[str] = Field(default=None, max_length=500)
    image_gallery: Optional[str] = Field(default=None, max_length=1000)

    # 플래그
    is_featured: bool = Field(default=False)
    is_digital: bool = Field(default=False)
    requires_shipping: bool = Field(default=True)
    is_taxable: bool = Field(default=True)
    track_inventory: bool = Field(default=True)
    allow_backorder: bool = Field(default=False)

    # 평가/통계
    rating: float = Field(default=0.0, description="평점 (0 ~ 5)")
    review_count: int = Field(default=0)
    view_count: int = Field(default=0)
    sales_count: int = Field(default=0)

    # SEO
    meta_title: Optional[str] = Field(default=None, max_length=200)
    meta_description: Optional[str] = Field(default=None, max_length=500)
    tags: Optional[str] = Field(default=None, max_length=200)

    status: ProductStatus = Field(
        default=ProductStatus.DRAFT,
        sa_column=Column(String(20), nullable=False, server_default=ProductStatus.DRAFT.value),
        description="상품 상태"
    )
    active: bool = Field(default=True)

    created_date: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    last_modified_date: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    published_date: Optional[datetime] = Field(
        default=None,
        sa_column=Column(TIMESTAMP(timezone=True)),
        description="최초 PUBLISHED 전이 일시"
    )


class Product(ProductBase, table=True):
    """
    products 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "products"
