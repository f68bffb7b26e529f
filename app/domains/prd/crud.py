# app/domains/prd/crud.py

"""
'prd' 도메인의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 모듈입니다.

상품 카테고리(product_categories)와 상품(products) 테이블에 대한
데이터베이스 상호작용 로직을 캡슐화합니다.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.domains.prd import models as prd_models
from app.domains.prd import schemas as prd_schemas


# =============================================================================
# 1. product_categories 테이블 CRUD
# =============================================================================
class CRUDProductCategory(
    CRUDBase[
        prd_models.ProductCategory,
        prd_schemas.ProductCategoryCreate,
        prd_schemas.ProductCategoryUpdate,
    ]
):
    def __init__(self):
        super().__init__(prd_models.ProductCategory)

    async def get_category_by_name(self, db: AsyncSession, *, name: str) -> Optional[prd_models.ProductCategory]:
        return await self.get_by_attribute(db, attribute="name", value=name)

    async def get_category_by_code(self, db: AsyncSession, *, code: str) -> Optional[prd_models.ProductCategory]:
        return await self.get_by_attribute(db, attribute="category_code", value=code)

    async def get_category_hierarchy(self, db: AsyncSession, *, category_id: int) -> List[prd_models.ProductCategory]:
        """카테고리 자신과 직계 하위 카테고리"""
        return await self._fetch_all(
            db,
            or_(self.model.id == category_id, self.model.parent_category_id == category_id),
        )

    async def count_subcategories(self, db: AsyncSession, *, parent_id: int) -> int:
        return await self.count_by(db, parent_category_id=parent_id)

    async def get_categories_without_products(self, db: AsyncSession) -> List[prd_models.ProductCategory]:
        return await self._fetch_all(
            db, or_(self.model.product_count == 0, self.model.product_count.is_(None))
        )

    async def get_categories_by_criteria(
        self,
        db: AsyncSession,
        *,
        parent_category_id: Optional[int] = None,
        active: Optional[bool] = None,
        is_visible: Optional[bool] = None,
        is_featured: Optional[bool] = None,
    ) -> List[prd_models.ProductCategory]:
        """지정된 조건만 적용합니다. (None인 조건은 무시)"""
        return await self.get_filtered(
            db,
            filters={
                "parent_category_id": parent_category_id,
                "active": active,
                "is_visible": is_visible,
                "is_featured": is_featured,
            },
            order_by=("display_order",),
        )


# =============================================================================
# 2. products 테이블 CRUD
# =============================================================================
class CRUDProduct(CRUDBase[prd_models.Product, prd_schemas.ProductCreate, prd_schemas.ProductUpdate]):
    def __init__(self):
        super().__init__(prd_models.Product)

    async def get_product_by_name(self, db: AsyncSession, *, name: str) -> Optional[prd_models.Product]:
        return await self.get_by_attribute(db, attribute="name", value=name)

    async def get_product_by_sku(self, db: AsyncSession, *, sku: str) -> Optional[prd_models.Product]:
        return await self.get_by_attribute(db, attribute="sku", value=sku)

    async def search_products(self, db: AsyncSession, *, search_term: str) -> List[prd_models.Product]:
        """이름, 설명, 브랜드, 모델명, 태그 중 하나라도 검색어를 포함하는 상품 (대소문자 무시)"""
        columns = (
            self.model.name,
            self.model.description,
            self.model.brand,
            self.model.model,
            self.model.tags,
        )
        return await self._fetch_all(
            db, or_(*(column.icontains(search_term, autoescape=True) for column in columns))
        )

    async def get_products_on_sale(self, db: AsyncSession) -> List[prd_models.Product]:
        """할인가가 설정되어 있고 정가보다 낮은 상품"""
        return await self._fetch_all(
            db,
            and_(self.model.sale_price.is_not(None), self.model.sale_price < self.model.price),
        )

    async def get_out_of_stock_products(self, db: AsyncSession) -> List[prd_models.Product]:
        return await self._fetch_all(
            db, or_(self.model.stock_quantity == 0, self.model.stock_quantity.is_(None))
        )

    async def get_low_stock_products(self, db: AsyncSession) -> List[prd_models.Product]:
        """재고가 최소 재고 수준 이하인 상품 (최소 재고 수준이 0보다 큰 경우만)"""
        return await self._fetch_all(
            db,
            self.model.min_stock_level > 0,
            self.model.stock_quantity <= self.model.min_stock_level,
        )

    async def get_best_selling_products(self, db: AsyncSession, *, min_sales: int) -> List[prd_models.Product]:
        return await self.get_greater_than(db, attribute="sales_count", value=min_sales, order_by=("-sales_count",))

    async def get_most_viewed_products(self, db: AsyncSession, *, min_views: int) -> List[prd_models.Product]:
        return await self.get_greater_than(db, attribute="view_count", value=min_views, order_by=("-view_count",))

    async def get_highly_rated_products(
        self, db: AsyncSession, *, min_rating: float, min_reviews: int
    ) -> List[prd_models.Product]:
        """평점과 리뷰 수가 모두 기준 이상인 상품 (평점 내림차순)"""
        return await self._fetch_all(
            db,
            self.model.rating >= min_rating,
            self.model.review_count >= min_reviews,
            order_by=("-rating",),
        )

    async def get_products_by_criteria(
        self,
        db: AsyncSession,
        *,
        category_id: Optional[int] = None,
        brand: Optional[str] = None,
        status: Optional[str] = None,
        active: Optional[bool] = None,
        is_featured: Optional[bool] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
    ) -> List[prd_models.Product]:
        """지정된 조건만 적용합니다. 가격 범위는 양 끝을 포함합니다."""
        return await self.get_filtered(
            db,
            filters={
                "category_id": category_id,
                "brand": brand,
                "status": status,
                "active": active,
                "is_featured": is_featured,
            },
            ranges={"price": (min_price, max_price)},
        )

    async def count_products_in_category(self, db: AsyncSession, *, category_id: int) -> int:
        return await self.count_by(db, category_id=category_id)

    async def count_products_by_brand(self, db: AsyncSession, *, brand: str) -> int:
        return await self.count_by(db, brand=brand)

    async def count_products_by_status(self, db: AsyncSession, *, status: str) -> int:
        return await self.count_by(db, status=status)


product_category = CRUDProductCategory()
product = CRUDProduct()
