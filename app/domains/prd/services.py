# app/domains/prd/services.py

"""
'prd' 도메인의 비즈니스 규칙을 담당하는 서비스 모듈입니다.

- 카테고리: 이름/코드 고유성, 상위 카테고리 존재 여부 및 자기 참조 금지,
  하위 카테고리가 있으면 삭제 불가.
- 상품: 이름/SKU 고유성, 상태 전이(재고 0 -> OUT_OF_STOCK, 재고 회복 -> PUBLISHED),
  최초 PUBLISHED 전이 시 게시 일시 기록.
  상품의 생성/삭제/카테고리 변경 시 카테고리 상품 수 재계산 작업을 예약합니다.
"""

import logging
from datetime import datetime, UTC
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

from arq.connections import ArqRedis
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.core.service_base import CRUDServiceBase, UniqueRule
from . import crud, models, schemas, tasks

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 상품 카테고리 (ProductCategory) 서비스
# =============================================================================
class ProductCategoryService(
    CRUDServiceBase[models.ProductCategory, schemas.ProductCategoryCreate, schemas.ProductCategoryUpdate]
):
    entity_name = "Category"
    unique_rules = (
        UniqueRule(("name",), "Category name already exists: {name}"),
        UniqueRule(("category_code",), "Category code already exists: {category_code}", skip_empty=True),
    )

    async def validate_references(
        self, db: AsyncSession, data: Dict[str, Any], current: Optional[models.ProductCategory] = None
    ) -> None:
        parent_id = data.get("parent_category_id")
        if parent_id is None:
            return
        if current is not None and parent_id == current.id:
            raise ValidationError("Category cannot be its own parent")
        if current is not None and parent_id == current.parent_category_id:
            return
        if await self.crud.get(db, parent_id) is None:
            raise NotFoundError(f"Parent category not found with id: {parent_id}")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(UTC)
        data["created_date"] = now
        data["last_modified_date"] = now
        if data.get("product_count") is None:
            data["product_count"] = 0
        return data

    def prepare_update(self, db_obj: models.ProductCategory, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("product_count") is None:
            data["product_count"] = db_obj.product_count
        data["last_modified_date"] = datetime.now(UTC)
        return data

    async def before_delete(self, db: AsyncSession, db_obj: models.ProductCategory) -> None:
        subcategory_count = await crud.product_category.count_subcategories(db, parent_id=db_obj.id)
        if subcategory_count > 0:
            logger.warning("Category %s has %s subcategories, delete rejected", db_obj.id, subcategory_count)
            raise ConflictError(
                f"Cannot delete category with subcategories. Found {subcategory_count} subcategories."
            )

    async def _touch(self, db: AsyncSession, id: int, **changes: Any) -> models.ProductCategory:
        """지정된 필드와 함께 마지막 수정 일시를 갱신합니다."""
        return await self._apply_patch(db, id, last_modified_date=datetime.now(UTC), **changes)

    async def activate(self, db: AsyncSession, id: int) -> models.ProductCategory:
        return await self._touch(db, id, active=True)

    async def deactivate(self, db: AsyncSession, id: int) -> models.ProductCategory:
        return await self._touch(db, id, active=False)

    async def show(self, db: AsyncSession, id: int) -> models.ProductCategory:
        return await self._touch(db, id, is_visible=True)

    async def hide(self, db: AsyncSession, id: int) -> models.ProductCategory:
        return await self._touch(db, id, is_visible=False)

    async def feature(self, db: AsyncSession, id: int) -> models.ProductCategory:
        return await self._touch(db, id, is_featured=True)

    async def unfeature(self, db: AsyncSession, id: int) -> models.ProductCategory:
        return await self._touch(db, id, is_featured=False)

    async def update_product_count(self, db: AsyncSession, id: int, product_count: int) -> models.ProductCategory:
        db_obj = await self.get_or_404(db, id)
        if product_count < 0:
            raise ValidationError("Product count cannot be negative")
        return await self._save(
            db, db_obj, {"product_count": product_count, "last_modified_date": datetime.now(UTC)}
        )

    async def update_display_order(self, db: AsyncSession, id: int, display_order: int) -> models.ProductCategory:
        db_obj = await self.get_or_404(db, id)
        if display_order < 0:
            raise ValidationError("Display order cannot be negative")
        return await self._save(
            db, db_obj, {"display_order": display_order, "last_modified_date": datetime.now(UTC)}
        )

    async def update_tags(self, db: AsyncSession, id: int, tags: Optional[str]) -> models.ProductCategory:
        return await self._touch(db, id, tags=tags)

    async def sync_product_count(self, db: AsyncSession, id: int) -> models.ProductCategory:
        """상품 수를 products 테이블 기준으로 즉시 다시 계산합니다."""
        db_obj = await self.get_or_404(db, id)
        await tasks.sync_category_product_count({"db": db}, [db_obj.id])
        await db.refresh(db_obj)
        return db_obj


# =============================================================================
# 2. 상품 (Product) 서비스
# =============================================================================
class ProductService(CRUDServiceBase[models.Product, schemas.ProductCreate, schemas.ProductUpdate]):
    entity_name = "Product"
    unique_rules = (
        UniqueRule(("name",), "Product name already exists: {name}"),
        UniqueRule(("sku",), "SKU already exists: {sku}", skip_empty=True),
    )

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(UTC)
        data["created_date"] = now
        data["last_modified_date"] = now
        data["rating"] = 0.0
        data["review_count"] = 0
        data["view_count"] = 0
        data["sales_count"] = 0
        if data.get("stock_quantity") is None:
            data["stock_quantity"] = 0
        if data.get("status") == models.ProductStatus.PUBLISHED:
            data["published_date"] = now
        return data

    def prepare_update(self, db_obj: models.Product, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(UTC)
        data["last_modified_date"] = now
        if data.get("status") == models.ProductStatus.PUBLISHED and db_obj.published_date is None:
            data["published_date"] = now
        return data

    # -------------------------------------------------------------------------
    # 카테고리 상품 수 동기화
    # -------------------------------------------------------------------------
    async def _schedule_category_sync(
        self, db: AsyncSession, category_ids: Iterable[Optional[int]], arq_redis_pool: Optional[ArqRedis]
    ) -> None:
        targets = sorted({category_id for category_id in category_ids if category_id is not None})
        if not targets:
            return
        if arq_redis_pool:
            await arq_redis_pool.enqueue_job("sync_category_product_count", targets)
        else:
            logger.info(
                "ARQ Redis pool not available, "
                "performing category product count sync synchronously."
            )
            await tasks.sync_category_product_count({"db": db}, targets)

    async def create(
        self, db: AsyncSession, obj_in: schemas.ProductCreate, arq_redis_pool: Optional[ArqRedis] = None
    ) -> models.Product:
        db_obj = await super().create(db, obj_in)
        await self._schedule_category_sync(db, [db_obj.category_id], arq_redis_pool)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        id: int,
        obj_in: schemas.ProductUpdate,
        arq_redis_pool: Optional[ArqRedis] = None,
    ) -> models.Product:
        db_obj = await self.get_or_404(db, id)
        old_category_id = db_obj.category_id
        db_obj = await super().update(db, id, obj_in)
        if db_obj.category_id != old_category_id:
            await self._schedule_category_sync(db, [old_category_id, db_obj.category_id], arq_redis_pool)
        return db_obj

    async def delete(
        self, db: AsyncSession, id: int, arq_redis_pool: Optional[ArqRedis] = None
    ) -> models.Product:
        db_obj = await super().delete(db, id)
        await self._schedule_category_sync(db, [db_obj.category_id], arq_redis_pool)
        return db_obj

    # -------------------------------------------------------------------------
    # 단일 필드 변경
    # -------------------------------------------------------------------------
    async def _touch(self, db: AsyncSession, id: int, **changes: Any) -> models.Product:
        return await self._apply_patch(db, id, last_modified_date=datetime.now(UTC), **changes)

    async def activate(self, db: AsyncSession, id: int) -> models.Product:
        return await self._touch(db, id, active=True)

    async def deactivate(self, db: AsyncSession, id: int) -> models.Product:
        return await self._touch(db, id, active=False)

    async def feature(self, db: AsyncSession, id: int) -> models.Product:
        return await self._touch(db, id, is_featured=True)

    async def unfeature(self, db: AsyncSession, id: int) -> models.Product:
        return await self._touch(db, id, is_featured=False)

    async def update_status(self, db: AsyncSession, id: int, status: models.ProductStatus) -> models.Product:
        db_obj = await self.get_or_404(db, id)
        now = datetime.now(UTC)
        changes: Dict[str, Any] = {"status": status, "last_modified_date": now}
        # 게시 일시는 최초 PUBLISHED 전이 때 한 번만 기록됩니다.
        if status == models.ProductStatus.PUBLISHED and db_obj.published_date is None:
            changes["published_date"] = now
        return await self._save(db, db_obj, changes)

    async def update_price(self, db: AsyncSession, id: int, price: Decimal) -> models.Product:
        db_obj = await self.get_or_404(db, id)
        if price <= 0:
            raise ValidationError("Price must be greater than 0")
        return await self._save(db, db_obj, {"price": price, "last_modified_date": datetime.now(UTC)})

    async def update_sale_price(self, db: AsyncSession, id: int, sale_price: Optional[Decimal]) -> models.Product:
        db_obj = await self.get_or_404(db, id)
        if sale_price is not None and sale_price < 0:
            raise ValidationError("Sale price must be greater than or equal to 0")
        return await self._save(db, db_obj, {"sale_price": sale_price, "last_modified_date": datetime.now(UTC)})

    async def update_stock(self, db: AsyncSession, id: int, stock_quantity: int) -> models.Product:
        db_obj = await self.get_or_404(db, id)
        if stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        now = datetime.now(UTC)
        changes: Dict[str, Any] = {"stock_quantity": stock_quantity, "last_modified_date": now}
        if stock_quantity == 0:
            changes["status"] = models.ProductStatus.OUT_OF_STOCK
        elif db_obj.status == models.ProductStatus.OUT_OF_STOCK:
            changes["status"] = models.ProductStatus.PUBLISHED
            if db_obj.published_date is None:
                changes["published_date"] = now
        return await self._save(db, db_obj, changes)

    async def increment_view_count(self, db: AsyncSession, id: int) -> models.Product:
        db_obj = await self.get_or_404(db, id)
        return await self._save(db, db_obj, {"view_count": (db_obj.view_count or 0) + 1})

    async def increment_sales_count(self, db: AsyncSession, id: int) -> models.Product:
        db_obj = await self.get_or_404(db, id)
        return await self._save(db, db_obj, {"sales_count": (db_obj.sales_count or 0) + 1})

    async def update_rating(self, db: AsyncSession, id: int, rating: float, review_count: int) -> models.Product:
        db_obj = await self.get_or_404(db, id)
        if not 0 <= rating <= 5:
            raise ValidationError("Rating must be between 0 and 5")
        if review_count < 0:
            raise ValidationError("Review count cannot be negative")
        return await self._save(
            db, db_obj,
            {"rating": rating, "review_count": review_count, "last_modified_date": datetime.now(UTC)},
        )

    async def update_tags(self, db: AsyncSession, id: int, tags: Optional[str]) -> models.Product:
        return await self._touch(db, id, tags=tags)


product_category_service = ProductCategoryService(crud.product_category)
product_service = ProductService(crud.product)
