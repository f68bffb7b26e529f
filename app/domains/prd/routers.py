# app/domains/prd/routers.py

"""
'prd' 도메인 (상품 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- /categories: 상품 카테고리 CRUD, 계층/검색/필터/정렬, 표시 및 상품 수 변경
- /products: 상품 CRUD, 검색/필터/정렬/집계, 상태/가격/재고/평점 변경

고정 경로는 ID 경로(/{category_id}, /{product_id})보다 먼저 선언해야 합니다.
"""

from datetime import date, datetime, time, UTC
from decimal import Decimal
from typing import List, Optional

from arq.connections import ArqRedis
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.exceptions import NotFoundError
from app.core.schemas import MessageResponse

from . import crud as prd_crud
from . import schemas as prd_schemas
from .models import ProductStatus
from .services import product_category_service, product_service

router = APIRouter(
    tags=["Product Management (상품 및 카테고리 관리)"],
    responses={404: {"description": "Not found"}},
)


def _start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=UTC)


# =============================================================================
# 1. 상품 카테고리 (ProductCategory) API
# =============================================================================
@router.post(
    "/categories",
    response_model=prd_schemas.ProductCategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 카테고리 생성",
)
async def create_category(
    category_in: prd_schemas.ProductCategoryCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새로운 상품 카테고리를 생성합니다.
    - **name**: 카테고리명 (필수, 고유)
    - **category_code**: 카테고리 코드 (선택, 고유, 대문자/숫자/밑줄)
    - **parent_category_id**: 상위 카테고리 ID (선택, 존재해야 함)
    """
    return await product_category_service.create(db, category_in)


@router.get("/categories", response_model=List[prd_schemas.ProductCategoryRead], summary="모든 카테고리 조회")
async def read_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await product_category_service.get_all(db)


@router.get("/categories/name/{name}", response_model=prd_schemas.ProductCategoryRead, summary="이름으로 카테고리 조회")
async def read_category_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    db_category = await prd_crud.product_category.get_category_by_name(db, name=name)
    if not db_category:
        raise NotFoundError(f"Category not found with name: {name}")
    return db_category


@router.get("/categories/code/{code}", response_model=prd_schemas.ProductCategoryRead, summary="코드로 카테고리 조회")
async def read_category_by_code(code: str, db: AsyncSession = Depends(deps.get_db_session)):
    db_category = await prd_crud.product_category.get_category_by_code(db, code=code)
    if not db_category:
        raise NotFoundError(f"Category not found with code: {code}")
    return db_category


@router.get("/categories/search/name", response_model=List[prd_schemas.ProductCategoryRead], summary="카테고리명 부분 검색")
async def search_categories_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.search_contains(db, attribute="name", value=name)


@router.get("/categories/search/description", response_model=List[prd_schemas.ProductCategoryRead], summary="설명 부분 검색")
async def search_categories_by_description(description: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.search_contains(db, attribute="description", value=description)


@router.get("/categories/parent/{parent_id}", response_model=List[prd_schemas.ProductCategoryRead], summary="하위 카테고리 조회")
async def read_subcategories(parent_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, parent_category_id=parent_id)


@router.get("/categories/root", response_model=List[prd_schemas.ProductCategoryRead], summary="최상위 카테고리 조회")
async def read_root_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, parent_category_id=None)


@router.get(
    "/categories/parent/{parent_id}/active/{active}",
    response_model=List[prd_schemas.ProductCategoryRead],
    summary="활성 여부별 하위 카테고리 조회",
)
async def read_subcategories_by_active(parent_id: int, active: bool, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, parent_category_id=parent_id, active=active)


@router.get("/categories/root/active", response_model=List[prd_schemas.ProductCategoryRead], summary="활성 최상위 카테고리 조회")
async def read_active_root_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, parent_category_id=None, active=True)


@router.get("/categories/active", response_model=List[prd_schemas.ProductCategoryRead], summary="활성 카테고리 조회")
async def read_active_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, active=True)


@router.get("/categories/inactive", response_model=List[prd_schemas.ProductCategoryRead], summary="비활성 카테고리 조회")
async def read_inactive_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, active=False)


@router.get("/categories/visible", response_model=List[prd_schemas.ProductCategoryRead], summary="노출 카테고리 조회")
async def read_visible_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, is_visible=True)


@router.get("/categories/hidden", response_model=List[prd_schemas.ProductCategoryRead], summary="숨김 카테고리 조회")
async def read_hidden_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, is_visible=False)


@router.get("/categories/featured", response_model=List[prd_schemas.ProductCategoryRead], summary="추천 카테고리 조회")
async def read_featured_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, is_featured=True)


@router.get("/categories/non-featured", response_model=List[prd_schemas.ProductCategoryRead], summary="비추천 카테고리 조회")
async def read_non_featured_categories(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, is_featured=False)


@router.get(
    "/categories/active/{active}/visible/{visible}",
    response_model=List[prd_schemas.ProductCategoryRead],
    summary="활성 여부 + 노출 여부 필터",
)
async def read_categories_by_active_and_visible(
    active: bool, visible: bool, db: AsyncSession = Depends(deps.get_db_session)
):
    return await prd_crud.product_category.get_all_by(db, active=active, is_visible=visible)


@router.get(
    "/categories/featured/{featured}/visible/{visible}",
    response_model=List[prd_schemas.ProductCategoryRead],
    summary="추천 여부 + 노출 여부 필터",
)
async def read_categories_by_featured_and_visible(
    featured: bool, visible: bool, db: AsyncSession = Depends(deps.get_db_session)
):
    return await prd_crud.product_category.get_all_by(db, is_featured=featured, is_visible=visible)


@router.get(
    "/categories/product-count/greater/{count}",
    response_model=List[prd_schemas.ProductCategoryRead],
    summary="상품 수가 기준보다 많은 카테고리",
)
async def read_categories_with_more_products(count: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_greater_than(db, attribute="product_count", value=count)


@router.get(
    "/categories/product-count/less/{count}",
    response_model=List[prd_schemas.ProductCategoryRead],
    summary="상품 수가 기준보다 적은 카테고리",
)
async def read_categories_with_fewer_products(count: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_less_than(db, attribute="product_count", value=count)


@router.get("/categories/no-products", response_model=List[prd_schemas.ProductCategoryRead], summary="상품이 없는 카테고리")
async def read_categories_without_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_categories_without_products(db)


@router.get("/categories/created-after", response_model=List[prd_schemas.ProductCategoryRead], summary="특정 날짜 이후 생성된 카테고리")
async def read_categories_created_after(
    since: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await prd_crud.product_category.get_greater_than(
        db, attribute="created_date", value=_start_of_day(since)
    )


@router.get("/categories/modified-after", response_model=List[prd_schemas.ProductCategoryRead], summary="특정 날짜 이후 수정된 카테고리")
async def read_categories_modified_after(
    since: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await prd_crud.product_category.get_greater_than(
        db, attribute="last_modified_date", value=_start_of_day(since)
    )


@router.get("/categories/tag/{tag}", response_model=List[prd_schemas.ProductCategoryRead], summary="태그를 포함하는 카테고리")
async def read_categories_by_tag(tag: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_containing(db, attribute="tags", value=tag)


@router.get("/categories/meta-title", response_model=List[prd_schemas.ProductCategoryRead], summary="메타 제목 부분 검색")
async def search_categories_by_meta_title(title: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_containing(db, attribute="meta_title", value=title)


@router.get("/categories/color/{color}", response_model=List[prd_schemas.ProductCategoryRead], summary="색상별 카테고리 조회")
async def read_categories_by_color(color: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_all_by(db, color=color)


@router.get("/categories/ordered/display-order", response_model=List[prd_schemas.ProductCategoryRead], summary="표시 순서 정렬")
async def read_categories_ordered_by_display_order(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_ordered(db, "display_order")


@router.get("/categories/ordered/name", response_model=List[prd_schemas.ProductCategoryRead], summary="이름순 정렬")
async def read_categories_ordered_by_name(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_ordered(db, "name")


@router.get("/categories/ordered/product-count", response_model=List[prd_schemas.ProductCategoryRead], summary="상품 수 내림차순")
async def read_categories_ordered_by_product_count(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_ordered(db, "-product_count")


@router.get("/categories/ordered/creation-date", response_model=List[prd_schemas.ProductCategoryRead], summary="최근 생성순")
async def read_categories_ordered_by_creation_date(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_ordered(db, "-created_date")


@router.get("/categories/ordered/modification-date", response_model=List[prd_schemas.ProductCategoryRead], summary="최근 수정순")
async def read_categories_ordered_by_modification_date(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_ordered(db, "-last_modified_date")


@router.get("/categories/criteria", response_model=List[prd_schemas.ProductCategoryRead], summary="다중 조건 조회")
async def read_categories_by_criteria(
    parent_category_id: Optional[int] = None,
    active: Optional[bool] = None,
    is_visible: Optional[bool] = None,
    is_featured: Optional[bool] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """지정하지 않은 조건은 무시됩니다. 결과는 표시 순서로 정렬됩니다."""
    return await prd_crud.product_category.get_categories_by_criteria(
        db,
        parent_category_id=parent_category_id,
        active=active,
        is_visible=is_visible,
        is_featured=is_featured,
    )


@router.get("/categories/{category_id}", response_model=prd_schemas.ProductCategoryRead, summary="특정 카테고리 조회")
async def read_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_category_service.get_or_404(db, category_id)


@router.get(
    "/categories/{category_id}/hierarchy",
    response_model=List[prd_schemas.ProductCategoryRead],
    summary="카테고리와 직계 하위 카테고리",
)
async def read_category_hierarchy(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.get_category_hierarchy(db, category_id=category_id)


@router.get("/categories/{category_id}/subcategories/count", response_model=int, summary="하위 카테고리 수")
async def count_subcategories(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product_category.count_subcategories(db, parent_id=category_id)


@router.put("/categories/{category_id}", response_model=prd_schemas.ProductCategoryRead, summary="카테고리 정보 수정")
async def update_category(
    category_id: int,
    category_in: prd_schemas.ProductCategoryUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    카테고리의 모든 필드를 요청 값으로 교체합니다.
    상위 카테고리를 자기 자신으로 지정할 수 없습니다.
    """
    return await product_category_service.update(db, category_id, category_in)


@router.delete("/categories/{category_id}", response_model=MessageResponse, summary="카테고리 삭제")
async def delete_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """하위 카테고리가 있으면 삭제할 수 없습니다. (400)"""
    await product_category_service.delete(db, category_id)
    return MessageResponse(message="Category deleted successfully")


@router.put("/categories/{category_id}/activate", response_model=prd_schemas.ProductCategoryRead, summary="카테고리 활성화")
async def activate_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_category_service.activate(db, category_id)


@router.put("/categories/{category_id}/deactivate", response_model=prd_schemas.ProductCategoryRead, summary="카테고리 비활성화")
async def deactivate_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_category_service.deactivate(db, category_id)


@router.put("/categories/{category_id}/show", response_model=prd_schemas.ProductCategoryRead, summary="카테고리 노출")
async def show_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_category_service.show(db, category_id)


@router.put("/categories/{category_id}/hide", response_model=prd_schemas.ProductCategoryRead, summary="카테고리 숨김")
async def hide_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_category_service.hide(db, category_id)


@router.put("/categories/{category_id}/feature", response_model=prd_schemas.ProductCategoryRead, summary="카테고리 추천 지정")
async def feature_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_category_service.feature(db, category_id)


@router.put("/categories/{category_id}/unfeature", response_model=prd_schemas.ProductCategoryRead, summary="카테고리 추천 해제")
async def unfeature_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_category_service.unfeature(db, category_id)


@router.put("/categories/{category_id}/product-count", response_model=prd_schemas.ProductCategoryRead, summary="상품 수 변경")
async def update_category_product_count(
    category_id: int, product_count: int, db: AsyncSession = Depends(deps.get_db_session)
):
    return await product_category_service.update_product_count(db, category_id, product_count)


@router.put("/categories/{category_id}/display-order", response_model=prd_schemas.ProductCategoryRead, summary="표시 순서 변경")
async def update_category_display_order(
    category_id: int, display_order: int, db: AsyncSession = Depends(deps.get_db_session)
):
    return await product_category_service.update_display_order(db, category_id, display_order)


@router.put("/categories/{category_id}/tags", response_model=prd_schemas.ProductCategoryRead, summary="태그 변경")
async def update_category_tags(
    category_id: int, tags: Optional[str] = None, db: AsyncSession = Depends(deps.get_db_session)
):
    return await product_category_service.update_tags(db, category_id, tags)


@router.put(
    "/categories/{category_id}/sync-product-count",
    response_model=prd_schemas.ProductCategoryRead,
    summary="상품 수 재계산",
)
async def sync_category_product_count(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """products 테이블을 기준으로 카테고리의 상품 수를 즉시 다시 계산합니다."""
    return await product_category_service.sync_product_count(db, category_id)


# =============================================================================
# 2. 상품 (Product) API
# =============================================================================
@router.post(
    "/products",
    response_model=prd_schemas.ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 상품 생성",
)
async def create_product(
    product_in: prd_schemas.ProductCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    arq_redis_pool: Optional[ArqRedis] = Depends(deps.get_arq_redis_pool),
):
    """
    새로운 상품을 생성합니다.
    - **name**: 상품명 (필수, 고유)
    - **sku**: 재고 관리 코드 (선택, 고유)
    - **price**: 판매가 (필수, 0 초과)

    카테고리가 지정되면 해당 카테고리의 상품 수 재계산 작업이 예약됩니다.
    """
    return await product_service.create(db, product_in, arq_redis_pool=arq_redis_pool)


@router.get("/products", response_model=List[prd_schemas.ProductRead], summary="모든 상품 조회")
async def read_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await product_service.get_all(db)


@router.get("/products/name/{name}", response_model=prd_schemas.ProductRead, summary="이름으로 상품 조회")
async def read_product_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    db_product = await prd_crud.product.get_product_by_name(db, name=name)
    if not db_product:
        raise NotFoundError(f"Product not found with name: {name}")
    return db_product


@router.get("/products/sku/{sku}", response_model=prd_schemas.ProductRead, summary="SKU로 상품 조회")
async def read_product_by_sku(sku: str, db: AsyncSession = Depends(deps.get_db_session)):
    db_product = await prd_crud.product.get_product_by_sku(db, sku=sku)
    if not db_product:
        raise NotFoundError(f"Product not found with sku: {sku}")
    return db_product


@router.get("/products/search/name", response_model=List[prd_schemas.ProductRead], summary="상품명 부분 검색")
async def search_products_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.search_contains(db, attribute="name", value=name)


@router.get("/products/search/description", response_model=List[prd_schemas.ProductRead], summary="설명 부분 검색")
async def search_products_by_description(description: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.search_contains(db, attribute="description", value=description)


@router.get("/products/search/brand", response_model=List[prd_schemas.ProductRead], summary="브랜드 부분 검색")
async def search_products_by_brand(brand: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.search_contains(db, attribute="brand", value=brand)


@router.get("/products/search", response_model=List[prd_schemas.ProductRead], summary="통합 검색")
async def search_products(search_term: str, db: AsyncSession = Depends(deps.get_db_session)):
    """이름, 설명, 브랜드, 모델명, 태그에서 검색어를 찾습니다. (대소문자 무시)"""
    return await prd_crud.product.search_products(db, search_term=search_term)


@router.get("/products/brand/{brand}", response_model=List[prd_schemas.ProductRead], summary="브랜드별 상품 조회")
async def read_products_by_brand(brand: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, brand=brand)


@router.get("/products/model/{model}", response_model=List[prd_schemas.ProductRead], summary="모델명별 상품 조회")
async def read_products_by_model(model: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, model=model)


@router.get("/products/category/{category_id}", response_model=List[prd_schemas.ProductRead], summary="카테고리별 상품 조회")
async def read_products_by_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, category_id=category_id)


@router.get(
    "/products/category/{category_id}/active/{active}",
    response_model=List[prd_schemas.ProductRead],
    summary="카테고리 + 활성 여부 필터",
)
async def read_products_by_category_and_active(
    category_id: int, active: bool, db: AsyncSession = Depends(deps.get_db_session)
):
    return await prd_crud.product.get_all_by(db, category_id=category_id, active=active)


@router.get("/products/status/{product_status}", response_model=List[prd_schemas.ProductRead], summary="상태별 상품 조회")
async def read_products_by_status(product_status: ProductStatus, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, status=product_status)


@router.get(
    "/products/status/{product_status}/active/{active}",
    response_model=List[prd_schemas.ProductRead],
    summary="상태 + 활성 여부 필터",
)
async def read_products_by_status_and_active(
    product_status: ProductStatus, active: bool, db: AsyncSession = Depends(deps.get_db_session)
):
    return await prd_crud.product.get_all_by(db, status=product_status, active=active)


@router.get("/products/active", response_model=List[prd_schemas.ProductRead], summary="활성 상품 조회")
async def read_active_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, active=True)


@router.get("/products/inactive", response_model=List[prd_schemas.ProductRead], summary="비활성 상품 조회")
async def read_inactive_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, active=False)


@router.get("/products/featured", response_model=List[prd_schemas.ProductRead], summary="추천 상품 조회")
async def read_featured_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, is_featured=True)


@router.get("/products/non-featured", response_model=List[prd_schemas.ProductRead], summary="비추천 상품 조회")
async def read_non_featured_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, is_featured=False)


@router.get("/products/digital", response_model=List[prd_schemas.ProductRead], summary="디지털 상품 조회")
async def read_digital_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, is_digital=True)


@router.get("/products/physical", response_model=List[prd_schemas.ProductRead], summary="실물 상품 조회")
async def read_physical_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, is_digital=False)


@router.get("/products/requires-shipping", response_model=List[prd_schemas.ProductRead], summary="배송 필요 상품")
async def read_products_requiring_shipping(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, requires_shipping=True)


@router.get("/products/no-shipping", response_model=List[prd_schemas.ProductRead], summary="배송 불필요 상품")
async def read_products_without_shipping(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, requires_shipping=False)


@router.get("/products/taxable", response_model=List[prd_schemas.ProductRead], summary="과세 상품")
async def read_taxable_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, is_taxable=True)


@router.get("/products/non-taxable", response_model=List[prd_schemas.ProductRead], summary="면세 상품")
async def read_non_taxable_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, is_taxable=False)


@router.get("/products/tracked", response_model=List[prd_schemas.ProductRead], summary="재고 추적 상품")
async def read_tracked_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, track_inventory=True)


@router.get("/products/untracked", response_model=List[prd_schemas.ProductRead], summary="재고 미추적 상품")
async def read_untracked_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, track_inventory=False)


@router.get("/products/color/{color}", response_model=List[prd_schemas.ProductRead], summary="색상별 상품 조회")
async def read_products_by_color(color: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, color=color)


@router.get("/products/size/{size}", response_model=List[prd_schemas.ProductRead], summary="사이즈별 상품 조회")
async def read_products_by_size(size: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_all_by(db, size=size)


@router.get("/products/price-range", response_model=List[prd_schemas.ProductRead], summary="가격 범위 조회")
async def read_products_by_price_range(
    min_price: Decimal, max_price: Decimal, db: AsyncSession = Depends(deps.get_db_session)
):
    """min_price <= price <= max_price"""
    return await prd_crud.product.get_between(db, attribute="price", low=min_price, high=max_price)


@router.get("/products/price/greater-than", response_model=List[prd_schemas.ProductRead], summary="가격이 기준보다 높은 상품")
async def read_products_with_higher_price(price: Decimal, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_greater_than(db, attribute="price", value=price)


@router.get("/products/price/less-than", response_model=List[prd_schemas.ProductRead], summary="가격이 기준보다 낮은 상품")
async def read_products_with_lower_price(price: Decimal, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_less_than(db, attribute="price", value=price)


@router.get("/products/on-sale", response_model=List[prd_schemas.ProductRead], summary="할인 중인 상품")
async def read_products_on_sale(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_products_on_sale(db)


@router.get("/products/stock/greater-than", response_model=List[prd_schemas.ProductRead], summary="재고가 기준보다 많은 상품")
async def read_products_with_more_stock(quantity: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_greater_than(db, attribute="stock_quantity", value=quantity)


@router.get("/products/stock/less-than", response_model=List[prd_schemas.ProductRead], summary="재고가 기준보다 적은 상품")
async def read_products_with_less_stock(quantity: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_less_than(db, attribute="stock_quantity", value=quantity)


@router.get("/products/out-of-stock", response_model=List[prd_schemas.ProductRead], summary="품절 상품")
async def read_out_of_stock_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_out_of_stock_products(db)


@router.get("/products/low-stock", response_model=List[prd_schemas.ProductRead], summary="재고 부족 상품")
async def read_low_stock_products(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_low_stock_products(db)


@router.get("/products/rating/greater-than", response_model=List[prd_schemas.ProductRead], summary="평점이 기준보다 높은 상품")
async def read_products_with_higher_rating(rating: float, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_greater_than(db, attribute="rating", value=rating)


@router.get("/products/rating-range", response_model=List[prd_schemas.ProductRead], summary="평점 범위 조회")
async def read_products_by_rating_range(
    min_rating: float, max_rating: float, db: AsyncSession = Depends(deps.get_db_session)
):
    return await prd_crud.product.get_between(db, attribute="rating", low=min_rating, high=max_rating)


@router.get("/products/created-after", response_model=List[prd_schemas.ProductRead], summary="특정 날짜 이후 생성된 상품")
async def read_products_created_after(
    since: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await prd_crud.product.get_greater_than(db, attribute="created_date", value=_start_of_day(since))


@router.get("/products/published-after", response_model=List[prd_schemas.ProductRead], summary="특정 날짜 이후 게시된 상품")
async def read_products_published_after(
    since: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await prd_crud.product.get_greater_than(db, attribute="published_date", value=_start_of_day(since))


@router.get("/products/modified-after", response_model=List[prd_schemas.ProductRead], summary="특정 날짜 이후 수정된 상품")
async def read_products_modified_after(
    since: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await prd_crud.product.get_greater_than(db, attribute="last_modified_date", value=_start_of_day(since))


@router.get("/products/tag/{tag}", response_model=List[prd_schemas.ProductRead], summary="태그를 포함하는 상품")
async def read_products_by_tag(tag: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_containing(db, attribute="tags", value=tag)


@router.get("/products/meta-title", response_model=List[prd_schemas.ProductRead], summary="메타 제목 부분 검색")
async def search_products_by_meta_title(title: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_containing(db, attribute="meta_title", value=title)


@router.get("/products/best-selling", response_model=List[prd_schemas.ProductRead], summary="판매량 상위 상품")
async def read_best_selling_products(sales_count: int = 0, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_best_selling_products(db, min_sales=sales_count)


@router.get("/products/most-viewed", response_model=List[prd_schemas.ProductRead], summary="조회수 상위 상품")
async def read_most_viewed_products(view_count: int = 0, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_most_viewed_products(db, min_views=view_count)


@router.get("/products/highly-rated", response_model=List[prd_schemas.ProductRead], summary="평점 상위 상품")
async def read_highly_rated_products(
    rating: float = 4.0, min_reviews: int = 1, db: AsyncSession = Depends(deps.get_db_session)
):
    return await prd_crud.product.get_highly_rated_products(db, min_rating=rating, min_reviews=min_reviews)


@router.get("/products/ordered/name", response_model=List[prd_schemas.ProductRead], summary="이름순 정렬")
async def read_products_ordered_by_name(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_ordered(db, "name")


@router.get("/products/ordered/price-asc", response_model=List[prd_schemas.ProductRead], summary="가격 오름차순")
async def read_products_ordered_by_price_asc(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_ordered(db, "price")


@router.get("/products/ordered/price-desc", response_model=List[prd_schemas.ProductRead], summary="가격 내림차순")
async def read_products_ordered_by_price_desc(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_ordered(db, "-price")


@router.get("/products/ordered/creation-date", response_model=List[prd_schemas.ProductRead], summary="최근 생성순")
async def read_products_ordered_by_creation_date(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_ordered(db, "-created_date")


@router.get("/products/ordered/rating", response_model=List[prd_schemas.ProductRead], summary="평점 내림차순")
async def read_products_ordered_by_rating(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_ordered(db, "-rating")


@router.get("/products/ordered/sales", response_model=List[prd_schemas.ProductRead], summary="판매량 내림차순")
async def read_products_ordered_by_sales(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_ordered(db, "-sales_count")


@router.get("/products/ordered/views", response_model=List[prd_schemas.ProductRead], summary="조회수 내림차순")
async def read_products_ordered_by_views(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_ordered(db, "-view_count")


@router.get("/products/ordered/stock", response_model=List[prd_schemas.ProductRead], summary="재고 내림차순")
async def read_products_ordered_by_stock(db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.get_ordered(db, "-stock_quantity")


@router.get("/products/criteria", response_model=List[prd_schemas.ProductRead], summary="다중 조건 조회")
async def read_products_by_criteria(
    category_id: Optional[int] = None,
    brand: Optional[str] = None,
    product_status: Optional[ProductStatus] = Query(None, alias="status"),
    active: Optional[bool] = None,
    is_featured: Optional[bool] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """지정하지 않은 조건은 무시됩니다. 가격 범위는 양 끝을 포함합니다."""
    return await prd_crud.product.get_products_by_criteria(
        db,
        category_id=category_id,
        brand=brand,
        status=product_status,
        active=active,
        is_featured=is_featured,
        min_price=min_price,
        max_price=max_price,
    )


@router.get("/products/count/category/{category_id}", response_model=int, summary="카테고리별 상품 수")
async def count_products_in_category(category_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.count_products_in_category(db, category_id=category_id)


@router.get("/products/count/brand/{brand}", response_model=int, summary="브랜드별 상품 수")
async def count_products_by_brand(brand: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.count_products_by_brand(db, brand=brand)


@router.get("/products/count/status/{product_status}", response_model=int, summary="상태별 상품 수")
async def count_products_by_status(product_status: ProductStatus, db: AsyncSession = Depends(deps.get_db_session)):
    return await prd_crud.product.count_products_by_status(db, status=product_status)


@router.get("/products/{product_id}", response_model=prd_schemas.ProductRead, summary="특정 상품 조회")
async def read_product(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_service.get_or_404(db, product_id)


@router.put("/products/{product_id}", response_model=prd_schemas.ProductRead, summary="상품 정보 수정")
async def update_product(
    product_id: int,
    product_in: prd_schemas.ProductUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    arq_redis_pool: Optional[ArqRedis] = Depends(deps.get_arq_redis_pool),
):
    """
    상품의 모든 필드를 요청 값으로 교체합니다. 통계 필드(평점/조회수/판매수)는 유지됩니다.
    상태가 처음으로 PUBLISHED가 되면 게시 일시가 기록됩니다.
    """
    return await product_service.update(db, product_id, product_in, arq_redis_pool=arq_redis_pool)


@router.delete("/products/{product_id}", response_model=MessageResponse, summary="상품 삭제")
async def delete_product(
    product_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    arq_redis_pool: Optional[ArqRedis] = Depends(deps.get_arq_redis_pool),
):
    await product_service.delete(db, product_id, arq_redis_pool=arq_redis_pool)
    return MessageResponse(message="Product deleted successfully")


@router.put("/products/{product_id}/activate", response_model=prd_schemas.ProductRead, summary="상품 활성화")
async def activate_product(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_service.activate(db, product_id)


@router.put("/products/{product_id}/deactivate", response_model=prd_schemas.ProductRead, summary="상품 비활성화")
async def deactivate_product(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_service.deactivate(db, product_id)


@router.put("/products/{product_id}/feature", response_model=prd_schemas.ProductRead, summary="상품 추천 지정")
async def feature_product(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_service.feature(db, product_id)


@router.put("/products/{product_id}/unfeature", response_model=prd_schemas.ProductRead, summary="상품 추천 해제")
async def unfeature_product(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_service.unfeature(db, product_id)


@router.put("/products/{product_id}/status", response_model=prd_schemas.ProductRead, summary="상품 상태 변경")
async def update_product_status(
    product_id: int,
    new_status: ProductStatus = Query(..., alias="status"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await product_service.update_status(db, product_id, new_status)


@router.put("/products/{product_id}/price", response_model=prd_schemas.ProductRead, summary="판매가 변경")
async def update_product_price(
    product_id: int,
    price: Decimal = Query(..., max_digits=12, decimal_places=2),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await product_service.update_price(db, product_id, price)


@router.put("/products/{product_id}/sale-price", response_model=prd_schemas.ProductRead, summary="할인가 변경")
async def update_product_sale_price(
    product_id: int,
    sale_price: Optional[Decimal] = Query(None, max_digits=12, decimal_places=2),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """sale_price를 생략하면 할인가가 해제됩니다."""
    return await product_service.update_sale_price(db, product_id, sale_price)


@router.put("/products/{product_id}/stock", response_model=prd_schemas.ProductRead, summary="재고 수량 변경")
async def update_product_stock(
    product_id: int, stock_quantity: int, db: AsyncSession = Depends(deps.get_db_session)
):
    """
    재고가 0이 되면 상태가 OUT_OF_STOCK으로 바뀌고,
    OUT_OF_STOCK 상태에서 재고가 생기면 PUBLISHED로 돌아갑니다.
    """
    return await product_service.update_stock(db, product_id, stock_quantity)


@router.put("/products/{product_id}/view", response_model=prd_schemas.ProductRead, summary="조회수 1 증가")
async def increment_product_view_count(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_service.increment_view_count(db, product_id)


@router.put("/products/{product_id}/sale", response_model=prd_schemas.ProductRead, summary="판매수 1 증가")
async def increment_product_sales_count(product_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await product_service.increment_sales_count(db, product_id)


@router.put("/products/{product_id}/rating", response_model=prd_schemas.ProductRead, summary="평점 변경")
async def update_product_rating(
    product_id: int,
    rating: float,
    review_count: int,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await product_service.update_rating(db, product_id, rating, review_count)


@router.put("/products/{product_id}/tags", response_model=prd_schemas.ProductRead, summary="태그 변경")
async def update_product_tags(
    product_id: int, tags: Optional[str] = None, db: AsyncSession = Depends(deps.get_db_session)
):
    return await product_service.update_tags(db, product_id, tags)
