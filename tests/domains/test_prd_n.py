# tests/domains/test_prd_n.py

"""
'prd' 도메인 (상품 및 카테고리 관리) 관련 API 엔드포인트와 서비스에 대한 통합 테스트를 정의하는 모듈입니다.

- 카테고리: 이름/코드 고유성, 상위 카테고리 검증(자기 참조 금지, 존재 여부),
  하위 카테고리가 있으면 삭제 불가, 계층 조회, 상품 수 재계산
- 상품: 이름/SKU 고유성, 상태 전이(재고 0 -> OUT_OF_STOCK, 재고 회복 -> PUBLISHED),
  게시 일시 최초 1회 기록, 다중 조건 조회, 개수 조회,
  생성/삭제/카테고리 변경 시 카테고리 상품 수 동기화
"""

from decimal import Decimal
from typing import Awaitable, Callable

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.domains.prd import models as prd_models
from app.domains.prd import schemas as prd_schemas
from app.domains.prd import tasks as prd_tasks
from app.domains.prd.services import product_category_service, product_service

CategoryFactory = Callable[..., Awaitable[prd_models.ProductCategory]]


def _product_payload(**overrides) -> dict:
    payload = {
        "name": "Laptop Pro",
        "description": "Lightweight laptop",
        "sku": "LAP-001",
        "brand": "Zeta",
        "model": "ZP14",
        "price": 100.5,
        "stock_quantity": 10,
    }
    payload.update(overrides)
    return payload


# --- 카테고리 관리 엔드포인트 테스트 ---

@pytest.mark.asyncio
async def test_create_category_defaults_and_conflicts(client: AsyncClient):
    """
    카테고리 생성 시 상품 수가 0으로 시작하고, 이름/코드 중복은 400을 반환하는지 테스트합니다.
    """
    print("\n--- Running test_create_category_defaults_and_conflicts ---")
    created = await client.post("/api/categories", json={"name": "Electronics", "category_code": "ELEC"})
    print(f"Create response: {created.status_code} {created.json()}")
    assert created.status_code == 201
    body = created.json()
    assert body["product_count"] == 0
    assert body["created_date"] is not None
    assert body["last_modified_date"] is not None

    dup_name = await client.post("/api/categories", json={"name": "Electronics"})
    assert dup_name.status_code == 400
    assert dup_name.json()["detail"] == "Category name already exists: Electronics"

    dup_code = await client.post("/api/categories", json={"name": "Gadgets", "category_code": "ELEC"})
    assert dup_code.status_code == 400
    assert dup_code.json()["detail"] == "Category code already exists: ELEC"

    # 코드가 없는 카테고리끼리는 코드 중복 검사를 하지 않습니다.
    no_code_1 = await client.post("/api/categories", json={"name": "Books"})
    no_code_2 = await client.post("/api/categories", json={"name": "Music"})
    assert no_code_1.status_code == 201
    assert no_code_2.status_code == 201

    bad_code = await client.post("/api/categories", json={"name": "Toys", "category_code": "toys"})
    assert bad_code.status_code == 400
    print("test_create_category_defaults_and_conflicts passed.")


@pytest.mark.asyncio
async def test_category_parent_validation(client: AsyncClient, category_factory: CategoryFactory):
    """상위 카테고리가 없으면 404, 자기 자신을 상위로 지정하면 400을 반환하는지 테스트합니다."""
    print("\n--- Running test_category_parent_validation ---")
    missing_parent = await client.post("/api/categories", json={"name": "Orphan", "parent_category_id": 999})
    assert missing_parent.status_code == 404
    assert missing_parent.json()["detail"] == "Parent category not found with id: 999"

    root = await category_factory("Root")
    self_parent = await client.put(
        f"/api/categories/{root.id}", json={"name": "Root", "parent_category_id": root.id}
    )
    assert self_parent.status_code == 400
    assert self_parent.json()["detail"] == "Category cannot be its own parent"

    child = await client.post("/api/categories", json={"name": "Child", "parent_category_id": root.id})
    assert child.status_code == 201
    assert child.json()["parent_category_id"] == root.id
    print("test_category_parent_validation passed.")


@pytest.mark.asyncio
async def test_delete_category_with_subcategories_rejected(
    client: AsyncClient, category_factory: CategoryFactory
):
    print("\n--- Running test_delete_category_with_subcategories_rejected ---")
    parent = await category_factory("Parent")
    child = await category_factory("Child", parent_category_id=parent.id)

    blocked = await client.delete(f"/api/categories/{parent.id}")
    assert blocked.status_code == 400
    assert blocked.json()["detail"] == "Cannot delete category with subcategories. Found 1 subcategories."

    assert (await client.delete(f"/api/categories/{child.id}")).status_code == 200
    deleted = await client.delete(f"/api/categories/{parent.id}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Category deleted successfully"}
    print("test_delete_category_with_subcategories_rejected passed.")


@pytest.mark.asyncio
async def test_category_hierarchy_and_queries(client: AsyncClient, category_factory: CategoryFactory):
    """계층/최상위/하위 수/다중 조건 조회를 테스트합니다."""
    print("\n--- Running test_category_hierarchy_and_queries ---")
    root = await category_factory("Home", display_order=2)
    kitchen = await category_factory("Kitchen", parent_category_id=root.id, display_order=1)
    await category_factory("Garden", parent_category_id=root.id, display_order=0, is_visible=False)
    await category_factory("Pots", parent_category_id=kitchen.id)

    hierarchy = await client.get(f"/api/categories/{root.id}/hierarchy")
    assert [c["name"] for c in hierarchy.json()] == ["Home", "Kitchen", "Garden"]

    roots = await client.get("/api/categories/root")
    assert [c["name"] for c in roots.json()] == ["Home"]

    sub_count = await client.get(f"/api/categories/{root.id}/subcategories/count")
    assert sub_count.json() == 2

    children = await client.get(f"/api/categories/parent/{root.id}")
    assert len(children.json()) == 2

    criteria = await client.get("/api/categories/criteria", params={"parent_category_id": root.id})
    assert [c["name"] for c in criteria.json()] == ["Garden", "Kitchen"]

    visible_children = await client.get(
        "/api/categories/criteria", params={"parent_category_id": root.id, "is_visible": "true"}
    )
    assert [c["name"] for c in visible_children.json()] == ["Kitchen"]

    hidden = await client.get("/api/categories/hidden")
    assert [c["name"] for c in hidden.json()] == ["Garden"]
    print("test_category_hierarchy_and_queries passed.")


@pytest.mark.asyncio
async def test_category_narrow_mutators(client: AsyncClient, category_factory: CategoryFactory):
    print("\n--- Running test_category_narrow_mutators ---")
    category = await category_factory("Sports")

    featured = await client.put(f"/api/categories/{category.id}/feature")
    assert featured.json()["is_featured"] is True

    hidden = await client.put(f"/api/categories/{category.id}/hide")
    assert hidden.json()["is_visible"] is False

    order = await client.put(f"/api/categories/{category.id}/display-order", params={"display_order": 5})
    assert order.json()["display_order"] == 5

    negative = await client.put(f"/api/categories/{category.id}/product-count", params={"product_count": -1})
    assert negative.status_code == 400
    assert negative.json()["detail"] == "Product count cannot be negative"

    tags = await client.put(f"/api/categories/{category.id}/tags", params={"tags": "outdoor,fitness"})
    assert tags.json()["tags"] == "outdoor,fitness"

    tag_search = await client.get("/api/categories/tag/fitness")
    assert [c["id"] for c in tag_search.json()] == [category.id]

    missing = await client.put("/api/categories/999/show")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Category not found with id: 999"
    print("test_category_narrow_mutators passed.")


@pytest.mark.asyncio
async def test_category_update_keeps_product_count(client: AsyncClient, category_factory: CategoryFactory):
    """수정 요청에 상품 수가 없으면 기존 값을 유지하는지 테스트합니다."""
    print("\n--- Running test_category_update_keeps_product_count ---")
    category = await category_factory("Office", product_count=4)
    updated = await client.put(
        f"/api/categories/{category.id}", json={"name": "Office Supplies", "description": "Desks"}
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "Office Supplies"
    assert updated.json()["product_count"] == 4
    print("test_category_update_keeps_product_count passed.")


# --- 카테고리 상품 수 동기화 테스트 ---

@pytest.mark.asyncio
async def test_product_create_and_delete_sync_category_count(
    client: AsyncClient, category_factory: CategoryFactory
):
    """
    상품 생성/삭제 시 (ARQ 풀이 없으므로 요청 안에서) 카테고리 상품 수가 다시 계산되는지 테스트합니다.
    """
    print("\n--- Running test_product_create_and_delete_sync_category_count ---")
    category = await category_factory("Computers")

    first = await client.post("/api/products", json=_product_payload(category_id=category.id))
    assert first.status_code == 201
    await client.post(
        "/api/products", json=_product_payload(name="Laptop Air", sku="LAP-002", category_id=category.id)
    )

    fetched = await client.get(f"/api/categories/{category.id}")
    assert fetched.json()["product_count"] == 2

    await client.delete(f"/api/products/{first.json()['id']}")
    fetched = await client.get(f"/api/categories/{category.id}")
    assert fetched.json()["product_count"] == 1

    count = await client.get(f"/api/products/count/category/{category.id}")
    assert count.json() == 1
    print("test_product_create_and_delete_sync_category_count passed.")


@pytest.mark.asyncio
async def test_product_recategorize_syncs_both_categories(
    client: AsyncClient, category_factory: CategoryFactory
):
    print("\n--- Running test_product_recategorize_syncs_both_categories ---")
    old_category = await category_factory("Old")
    new_category = await category_factory("New")
    product = (await client.post("/api/products", json=_product_payload(category_id=old_category.id))).json()

    moved = await client.put(
        f"/api/products/{product['id']}", json=_product_payload(category_id=new_category.id)
    )
    assert moved.status_code == 200

    assert (await client.get(f"/api/categories/{old_category.id}")).json()["product_count"] == 0
    assert (await client.get(f"/api/categories/{new_category.id}")).json()["product_count"] == 1
    print("test_product_recategorize_syncs_both_categories passed.")


@pytest.mark.asyncio
async def test_sync_product_count_endpoint_repairs_counter(
    client: AsyncClient, category_factory: CategoryFactory
):
    """수동으로 틀어진 상품 수를 재계산 엔드포인트가 바로잡는지 테스트합니다."""
    print("\n--- Running test_sync_product_count_endpoint_repairs_counter ---")
    category = await category_factory("Cameras")
    await client.post("/api/products", json=_product_payload(category_id=category.id))

    drifted = await client.put(f"/api/categories/{category.id}/product-count", params={"product_count": 99})
    assert drifted.json()["product_count"] == 99

    synced = await client.put(f"/api/categories/{category.id}/sync-product-count")
    assert synced.status_code == 200
    assert synced.json()["product_count"] == 1
    print("test_sync_product_count_endpoint_repairs_counter passed.")


@pytest.mark.asyncio
async def test_sync_task_skips_missing_categories(db_session: AsyncSession, category_factory: CategoryFactory):
    print("\n--- Running test_sync_task_skips_missing_categories ---")
    category = await category_factory("Audio", product_count=7)
    result = await prd_tasks.sync_category_product_count({"db": db_session}, [category.id, 999, None, category.id])
    assert result == {"status": "ok", "updated_count": 1}

    await db_session.refresh(category)
    assert category.product_count == 0

    empty = await prd_tasks.sync_category_product_count({"db": db_session}, [None])
    assert empty == {"status": "ok", "updated_count": 0}
    print("test_sync_task_skips_missing_categories passed.")


# --- 상품 관리 엔드포인트 테스트 ---

@pytest.mark.asyncio
async def test_create_product_defaults_and_conflicts(client: AsyncClient):
    print("\n--- Running test_create_product_defaults_and_conflicts ---")
    created = await client.post("/api/products", json=_product_payload())
    assert created.status_code == 201
    body = created.json()
    assert body["status"] == "DRAFT"
    assert body["published_date"] is None
    assert body["view_count"] == 0
    assert body["sales_count"] == 0
    assert body["rating"] == 0.0
    assert Decimal(str(body["price"])) == Decimal("100.5")

    dup_name = await client.post("/api/products", json=_product_payload(sku="LAP-999"))
    assert dup_name.status_code == 400
    assert dup_name.json()["detail"] == "Product name already exists: Laptop Pro"

    dup_sku = await client.post("/api/products", json=_product_payload(name="Laptop Mini"))
    assert dup_sku.status_code == 400
    assert dup_sku.json()["detail"] == "SKU already exists: LAP-001"

    zero_price = await client.post("/api/products", json=_product_payload(name="Freebie", sku="FREE-1", price=0))
    assert zero_price.status_code == 400

    by_sku = await client.get("/api/products/sku/LAP-001")
    assert by_sku.json()["id"] == body["id"]
    print("test_create_product_defaults_and_conflicts passed.")


@pytest.mark.asyncio
async def test_product_published_date_set_once(client: AsyncClient):
    """게시 일시는 최초 PUBLISHED 전이 때만 기록되고 이후에는 바뀌지 않는지 테스트합니다."""
    print("\n--- Running test_product_published_date_set_once ---")
    product_id = (await client.post("/api/products", json=_product_payload())).json()["id"]

    published = await client.put(f"/api/products/{product_id}/status", params={"status": "PUBLISHED"})
    assert published.status_code == 200
    first_published = published.json()["published_date"]
    assert first_published is not None

    archived = await client.put(f"/api/products/{product_id}/status", params={"status": "ARCHIVED"})
    assert archived.json()["status"] == "ARCHIVED"

    republished = await client.put(f"/api/products/{product_id}/status", params={"status": "PUBLISHED"})
    assert republished.json()["published_date"] == first_published

    invalid = await client.put(f"/api/products/{product_id}/status", params={"status": "UNKNOWN"})
    assert invalid.status_code == 400
    print("test_product_published_date_set_once passed.")


@pytest.mark.asyncio
async def test_create_published_product_records_published_date(client: AsyncClient):
    print("\n--- Running test_create_published_product_records_published_date ---")
    created = await client.post("/api/products", json=_product_payload(status="PUBLISHED"))
    assert created.status_code == 201
    assert created.json()["published_date"] is not None
    print("test_create_published_product_records_published_date passed.")


@pytest.mark.asyncio
async def test_product_stock_transitions(client: AsyncClient):
    """
    재고 0 -> OUT_OF_STOCK, OUT_OF_STOCK에서 재고 회복 -> PUBLISHED 전이를 테스트합니다.
    """
    print("\n--- Running test_product_stock_transitions ---")
    product_id = (await client.post("/api/products", json=_product_payload())).json()["id"]

    # DRAFT 상태에서 재고를 바꿔도 상태는 유지됩니다.
    restocked_draft = await client.put(f"/api/products/{product_id}/stock", params={"stock_quantity": 5})
    assert restocked_draft.json()["status"] == "DRAFT"

    empty = await client.put(f"/api/products/{product_id}/stock", params={"stock_quantity": 0})
    assert empty.json()["status"] == "OUT_OF_STOCK"
    assert empty.json()["stock_quantity"] == 0
    assert empty.json()["published_date"] is None

    out_of_stock = await client.get("/api/products/out-of-stock")
    assert [p["id"] for p in out_of_stock.json()] == [product_id]

    restocked = await client.put(f"/api/products/{product_id}/stock", params={"stock_quantity": 3})
    assert restocked.json()["status"] == "PUBLISHED"
    # 재고 회복으로 처음 게시되는 경우에도 게시 일시가 기록됩니다.
    first_published = restocked.json()["published_date"]
    assert first_published is not None

    await client.put(f"/api/products/{product_id}/stock", params={"stock_quantity": 0})
    republished = await client.put(f"/api/products/{product_id}/stock", params={"stock_quantity": 8})
    assert republished.json()["status"] == "PUBLISHED"
    assert republished.json()["published_date"] == first_published

    negative = await client.put(f"/api/products/{product_id}/stock", params={"stock_quantity": -1})
    assert negative.status_code == 400
    assert negative.json()["detail"] == "Stock quantity cannot be negative"
    print("test_product_stock_transitions passed.")


@pytest.mark.asyncio
async def test_product_price_rating_and_counters(client: AsyncClient):
    print("\n--- Running test_product_price_rating_and_counters ---")
    product_id = (await client.post("/api/products", json=_product_payload())).json()["id"]

    bad_price = await client.put(f"/api/products/{product_id}/price", params={"price": "0"})
    assert bad_price.status_code == 400
    assert bad_price.json()["detail"] == "Price must be greater than 0"

    # 생성 스키마와 같은 소수점 자릿수 제한을 적용합니다.
    too_precise = await client.put(f"/api/products/{product_id}/price", params={"price": "1.239"})
    assert too_precise.status_code == 400
    too_precise_sale = await client.put(
        f"/api/products/{product_id}/sale-price", params={"sale_price": "0.001"}
    )
    assert too_precise_sale.status_code == 400

    price = await client.put(f"/api/products/{product_id}/price", params={"price": "2000"})
    assert Decimal(str(price.json()["price"])) == Decimal("2000")

    sale = await client.put(f"/api/products/{product_id}/sale-price", params={"sale_price": "25.25"})
    assert Decimal(str(sale.json()["sale_price"])) == Decimal("25.25")
    on_sale = await client.get("/api/products/on-sale")
    assert [p["id"] for p in on_sale.json()] == [product_id]

    cleared = await client.put(f"/api/products/{product_id}/sale-price")
    assert cleared.json()["sale_price"] is None

    bad_rating = await client.put(
        f"/api/products/{product_id}/rating", params={"rating": 5.5, "review_count": 3}
    )
    assert bad_rating.status_code == 400
    assert bad_rating.json()["detail"] == "Rating must be between 0 and 5"

    rating = await client.put(f"/api/products/{product_id}/rating", params={"rating": 4.5, "review_count": 12})
    assert rating.json()["rating"] == 4.5
    assert rating.json()["review_count"] == 12

    await client.put(f"/api/products/{product_id}/view")
    viewed = await client.put(f"/api/products/{product_id}/view")
    assert viewed.json()["view_count"] == 2
    sold = await client.put(f"/api/products/{product_id}/sale")
    assert sold.json()["sales_count"] == 1

    highly_rated = await client.get("/api/products/highly-rated", params={"rating": 4.0, "min_reviews": 10})
    assert [p["id"] for p in highly_rated.json()] == [product_id]
    print("test_product_price_rating_and_counters passed.")


@pytest.mark.asyncio
async def test_product_search_criteria_and_counts(client: AsyncClient, category_factory: CategoryFactory):
    """통합 검색, 다중 조건 조회, 개수 조회 엔드포인트를 테스트합니다."""
    print("\n--- Running test_product_search_criteria_and_counts ---")
    category = await category_factory("Phones")
    await client.post(
        "/api/products",
        json=_product_payload(name="Phone X", sku="PHN-X", brand="Zeta", price=2000, category_id=category.id,
                              status="PUBLISHED", tags="flagship"),
    )
    await client.post(
        "/api/products",
        json=_product_payload(name="Phone Lite", sku="PHN-L", brand="Omega", price=25.25, category_id=category.id),
    )
    await client.post("/api/products", json=_product_payload(name="Charger", sku="CHG-1", brand="Zeta", price=100.5))

    search = await client.get("/api/products/search", params={"search_term": "FLAGSHIP"})
    assert [p["name"] for p in search.json()] == ["Phone X"]

    by_brand = await client.get("/api/products/search", params={"search_term": "omega"})
    assert [p["name"] for p in by_brand.json()] == ["Phone Lite"]

    criteria = await client.get(
        "/api/products/criteria", params={"category_id": category.id, "min_price": "100"}
    )
    assert [p["name"] for p in criteria.json()] == ["Phone X"]

    status_criteria = await client.get("/api/products/criteria", params={"status": "DRAFT", "brand": "Zeta"})
    assert [p["name"] for p in status_criteria.json()] == ["Charger"]

    price_range = await client.get("/api/products/price-range", params={"min_price": "25.25", "max_price": "100.5"})
    assert [p["name"] for p in price_range.json()] == ["Phone Lite", "Charger"]

    ordered = await client.get("/api/products/ordered/price-desc")
    assert [p["name"] for p in ordered.json()] == ["Phone X", "Charger", "Phone Lite"]

    assert (await client.get("/api/products/count/brand/Zeta")).json() == 2
    assert (await client.get("/api/products/count/status/DRAFT")).json() == 2
    assert (await client.get("/api/products/count/status/PUBLISHED")).json() == 1

    published = await client.get("/api/products/status/PUBLISHED")
    assert [p["name"] for p in published.json()] == ["Phone X"]
    print("test_product_search_criteria_and_counts passed.")


@pytest.mark.asyncio
async def test_product_update_keeps_statistics(db_session: AsyncSession):
    """전체 교체 수정 후에도 통계 필드(평점/조회수/판매수)가 유지되는지 서비스 계층에서 테스트합니다."""
    print("\n--- Running test_product_update_keeps_statistics ---")
    product = await product_service.create(
        db_session, prd_schemas.ProductCreate(name="Desk Lamp", price=Decimal("25.25"))
    )
    await product_service.increment_sales_count(db_session, product.id)
    await product_service.update_rating(db_session, product.id, 3.5, 2)

    updated = await product_service.update(
        db_session, product.id, prd_schemas.ProductUpdate(name="Desk Lamp", price=Decimal("25.25"), brand="Lumo")
    )
    assert updated.brand == "Lumo"
    assert updated.sales_count == 1
    assert updated.rating == 3.5
    assert updated.review_count == 2

    with pytest.raises(ValidationError):
        await product_service.update_sale_price(db_session, product.id, Decimal("-1"))
    with pytest.raises(NotFoundError):
        await product_category_service.sync_product_count(db_session, 999)
    print("test_product_update_keeps_statistics passed.")


# --- 생성 후 조회 일치 및 없는 ID 수정 테스트 ---

@pytest.mark.asyncio
async def test_create_category_round_trip(client: AsyncClient, category_factory: CategoryFactory):
    """생성 후 ID로 조회하면 입력값과 같은 카테고리가 반환되는지 테스트합니다."""
    print("\n--- Running test_create_category_round_trip ---")
    parent = await category_factory("Home")
    payload = {
        "name": "Kitchen",
        "description": "Kitchen goods",
        "category_code": "KITCHEN_01",
        "parent_category_id": parent.id,
        "display_order": 3,
        "image_url": "https://example.com/kitchen.png",
        "icon": "pot",
        "color": "red",
        "is_featured": True,
        "is_visible": False,
        "meta_title": "Kitchen",
        "meta_description": "Everything for the kitchen",
        "tags": "home,cooking",
        "active": True,
    }
    created = await client.post("/api/categories", json=payload)
    assert created.status_code == 201

    fetched = await client.get(f"/api/categories/{created.json()['id']}")
    assert fetched.status_code == 200
    body = fetched.json()
    for field, value in payload.items():
        assert body[field] == value, field
    assert body["product_count"] == 0
    print("test_create_category_round_trip passed.")


@pytest.mark.asyncio
async def test_create_product_round_trip(client: AsyncClient, category_factory: CategoryFactory):
    """생성 후 ID로 조회하면 입력값과 같은 상품이 반환되는지 테스트합니다."""
    print("\n--- Running test_create_product_round_trip ---")
    category = await category_factory("Computers")
    payload = _product_payload(
        long_description="Fourteen inch laptop with long battery life",
        cost="70.25",
        sale_price="95.00",
        min_stock_level=2,
        max_stock_level=50,
        category_id=category.id,
        weight=1.2,
        weight_unit="kg",
        dimensions="30x20x1.5",
        color="silver",
        size="14",
        image_url="https://example.com/laptop.png",
        image_gallery="https://example.com/1.png,https://example.com/2.png",
        is_featured=True,
        is_digital=False,
        requires_shipping=True,
        is_taxable=False,
        track_inventory=True,
        allow_backorder=True,
        meta_title="Laptop Pro",
        meta_description="Best laptop",
        tags="laptop,portable",
        status="DRAFT",
        active=True,
    )
    created = await client.post("/api/products", json=payload)
    assert created.status_code == 201, created.json()

    fetched = await client.get(f"/api/products/{created.json()['id']}")
    assert fetched.status_code == 200
    body = fetched.json()
    money_fields = {"price", "cost", "sale_price"}
    for field, value in payload.items():
        if field in money_fields:
            assert Decimal(str(body[field])) == Decimal(str(value)), field
        else:
            assert body[field] == value, field
    assert body["rating"] == 0
    assert body["review_count"] == 0
    assert body["view_count"] == 0
    assert body["sales_count"] == 0
    assert body["published_date"] is None
    print("test_create_product_round_trip passed.")


@pytest.mark.asyncio
async def test_update_missing_category_returns_404(client: AsyncClient, category_factory: CategoryFactory):
    print("\n--- Running test_update_missing_category_returns_404 ---")
    await category_factory("Garden")
    before = (await client.get("/api/categories")).json()

    response = await client.put("/api/categories/12345", json={"name": "Ghost"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found with id: 12345"

    hide = await client.put("/api/categories/12345/hide")
    assert hide.status_code == 404

    assert (await client.get("/api/categories")).json() == before
    print("test_update_missing_category_returns_404 passed.")


@pytest.mark.asyncio
async def test_update_missing_product_returns_404(client: AsyncClient):
    """없는 상품의 수정과 재고 변경은 404를 반환하고 기존 상품에 영향이 없는지 테스트합니다."""
    print("\n--- Running test_update_missing_product_returns_404 ---")
    assert (await client.post("/api/products", json=_product_payload())).status_code == 201
    before = (await client.get("/api/products")).json()

    response = await client.put("/api/products/12345", json=_product_payload(name="Ghost Laptop", sku="GHOST-1"))
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found with id: 12345"

    stock = await client.put("/api/products/12345/stock", params={"stock_quantity": 0})
    assert stock.status_code == 404

    price = await client.put("/api/products/12345/price", params={"price": "10"})
    assert price.status_code == 404

    assert (await client.get("/api/products")).json() == before
    print("test_update_missing_product_returns_404 passed.")
