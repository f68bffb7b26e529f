# app/domains/prd/tasks.py

import logging
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_async_session_context
from app.domains.prd import models as prd_models

logger = logging.getLogger(__name__)


async def _recount(db: AsyncSession, category_ids: Iterable[int]) -> int:
    updated_count = 0
    for category_id in category_ids:
        category = await db.get(prd_models.ProductCategory, category_id)
        if category is None:
            continue

        count_query = select(func.count()).select_from(prd_models.Product).where(
            prd_models.Product.category_id == category_id
        )
        count_rs = await db.execute(count_query)
        category.product_count = count_rs.scalar_one()
        db.add(category)
        updated_count += 1

    await db.commit()
    return updated_count


async def sync_category_product_count(
    ctx: Dict[str, Any], category_ids: list[Optional[int]]
) -> Dict[str, Any]:
    """
    카테고리별 상품 수(product_count)를 실제 products 테이블 기준으로 다시 계산합니다.
    ARQ 워커에서 실행되면 새 세션을 열고, 요청 안에서 동기 실행되면 ctx['db'] 세션을 사용합니다.
    """
    targets = sorted({category_id for category_id in category_ids if category_id is not None})
    if not targets:
        return {"status": "ok", "updated_count": 0}

    logger.info("백그라운드 작업 시작: 카테고리 %s 상품 수 동기화", targets)

    db: Optional[AsyncSession] = ctx.get("db")
    if db is not None:
        updated_count = await _recount(db, targets)
    else:
        async with get_async_session_context() as session:
            updated_count = await _recount(session, targets)

    logger.info("작업 완료! 총 %s개 카테고리의 상품 수 갱신됨.", updated_count)
    return {"status": "ok", "updated_count": updated_count}
