# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- ARQ Redis 커넥션 풀 조회 (get_arq_redis_pool).
"""

from typing import AsyncGenerator, Optional

from arq.connections import ArqRedis
from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_session as get_main_app_session


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    app.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_arq_redis_pool(request: Request) -> Optional[ArqRedis]:
    """
    lifespan에서 생성된 ARQ Redis 풀을 반환합니다.
    ARQ가 비활성화되어 있으면 None을 반환하며, 이 경우 작업은 요청 안에서 동기적으로 실행됩니다.
    """
    return getattr(request.app.state, "redis", None)
