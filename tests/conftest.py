# tests/conftest.py

from typing import AsyncGenerator, Callable, Awaitable
from contextlib import asynccontextmanager

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app
from app.core import dependencies as deps
from app.core.database import get_session

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하려면,
#  모든 모델 클래스가 한 번 이상 임포트되어야 합니다.
from app.domains.org import models as org_models
from app.domains.crm import models as crm_models  # noqa: F401
from app.domains.prd import models as prd_models


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 새로운 인메모리 SQLite 데이터베이스를 사용합니다.
# StaticPool은 여러 세션이 같은 커넥션(= 같은 인메모리 DB)을 공유하게 합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite://"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 빈 데이터베이스를 만들고 모든 테이블을 생성합니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    서비스/CRUD 직접 호출과 API 의존성 오버라이드에 함께 사용할 비동기 세션입니다.
    """
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def session_factory(test_engine: AsyncEngine) -> Callable:
    """
    요청 밖(gRPC 서비서, ARQ 태스크)에서 사용할 세션 컨텍스트 팩토리입니다.
    app.core.database.get_async_session_context와 같은 방식으로 커밋/롤백합니다.
    """
    TestingSessionLocal = sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    @asynccontextmanager
    async def _session_context() -> AsyncGenerator[AsyncSession, None]:
        async with TestingSessionLocal() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return _session_context


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    ARQ 풀은 없으므로 백그라운드 작업은 요청 안에서 동기적으로 실행됩니다.
    """

    def override_get_session_and_dependency():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()

    try:
        main_app.dependency_overrides[get_session] = override_get_session_and_dependency
        main_app.dependency_overrides[deps.get_db_session] = override_get_session_and_dependency

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client

    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 도메인별 공통 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_department(db_session: AsyncSession) -> org_models.Department:
    """테스트용 부서를 데이터베이스에 생성하고 반환합니다."""
    department = org_models.Department(
        name="Engineering",
        description="Product engineering",
        manager_name="Alice",
        manager_email="alice@example.com",
        location="Seoul",
        budget=1000.0,
        employee_count=10,
    )
    db_session.add(department)
    await db_session.commit()
    await db_session.refresh(department)
    return department


@pytest_asyncio.fixture(scope="function")
def category_factory(db_session: AsyncSession) -> Callable[..., Awaitable[prd_models.ProductCategory]]:
    """속성을 지정하여 테스트 카테고리를 생성하는 팩토리 함수를 반환합니다."""
    async def _create_category(name: str, **kwargs) -> prd_models.ProductCategory:
        category = prd_models.ProductCategory(name=name, **kwargs)
        db_session.add(category)
        await db_session.commit()
        await db_session.refresh(category)
        return category
    return _create_category
