# app/core/config.py

from typing import List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Commerce CRUD API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "CRUD API for departments, groups, customers, addresses, products and categories"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for SQL echo and detailed error messages")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(
        SecretStr(f"sqlite+aiosqlite:///{os.path.join(BASE_DIR, 'crud_app.db')}"),
        description="Async database connection URL (postgresql+asyncpg://... or sqlite+aiosqlite://...)"
    )
    DB_POOL_SIZE: int = Field(10, description="Connection pool size (ignored for SQLite)")
    DB_MAX_OVERFLOW: int = Field(20, description="Extra connections allowed above the pool size (ignored for SQLite)")
    # 마이그레이션 도구를 사용하지 않으므로 시작 시 테이블을 생성합니다.
    CREATE_TABLES_ON_STARTUP: bool = Field(True, description="Create missing tables on application startup")

    # --- ARQ (Redis) 백그라운드 작업 설정 ---
    ARQ_ENABLED: bool = Field(False, description="Open an ARQ Redis pool on startup; otherwise jobs run inline")
    REDIS_HOST: str = Field("localhost", description="Redis host for ARQ")
    REDIS_PORT: int = Field(6379, description="Redis port for ARQ")

    # --- gRPC 설정 ---
    GRPC_ENABLED: bool = Field(False, description="Start the Department gRPC server inside the app lifespan")
    GRPC_HOST: str = Field("localhost", description="gRPC bind/connect host")
    GRPC_PORT: int = Field(9090, description="gRPC bind/connect port")

    # --- CORS 설정 ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.get_secret_value().startswith("sqlite")


settings = Settings()
