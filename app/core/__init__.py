# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

이 패키지는 애플리케이션 전반에 걸쳐 사용되는 공통적이고 핵심적인 기능들을 캡슐화합니다.
주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `dependencies.py`: FastAPI 의존성 주입 함수 (DB 세션, ARQ Redis 풀).
- `exceptions.py`: 비즈니스 예외와 HTTP 응답 변환 핸들러.
- `crud_base.py`, `service_base.py`: 도메인 저장소/서비스의 공통 기반 클래스.
- `tasks.py`: ARQ 워커가 주기적으로 실행하는 공통 태스크.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Commerce CRUD API Core"
__description__ = "Core components for the Commerce CRUD API application."
__version__ = "0.1.0"  # core 패키지의 버전
__all__ = []  # 'from app.core import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
