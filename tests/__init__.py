# tests/__init__.py

"""
FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

이 패키지는 애플리케이션의 모든 구성 요소 (API 엔드포인트, 비즈니스 로직, 데이터베이스 상호작용,
gRPC 서비스)에 대한 통합(Integration) 테스트 코드를 포함합니다.

주요 구성:
- `domains/`: 각 비즈니스 도메인(org, crm, prd)에 대한 테스트 모듈.
- `test_main.py`: 루트/헬스 체크 엔드포인트와 공통 오류 응답 형식 테스트.
- `test_grpc_department.py`: 부서 gRPC 서비스 테스트.
- `conftest.py`: 인메모리 SQLite 엔진, 세션, 테스트 클라이언트 등 공용 fixtures.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Commerce CRUD API Tests"
__description__ = "Test suite for the Commerce CRUD API application."
__version__ = "0.1.0" # 테스트 스위트의 내부 버전
__all__ = [] # 이 패키지에서 'from tests import *' 시 내보낼 이름 목록.
