# app/domains/org/__init__.py

"""
FastAPI 애플리케이션의 'org' 도메인 패키지입니다.

'org' 도메인은 조직 구성 정보, 즉 부서(Department)와 그룹(Group)을 관리합니다.
부서는 REST API와 함께 gRPC 미러(app.grpc)로도 노출됩니다.

주요 서브모듈:
- `models.py`: departments, groups 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic 모델.
- `crud.py`: 테이블에 대한 비동기 CRUD 및 조회 로직.
- `services.py`: 이름 고유성, 그룹 인원 규칙 등 비즈니스 규칙.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "Organization Domain"
__description__ = "Manages departments and groups."
__version__ = "0.1.0"
__all__ = []
