# app/domains/org/models.py

"""
'org' 도메인 (조직 관리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 부서(departments)와 그룹(groups) 테이블에 대한 SQLModel 클래스를 포함합니다.
두 엔티티는 서로 독립적이며, 다른 엔티티를 참조하지 않습니다.
"""

from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# =============================================================================
# 1. departments 테이블 모델
# =============================================================================
class DepartmentBase(SQLModel):
    """
    departments 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=50, unique=True, description="부서명 (고유)")
    description: Optional[str] = Field(default=None, max_length=200, description="설명")
    manager_name: str = Field(max_length=50, description="부서장 이름")
    manager_email: Optional[str] = Field(default=None, max_length=100, description="부서장 이메일")
    location: Optional[str] = Field(default=None, max_length=100, description="위치")
    budget: Optional[float] = Field(default=None, description="예산 (0 이상)")
    employee_count: Optional[int] = Field(default=None, description="직원 수 (0 이상)")
    active: bool = Field(default=True, description="활성 여부")


class Department(DepartmentBase, table=True):
    """
    departments 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "departments"


# =============================================================================
# 2. groups 테이블 모델
# =============================================================================
class GroupBase(SQLModel):
    """
    groups 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True, description="그룹명 (고유)")
    description: Optional[str] = Field(default=None, max_length=500)
    group_type: Optional[str] = Field(default=None, max_length=50, description="그룹 유형")
    owner_name: str = Field(max_length=100, description="소유자 이름")
    owner_email: Optional[str] = Field(default=None, max_length=100)
    max_members: Optional[int] = Field(default=None, description="최대 인원 (None이면 제한 없음)")
    current_member_count: int = Field(default=0, description="현재 인원")
    is_public: bool = Field(default=True)
    requires_approval: bool = Field(default=False)
    tags: Optional[str] = Field(default=None, max_length=200, description="쉼표로 구분된 태그")
    active: bool = Field(default=True)

    created_date: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="그룹 생성 일시"
    )
    last_activity_date: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="마지막 활동 일시 (모든 변경 시 갱신)"
    )


class Group(GroupBase, table=True):
    """
    groups 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    ('group'은 SQL 예약어이므로 복수형 테이블명을 사용합니다)
    """
    __tablename__ = "groups"
