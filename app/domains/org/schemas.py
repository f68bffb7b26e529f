# app/domains/org/schemas.py

"""
'org' 도메인 (조직 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
응답 스키마는 다른 도메인과의 일관성을 위해 '...Read' 패턴을 사용합니다.

수정(PUT) 요청은 변경 가능한 모든 필드를 교체하므로, ...Update 스키마는
...Create 스키마와 동일한 필수 필드를 가집니다.
"""

from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from pydantic import EmailStr


# =============================================================================
# 1. 부서 (Department) 스키마
# =============================================================================
class DepartmentBase(SQLModel):
    name: str = Field(..., min_length=2, max_length=50)
    description: Optional[str] = Field(None, max_length=200)
    manager_name: str = Field(..., min_length=2, max_length=50)
    manager_email: Optional[EmailStr] = None
    location: Optional[str] = Field(None, max_length=100)
    budget: Optional[float] = Field(None, ge=0)
    employee_count: Optional[int] = Field(None, ge=0)
    active: bool = True


class DepartmentCreate(DepartmentBase):
    pass


class DepartmentUpdate(DepartmentBase):
    pass


class DepartmentRead(DepartmentBase):
    id: int

    class Config:  # Pydantic이 ORM 객체의 속성에서 데이터를 가져와 스키마를 구성
        from_attributes = True


# =============================================================================
# 2. 그룹 (Group) 스키마
# =============================================================================
class GroupBase(SQLModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    group_type: Optional[str] = Field(None, max_length=50)
    owner_name: str = Field(..., min_length=2, max_length=100)
    owner_email: Optional[EmailStr] = None
    max_members: Optional[int] = Field(None, ge=0)
    current_member_count: Optional[int] = Field(None, ge=0)  # 생성 시 None이면 0
    is_public: bool = True
    requires_approval: bool = False
    tags: Optional[str] = Field(None, max_length=200)
    active: bool = True


class GroupCreate(GroupBase):
    pass


class GroupUpdate(GroupBase):
    pass


class GroupRead(GroupBase):
    id: int
    current_member_count: int
    created_date: Optional[datetime] = None
    last_activity_date: Optional[datetime] = None

    class Config:
        from_attributes = True


class GroupMemberCountUpdate(SQLModel):
    """PUT /groups/{id}/member-count 요청 본문"""
    member_count: int


class GroupTagsUpdate(SQLModel):
    """PUT /groups/{id}/tags 요청 본문"""
    tags: Optional[str] = Field(None, max_length=200)
