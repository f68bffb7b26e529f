# app/domains/org/crud.py

"""
'org' 도메인의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 모듈입니다.

부서(departments)와 그룹(groups) 테이블에 대한 데이터베이스 상호작용 로직을 캡슐화합니다.
정확 일치/부분 일치/범위/정렬 등 공통 조회는 CRUDBase가 제공하며,
여기에는 엔티티 고유의 조회만 정의합니다.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.domains.org import models as org_models
from app.domains.org import schemas as org_schemas


# =============================================================================
# 1. departments 테이블 CRUD
# =============================================================================
class CRUDDepartment(CRUDBase[org_models.Department, org_schemas.DepartmentCreate, org_schemas.DepartmentUpdate]):
    def __init__(self):
        super().__init__(org_models.Department)

    async def get_department_by_name(self, db: AsyncSession, *, name: str) -> Optional[org_models.Department]:
        return await self.get_by_attribute(db, attribute="name", value=name)


# =============================================================================
# 2. groups 테이블 CRUD
# =============================================================================
class CRUDGroup(CRUDBase[org_models.Group, org_schemas.GroupCreate, org_schemas.GroupUpdate]):
    def __init__(self):
        super().__init__(org_models.Group)

    async def get_group_by_name(self, db: AsyncSession, *, name: str) -> Optional[org_models.Group]:
        return await self.get_by_attribute(db, attribute="name", value=name)

    async def get_groups_with_available_capacity(self, db: AsyncSession) -> List[org_models.Group]:
        """최대 인원이 없거나, 현재 인원이 최대 인원보다 적은 그룹"""
        query = select(self.model).where(
            or_(
                self.model.max_members.is_(None),
                self.model.current_member_count < self.model.max_members,
            )
        ).order_by(self.model.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_groups_created_after(self, db: AsyncSession, *, since: datetime) -> List[org_models.Group]:
        return await self.get_greater_than(db, attribute="created_date", value=since)

    async def get_groups_with_recent_activity(self, db: AsyncSession, *, since: datetime) -> List[org_models.Group]:
        return await self.get_greater_than(db, attribute="last_activity_date", value=since)

    async def get_groups_by_criteria(
        self,
        db: AsyncSession,
        *,
        group_type: Optional[str] = None,
        is_public: Optional[bool] = None,
        active: Optional[bool] = None,
    ) -> List[org_models.Group]:
        """지정된 조건만 적용합니다. (None인 조건은 무시)"""
        return await self.get_filtered(
            db, filters={"group_type": group_type, "is_public": is_public, "active": active}
        )


department = CRUDDepartment()
group = CRUDGroup()
