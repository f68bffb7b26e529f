# app/domains/org/routers.py

"""
'org' 도메인 (조직 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- /departments: 부서 CRUD, 검색/필터, 활성화 및 예산/직원 수 변경
- /groups: 그룹 CRUD, 검색/필터/정렬, 공개 여부 및 인원 수 변경

고정 경로(/departments/active 등)는 ID 경로(/departments/{department_id})보다 먼저 선언해야 합니다.
"""

from datetime import date, datetime, time, UTC
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.exceptions import NotFoundError
from app.core.schemas import MessageResponse

from . import crud as org_crud
from . import schemas as org_schemas
from .services import department_service, group_service

router = APIRouter(
    tags=["Organization Management (부서 및 그룹 관리)"],
    responses={404: {"description": "Not found"}},
)


def _start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=UTC)


# =============================================================================
# 1. 부서 (Department) API
# =============================================================================
@router.post(
    "/departments",
    response_model=org_schemas.DepartmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 부서 생성",
)
async def create_department(
    department_in: org_schemas.DepartmentCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새로운 부서를 생성합니다.
    - **name**: 부서명 (필수, 고유)
    - **manager_name**: 부서장 이름 (필수)
    """
    return await department_service.create(db, department_in)


@router.get("/departments", response_model=List[org_schemas.DepartmentRead], summary="모든 부서 조회")
async def read_departments(db: AsyncSession = Depends(deps.get_db_session)):
    return await department_service.get_all(db)


@router.get("/departments/name/{name}", response_model=org_schemas.DepartmentRead, summary="이름으로 부서 조회")
async def read_department_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    db_department = await org_crud.department.get_department_by_name(db, name=name)
    if not db_department:
        raise NotFoundError(f"Department not found with name: {name}")
    return db_department


@router.get("/departments/search/name", response_model=List[org_schemas.DepartmentRead], summary="부서명 부분 검색")
async def search_departments_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.department.search_contains(db, attribute="name", value=name)


@router.get("/departments/search/manager", response_model=List[org_schemas.DepartmentRead], summary="부서장 이름 부분 검색")
async def search_departments_by_manager(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.department.search_contains(db, attribute="manager_name", value=name)


@router.get("/departments/search/description", response_model=List[org_schemas.DepartmentRead], summary="설명 부분 검색")
async def search_departments_by_description(description: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.department.search_contains(db, attribute="description", value=description)


@router.get("/departments/location/{location}", response_model=List[org_schemas.DepartmentRead], summary="위치별 부서 조회")
async def read_departments_by_location(location: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.department.get_all_by(db, location=location)


@router.get("/departments/active", response_model=List[org_schemas.DepartmentRead], summary="활성 부서 조회")
async def read_active_departments(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.department.get_all_by(db, active=True)


@router.get("/departments/inactive", response_model=List[org_schemas.DepartmentRead], summary="비활성 부서 조회")
async def read_inactive_departments(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.department.get_all_by(db, active=False)


@router.get("/departments/budget", response_model=List[org_schemas.DepartmentRead], summary="예산이 기준보다 큰 부서")
async def read_departments_by_budget(
    min_budget: float = Query(..., alias="min"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await org_crud.department.get_greater_than(db, attribute="budget", value=min_budget)


@router.get("/departments/employees", response_model=List[org_schemas.DepartmentRead], summary="직원 수가 기준보다 많은 부서")
async def read_departments_by_employee_count(
    min_count: int = Query(..., alias="min"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await org_crud.department.get_greater_than(db, attribute="employee_count", value=min_count)


@router.get("/departments/manager-email/{email}", response_model=List[org_schemas.DepartmentRead], summary="부서장 이메일로 조회")
async def read_departments_by_manager_email(email: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.department.get_all_by(db, manager_email=email)


@router.get("/departments/filter", response_model=List[org_schemas.DepartmentRead], summary="활성 여부 + 위치 필터")
async def filter_departments(active: bool, location: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.department.get_all_by(db, active=active, location=location)


@router.get("/departments/{department_id}", response_model=org_schemas.DepartmentRead, summary="특정 부서 조회")
async def read_department(department_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await department_service.get_or_404(db, department_id)


@router.put("/departments/{department_id}", response_model=org_schemas.DepartmentRead, summary="부서 정보 수정")
async def update_department(
    department_id: int,
    department_in: org_schemas.DepartmentUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    부서의 모든 필드를 요청 값으로 교체합니다.
    이름이 바뀐 경우에만 이름 중복을 검사합니다.
    """
    return await department_service.update(db, department_id, department_in)


@router.delete("/departments/{department_id}", response_model=MessageResponse, summary="부서 삭제")
async def delete_department(department_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    await department_service.delete(db, department_id)
    return MessageResponse(message="Department deleted successfully")


@router.put("/departments/{department_id}/activate", response_model=org_schemas.DepartmentRead, summary="부서 활성화")
async def activate_department(department_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await department_service.activate(db, department_id)


@router.put("/departments/{department_id}/deactivate", response_model=org_schemas.DepartmentRead, summary="부서 비활성화")
async def deactivate_department(department_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await department_service.deactivate(db, department_id)


@router.put("/departments/{department_id}/budget", response_model=org_schemas.DepartmentRead, summary="부서 예산 변경")
async def update_department_budget(
    department_id: int,
    budget: float = Body(..., description="새 예산 (JSON 숫자 본문)"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await department_service.update_budget(db, department_id, budget)


@router.put("/departments/{department_id}/employees", response_model=org_schemas.DepartmentRead, summary="부서 직원 수 변경")
async def update_department_employee_count(
    department_id: int,
    employee_count: int = Body(..., description="새 직원 수 (JSON 정수 본문)"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await department_service.update_employee_count(db, department_id, employee_count)


# =============================================================================
# 2. 그룹 (Group) API
# =============================================================================
@router.post(
    "/groups",
    response_model=org_schemas.GroupRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 그룹 생성",
)
async def create_group(group_in: org_schemas.GroupCreate, db: AsyncSession = Depends(deps.get_db_session)):
    """
    새로운 그룹을 생성합니다. 생성 일시와 마지막 활동 일시가 기록되며,
    현재 인원이 지정되지 않으면 0으로 시작합니다.
    """
    return await group_service.create(db, group_in)


@router.get("/groups", response_model=List[org_schemas.GroupRead], summary="모든 그룹 조회")
async def read_groups(db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.get_all(db)


@router.get("/groups/name/{name}", response_model=org_schemas.GroupRead, summary="이름으로 그룹 조회")
async def read_group_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    db_group = await org_crud.group.get_group_by_name(db, name=name)
    if not db_group:
        raise NotFoundError(f"Group not found with name: {name}")
    return db_group


@router.get("/groups/search/name", response_model=List[org_schemas.GroupRead], summary="그룹명 부분 검색")
async def search_groups_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.search_contains(db, attribute="name", value=name)


@router.get("/groups/search/description", response_model=List[org_schemas.GroupRead], summary="설명 부분 검색")
async def search_groups_by_description(description: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.search_contains(db, attribute="description", value=description)


@router.get("/groups/type/{group_type}", response_model=List[org_schemas.GroupRead], summary="유형별 그룹 조회")
async def read_groups_by_type(group_type: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, group_type=group_type)


@router.get("/groups/search/type", response_model=List[org_schemas.GroupRead], summary="유형 부분 검색")
async def search_groups_by_type(
    group_type: str = Query(..., alias="type"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await org_crud.group.search_contains(db, attribute="group_type", value=group_type)


@router.get("/groups/owner/{owner_name}", response_model=List[org_schemas.GroupRead], summary="소유자별 그룹 조회")
async def read_groups_by_owner(owner_name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, owner_name=owner_name)


@router.get("/groups/search/owner", response_model=List[org_schemas.GroupRead], summary="소유자 이름 부분 검색")
async def search_groups_by_owner(owner: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.search_contains(db, attribute="owner_name", value=owner)


@router.get("/groups/owner-email/{email}", response_model=List[org_schemas.GroupRead], summary="소유자 이메일로 조회")
async def read_groups_by_owner_email(email: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, owner_email=email)


@router.get("/groups/active", response_model=List[org_schemas.GroupRead], summary="활성 그룹 조회")
async def read_active_groups(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, active=True)


@router.get("/groups/inactive", response_model=List[org_schemas.GroupRead], summary="비활성 그룹 조회")
async def read_inactive_groups(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, active=False)


@router.get("/groups/public", response_model=List[org_schemas.GroupRead], summary="공개 그룹 조회")
async def read_public_groups(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, is_public=True)


@router.get("/groups/private", response_model=List[org_schemas.GroupRead], summary="비공개 그룹 조회")
async def read_private_groups(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, is_public=False)


@router.get("/groups/requires-approval", response_model=List[org_schemas.GroupRead], summary="가입 승인 필요 그룹")
async def read_groups_requiring_approval(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, requires_approval=True)


@router.get("/groups/no-approval", response_model=List[org_schemas.GroupRead], summary="가입 승인 불필요 그룹")
async def read_groups_without_approval(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_all_by(db, requires_approval=False)


@router.get("/groups/filter/active-public", response_model=List[org_schemas.GroupRead], summary="활성 여부 + 공개 여부 필터")
async def filter_groups_by_active_and_public(
    active: bool, public_group: bool, db: AsyncSession = Depends(deps.get_db_session)
):
    return await org_crud.group.get_all_by(db, active=active, is_public=public_group)


@router.get("/groups/filter/type-active", response_model=List[org_schemas.GroupRead], summary="유형 + 활성 여부 필터")
async def filter_groups_by_type_and_active(
    active: bool,
    group_type: str = Query(..., alias="type"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await org_crud.group.get_all_by(db, group_type=group_type, active=active)


@router.get("/groups/filter/owner-active", response_model=List[org_schemas.GroupRead], summary="소유자 + 활성 여부 필터")
async def filter_groups_by_owner_and_active(
    owner: str, active: bool, db: AsyncSession = Depends(deps.get_db_session)
):
    return await org_crud.group.get_all_by(db, owner_name=owner, active=active)


@router.get("/groups/members/greater-than", response_model=List[org_schemas.GroupRead], summary="현재 인원이 기준보다 많은 그룹")
async def read_groups_with_more_members(count: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_greater_than(db, attribute="current_member_count", value=count)


@router.get("/groups/members/less-than", response_model=List[org_schemas.GroupRead], summary="현재 인원이 기준보다 적은 그룹")
async def read_groups_with_fewer_members(count: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_less_than(db, attribute="current_member_count", value=count)


@router.get("/groups/available-capacity", response_model=List[org_schemas.GroupRead], summary="가입 여유가 있는 그룹")
async def read_groups_with_available_capacity(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_groups_with_available_capacity(db)


@router.get("/groups/max-members/greater-than", response_model=List[org_schemas.GroupRead], summary="최대 인원이 기준보다 큰 그룹")
async def read_groups_with_larger_limit(count: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_greater_than(db, attribute="max_members", value=count)


@router.get("/groups/created-after", response_model=List[org_schemas.GroupRead], summary="특정 날짜 이후 생성된 그룹")
async def read_groups_created_after(
    since: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await org_crud.group.get_groups_created_after(db, since=_start_of_day(since))


@router.get("/groups/recent-activity", response_model=List[org_schemas.GroupRead], summary="특정 날짜 이후 활동한 그룹")
async def read_groups_with_recent_activity(
    since: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await org_crud.group.get_groups_with_recent_activity(db, since=_start_of_day(since))


@router.get("/groups/tag/{tag}", response_model=List[org_schemas.GroupRead], summary="태그를 포함하는 그룹")
async def read_groups_by_tag(tag: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_containing(db, attribute="tags", value=tag)


@router.get("/groups/ordered/name", response_model=List[org_schemas.GroupRead], summary="이름순 정렬")
async def read_groups_ordered_by_name(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_ordered(db, "name")


@router.get("/groups/ordered/creation-date", response_model=List[org_schemas.GroupRead], summary="최근 생성순 정렬")
async def read_groups_ordered_by_creation_date(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_ordered(db, "-created_date")


@router.get("/groups/ordered/member-count", response_model=List[org_schemas.GroupRead], summary="인원 많은순 정렬")
async def read_groups_ordered_by_member_count(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_ordered(db, "-current_member_count")


@router.get("/groups/ordered/activity", response_model=List[org_schemas.GroupRead], summary="최근 활동순 정렬")
async def read_groups_ordered_by_activity(db: AsyncSession = Depends(deps.get_db_session)):
    return await org_crud.group.get_ordered(db, "-last_activity_date")


@router.get("/groups/criteria", response_model=List[org_schemas.GroupRead], summary="선택적 조건 조회")
async def read_groups_by_criteria(
    group_type: Optional[str] = Query(None, alias="type"),
    public_group: Optional[bool] = None,
    active: Optional[bool] = None,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    지정된 조건만 적용합니다. 아무 조건도 없으면 전체 그룹을 반환합니다.
    """
    return await org_crud.group.get_groups_by_criteria(
        db, group_type=group_type, is_public=public_group, active=active
    )


@router.get("/groups/{group_id}", response_model=org_schemas.GroupRead, summary="특정 그룹 조회")
async def read_group(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.get_or_404(db, group_id)


@router.put("/groups/{group_id}", response_model=org_schemas.GroupRead, summary="그룹 정보 수정")
async def update_group(
    group_id: int,
    group_in: org_schemas.GroupUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await group_service.update(db, group_id, group_in)


@router.delete("/groups/{group_id}", response_model=MessageResponse, summary="그룹 삭제")
async def delete_group(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    await group_service.delete(db, group_id)
    return MessageResponse(message="Group deleted successfully")


@router.put("/groups/{group_id}/activate", response_model=org_schemas.GroupRead, summary="그룹 활성화")
async def activate_group(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.activate(db, group_id)


@router.put("/groups/{group_id}/deactivate", response_model=org_schemas.GroupRead, summary="그룹 비활성화")
async def deactivate_group(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.deactivate(db, group_id)


@router.put("/groups/{group_id}/make-public", response_model=org_schemas.GroupRead, summary="그룹 공개")
async def make_group_public(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.make_public(db, group_id)


@router.put("/groups/{group_id}/make-private", response_model=org_schemas.GroupRead, summary="그룹 비공개")
async def make_group_private(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.make_private(db, group_id)


@router.put("/groups/{group_id}/member-count", response_model=org_schemas.GroupRead, summary="현재 인원 변경")
async def update_group_member_count(
    group_id: int,
    member_count_in: org_schemas.GroupMemberCountUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await group_service.update_member_count(db, group_id, member_count_in.member_count)


@router.put("/groups/{group_id}/add-member", response_model=org_schemas.GroupRead, summary="인원 1명 추가")
async def add_group_member(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.add_member(db, group_id)


@router.put("/groups/{group_id}/remove-member", response_model=org_schemas.GroupRead, summary="인원 1명 감소")
async def remove_group_member(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.remove_member(db, group_id)


@router.put("/groups/{group_id}/tags", response_model=org_schemas.GroupRead, summary="태그 변경")
async def update_group_tags(
    group_id: int,
    tags_in: org_schemas.GroupTagsUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await group_service.update_tags(db, group_id, tags_in.tags)


@router.put("/groups/{group_id}/update-activity", response_model=org_schemas.GroupRead, summary="마지막 활동 일시 갱신")
async def update_group_activity(group_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await group_service.update_last_activity(db, group_id)
