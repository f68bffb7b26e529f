# app/grpc/department_servicer.py

"""
부서(Department) gRPC 서비스 구현 모듈입니다.

REST 라우터와 동일한 서비스 계층(department_service)과 저장소(crud.department)를 사용합니다.
- 비즈니스 예외(ServiceError)와 메시지 검증 실패(pydantic.ValidationError)는
  success=false 응답으로 변환됩니다.
- 그 밖의 예외는 로그를 남기고 INTERNAL 상태로 호출을 중단합니다.
"""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Awaitable, Callable, List

import grpc
from pydantic import ValidationError as MessageValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_async_session_context
from app.core.exceptions import ServiceError
from app.domains.org import crud as org_crud
from app.domains.org import models as org_models
from app.domains.org.services import department_service

from . import messages as msg

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def _error_text(error: Exception) -> str:
    if isinstance(error, ServiceError):
        return error.message
    return str(error)


class DepartmentServicer:
    """department.DepartmentService의 20개 RPC를 처리합니다."""

    def __init__(self, session_factory: SessionFactory = get_async_session_context):
        self._session = session_factory

    # -------------------------------------------------------------------------
    # 공통 처리
    # -------------------------------------------------------------------------
    async def _list(
        self,
        context: grpc.aio.ServicerContext,
        query: Callable[[AsyncSession], Awaitable[List[org_models.Department]]],
    ) -> msg.DepartmentListResponse:
        try:
            async with self._session() as db:
                departments = await query(db)
        except Exception:
            logger.exception("gRPC 부서 목록 조회 실패")
            await context.abort(grpc.StatusCode.INTERNAL, "Internal server error")
        return msg.DepartmentListResponse(departments=[msg.DepartmentMessage.from_model(d) for d in departments])

    async def _mutate(
        self,
        context: grpc.aio.ServicerContext,
        action: Callable[[AsyncSession], Awaitable[org_models.Department]],
    ) -> msg.DepartmentResultResponse:
        try:
            async with self._session() as db:
                department = await action(db)
                return msg.DepartmentResultResponse(
                    success=True, department=msg.DepartmentMessage.from_model(department)
                )
        except (ServiceError, MessageValidationError) as e:
            logger.info("gRPC 부서 요청 거부: %s", _error_text(e))
            return msg.DepartmentResultResponse(success=False, error_message=_error_text(e))
        except Exception:
            logger.exception("gRPC 부서 변경 실패")
            await context.abort(grpc.StatusCode.INTERNAL, "Internal server error")

    # -------------------------------------------------------------------------
    # 기본 CRUD
    # -------------------------------------------------------------------------
    async def GetAllDepartments(self, request: msg.GetAllDepartmentsRequest, context):
        return await self._list(context, department_service.get_all)

    async def GetDepartmentById(self, request: msg.DepartmentIdRequest, context):
        try:
            async with self._session() as db:
                department = await department_service.get(db, request.id)
        except Exception:
            logger.exception("gRPC 부서 조회 실패 (id=%s)", request.id)
            await context.abort(grpc.StatusCode.INTERNAL, "Internal server error")
        if department is None:
            return msg.DepartmentLookupResponse(found=False)
        return msg.DepartmentLookupResponse(found=True, department=msg.DepartmentMessage.from_model(department))

    async def CreateDepartment(self, request: msg.CreateDepartmentRequest, context):
        return await self._mutate(
            context, lambda db: department_service.create(db, request.department.to_create())
        )

    async def UpdateDepartment(self, request: msg.UpdateDepartmentRequest, context):
        return await self._mutate(
            context, lambda db: department_service.update(db, request.id, request.department.to_update())
        )

    async def DeleteDepartment(self, request: msg.DepartmentIdRequest, context):
        try:
            async with self._session() as db:
                await department_service.delete(db, request.id)
        except ServiceError as e:
            return msg.DeleteDepartmentResponse(success=False, message=e.message)
        except Exception:
            logger.exception("gRPC 부서 삭제 실패 (id=%s)", request.id)
            await context.abort(grpc.StatusCode.INTERNAL, "Internal server error")
        return msg.DeleteDepartmentResponse(success=True, message="Department deleted successfully")

    # -------------------------------------------------------------------------
    # 검색/필터
    # -------------------------------------------------------------------------
    async def GetDepartmentByName(self, request: msg.DepartmentNameRequest, context):
        try:
            async with self._session() as db:
                department = await org_crud.department.get_department_by_name(db, name=request.name)
        except Exception:
            logger.exception("gRPC 부서 이름 조회 실패")
            await context.abort(grpc.StatusCode.INTERNAL, "Internal server error")
        if department is None:
            return msg.DepartmentLookupResponse(found=False)
        return msg.DepartmentLookupResponse(found=True, department=msg.DepartmentMessage.from_model(department))

    async def SearchDepartmentsByName(self, request: msg.DepartmentNameRequest, context):
        return await self._list(
            context, lambda db: org_crud.department.search_contains(db, attribute="name", value=request.name)
        )

    async def SearchDepartmentsByManagerName(self, request: msg.SearchDepartmentsByManagerNameRequest, context):
        return await self._list(
            context,
            lambda db: org_crud.department.search_contains(db, attribute="manager_name", value=request.manager_name),
        )

    async def SearchDepartmentsByDescription(self, request: msg.SearchDepartmentsByDescriptionRequest, context):
        return await self._list(
            context,
            lambda db: org_crud.department.search_contains(db, attribute="description", value=request.description),
        )

    async def GetDepartmentsByLocation(self, request: msg.GetDepartmentsByLocationRequest, context):
        return await self._list(context, lambda db: org_crud.department.get_all_by(db, location=request.location))

    async def GetActiveDepartments(self, request: msg.GetActiveDepartmentsRequest, context):
        return await self._list(context, lambda db: org_crud.department.get_all_by(db, active=True))

    async def GetInactiveDepartments(self, request: msg.GetInactiveDepartmentsRequest, context):
        return await self._list(context, lambda db: org_crud.department.get_all_by(db, active=False))

    async def GetDepartmentsByBudget(self, request: msg.GetDepartmentsByBudgetRequest, context):
        return await self._list(
            context, lambda db: org_crud.department.get_greater_than(db, attribute="budget", value=request.min_budget)
        )

    async def GetDepartmentsByEmployeeCount(self, request: msg.GetDepartmentsByEmployeeCountRequest, context):
        return await self._list(
            context,
            lambda db: org_crud.department.get_greater_than(
                db, attribute="employee_count", value=request.min_employee_count
            ),
        )

    async def GetDepartmentsByManagerEmail(self, request: msg.GetDepartmentsByManagerEmailRequest, context):
        return await self._list(
            context, lambda db: org_crud.department.get_all_by(db, manager_email=request.manager_email)
        )

    async def GetDepartmentsByActiveAndLocation(self, request: msg.GetDepartmentsByActiveAndLocationRequest, context):
        return await self._list(
            context,
            lambda db: org_crud.department.get_all_by(db, active=request.active, location=request.location),
        )

    # -------------------------------------------------------------------------
    # 단일 필드 변경
    # -------------------------------------------------------------------------
    async def ActivateDepartment(self, request: msg.DepartmentIdRequest, context):
        return await self._mutate(context, lambda db: department_service.activate(db, request.id))

    async def DeactivateDepartment(self, request: msg.DepartmentIdRequest, context):
        return await self._mutate(context, lambda db: department_service.deactivate(db, request.id))

    async def UpdateDepartmentBudget(self, request: msg.UpdateDepartmentBudgetRequest, context):
        return await self._mutate(
            context, lambda db: department_service.update_budget(db, request.id, request.budget)
        )

    async def UpdateDepartmentEmployeeCount(self, request: msg.UpdateDepartmentEmployeeCountRequest, context):
        return await self._mutate(
            context, lambda db: department_service.update_employee_count(db, request.id, request.employee_count)
        )


# RPC 이름 -> 요청 메시지 클래스 (서버 핸들러와 클라이언트 스텁이 함께 사용)
RPC_REQUEST_TYPES = {
    "GetAllDepartments": msg.GetAllDepartmentsRequest,
    "GetDepartmentById": msg.DepartmentIdRequest,
    "CreateDepartment": msg.CreateDepartmentRequest,
    "UpdateDepartment": msg.UpdateDepartmentRequest,
    "DeleteDepartment": msg.DepartmentIdRequest,
    "GetDepartmentByName": msg.DepartmentNameRequest,
    "SearchDepartmentsByName": msg.DepartmentNameRequest,
    "SearchDepartmentsByManagerName": msg.SearchDepartmentsByManagerNameRequest,
    "SearchDepartmentsByDescription": msg.SearchDepartmentsByDescriptionRequest,
    "GetDepartmentsByLocation": msg.GetDepartmentsByLocationRequest,
    "GetActiveDepartments": msg.GetActiveDepartmentsRequest,
    "GetInactiveDepartments": msg.GetInactiveDepartmentsRequest,
    "GetDepartmentsByBudget": msg.GetDepartmentsByBudgetRequest,
    "GetDepartmentsByEmployeeCount": msg.GetDepartmentsByEmployeeCountRequest,
    "GetDepartmentsByManagerEmail": msg.GetDepartmentsByManagerEmailRequest,
    "GetDepartmentsByActiveAndLocation": msg.GetDepartmentsByActiveAndLocationRequest,
    "ActivateDepartment": msg.DepartmentIdRequest,
    "DeactivateDepartment": msg.DepartmentIdRequest,
    "UpdateDepartmentBudget": msg.UpdateDepartmentBudgetRequest,
    "UpdateDepartmentEmployeeCount": msg.UpdateDepartmentEmployeeCountRequest,
}

# RPC 이름 -> 응답 메시지 클래스
RPC_RESPONSE_TYPES = {
    name: msg.DepartmentListResponse
    for name in RPC_REQUEST_TYPES
    if name.startswith(("GetAll", "Search", "GetDepartments", "GetActive", "GetInactive"))
}
RPC_RESPONSE_TYPES.update({
    "GetDepartmentById": msg.DepartmentLookupResponse,
    "GetDepartmentByName": msg.DepartmentLookupResponse,
    "CreateDepartment": msg.DepartmentResultResponse,
    "UpdateDepartment": msg.DepartmentResultResponse,
    "DeleteDepartment": msg.DeleteDepartmentResponse,
    "ActivateDepartment": msg.DepartmentResultResponse,
    "DeactivateDepartment": msg.DepartmentResultResponse,
    "UpdateDepartmentBudget": msg.DepartmentResultResponse,
    "UpdateDepartmentEmployeeCount": msg.DepartmentResultResponse,
})
