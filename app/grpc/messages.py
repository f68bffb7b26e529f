# app/grpc/messages.py

"""
부서(Department) gRPC 서비스의 요청/응답 메시지를 정의하는 모듈입니다.

메시지는 Pydantic 모델이며 와이어에서는 JSON(UTF-8 바이트)으로 직렬화됩니다.
모든 필드는 명시적 존재 여부(Optional)를 가지므로, 예산 0이나 직원 수 0도
'값 없음'과 구분되어 그대로 전달됩니다.
"""

from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel

from app.domains.org import models as org_models
from app.domains.org import schemas as org_schemas

MessageType = TypeVar("MessageType", bound=BaseModel)


def serialize(message: BaseModel) -> bytes:
    return message.model_dump_json(exclude_none=True).encode("utf-8")


def deserializer(message_cls: Type[MessageType]):
    """바이트를 주어진 메시지 클래스로 역직렬화하는 함수를 반환합니다."""
    def _deserialize(data: bytes) -> MessageType:
        return message_cls.model_validate_json(data or b"{}")
    return _deserialize


# =============================================================================
# 1. 부서 메시지
# =============================================================================
class DepartmentMessage(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    manager_name: Optional[str] = None
    manager_email: Optional[str] = None
    location: Optional[str] = None
    budget: Optional[float] = None
    employee_count: Optional[int] = None
    active: Optional[bool] = None

    @classmethod
    def from_model(cls, department: org_models.Department) -> "DepartmentMessage":
        return cls(
            id=department.id,
            name=department.name,
            description=department.description,
            manager_name=department.manager_name,
            manager_email=department.manager_email,
            location=department.location,
            budget=department.budget,
            employee_count=department.employee_count,
            active=department.active,
        )

    def to_create(self) -> org_schemas.DepartmentCreate:
        """
        생성 스키마로 변환합니다. 값이 없는 필드는 스키마 기본값을 따르며,
        필드 제약 위반 시 pydantic.ValidationError가 발생합니다.
        """
        return org_schemas.DepartmentCreate.model_validate(
            self.model_dump(exclude={"id"}, exclude_none=True)
        )

    def to_update(self) -> org_schemas.DepartmentUpdate:
        return org_schemas.DepartmentUpdate.model_validate(
            self.model_dump(exclude={"id"}, exclude_none=True)
        )


# =============================================================================
# 2. 요청 메시지
# =============================================================================
class GetAllDepartmentsRequest(BaseModel):
    pass


class GetActiveDepartmentsRequest(BaseModel):
    pass


class GetInactiveDepartmentsRequest(BaseModel):
    pass


class DepartmentIdRequest(BaseModel):
    """GetById, Delete, Activate, Deactivate 공용"""
    id: int


class CreateDepartmentRequest(BaseModel):
    department: DepartmentMessage


class UpdateDepartmentRequest(BaseModel):
    id: int
    department: DepartmentMessage


class DepartmentNameRequest(BaseModel):
    """GetByName, SearchByName 공용"""
    name: str


class SearchDepartmentsByManagerNameRequest(BaseModel):
    manager_name: str


class SearchDepartmentsByDescriptionRequest(BaseModel):
    description: str


class GetDepartmentsByLocationRequest(BaseModel):
    location: str


class GetDepartmentsByBudgetRequest(BaseModel):
    min_budget: float


class GetDepartmentsByEmployeeCountRequest(BaseModel):
    min_employee_count: int


class GetDepartmentsByManagerEmailRequest(BaseModel):
    manager_email: str


class GetDepartmentsByActiveAndLocationRequest(BaseModel):
    active: bool
    location: str


class UpdateDepartmentBudgetRequest(BaseModel):
    id: int
    budget: float


class UpdateDepartmentEmployeeCountRequest(BaseModel):
    id: int
    employee_count: int


# =============================================================================
# 3. 응답 메시지
# =============================================================================
class DepartmentListResponse(BaseModel):
    departments: List[DepartmentMessage] = []


class DepartmentLookupResponse(BaseModel):
    """GetById, GetByName: found=false이면 department가 없습니다."""
    found: bool
    department: Optional[DepartmentMessage] = None


class DepartmentResultResponse(BaseModel):
    """Create, Update, Activate, Deactivate, UpdateBudget, UpdateEmployeeCount 공용"""
    success: bool
    department: Optional[DepartmentMessage] = None
    error_message: Optional[str] = None


class DeleteDepartmentResponse(BaseModel):
    success: bool
    message: str
