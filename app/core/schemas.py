# app/core/schemas.py

"""
여러 도메인이 함께 사용하는 응답 스키마입니다.
"""

from sqlmodel import SQLModel


class MessageResponse(SQLModel):
    """삭제 등 본문 없는 작업의 확인 메시지 응답"""
    message: str
