# app/schemas/common.py
"""Response envelopes shared by every waste log endpoint."""

from datetime import datetime
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class RestResponse(CamelModel, Generic[T]):
    success: bool
    message: str
    data: Optional[T] = None
    timestamp: datetime = Field(default_factory=datetime.now)


class ErrorResponse(CamelModel):
    status: int
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)


class Page(CamelModel, Generic[T]):
    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
