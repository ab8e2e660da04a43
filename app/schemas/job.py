from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Optional

from app.schemas.common import INT_MAX, CamelModel, DecimalStr, RequestModel


class JobCreateRequest(RequestModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=INT_MAX)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(RequestModel):
    """Schema for a partial job update"""
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=INT_MAX)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: Optional[str] = Field(None, min_length=1, max_length=25)


class JobSearch(BaseModel):
    """Filters accepted by GET /jobs"""
    title: Optional[str] = None
    min_salary: Optional[int] = None
    has_equity: bool = False


class JobOut(CamelModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[DecimalStr] = None
    company_handle: str


class JobResponse(BaseModel):
    job: JobOut


class JobListResponse(BaseModel):
    jobs: List[JobOut]
