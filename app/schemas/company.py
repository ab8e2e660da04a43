from pydantic import BaseModel, Field
from typing import List, Optional

from app.schemas.common import INT_MAX, CamelModel, DecimalStr, RequestModel


class CompanyCreateRequest(RequestModel):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0, le=INT_MAX)
    logo_url: Optional[str] = None


class CompanyUpdateRequest(RequestModel):
    """Schema for a partial company update; the handle cannot change"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, le=INT_MAX)
    logo_url: Optional[str] = None


class CompanySearch(BaseModel):
    """Filters accepted by GET /companies"""
    name: Optional[str] = None
    min_employees: Optional[int] = None
    max_employees: Optional[int] = None


class CompanyJob(CamelModel):
    """Job as listed inside a company detail"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[DecimalStr] = None


class CompanyOut(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyDetail(CompanyOut):
    jobs: List[CompanyJob] = []


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: List[CompanyOut]
