from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin
from app.crud import company as company_crud
from app.schemas.common import INT_MAX, INT_MIN, DeletedResponse
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanySearch,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post(
    "",
    status_code=201,
    response_model=CompanyResponse,
    dependencies=[Depends(ensure_admin)],
)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a company.

    Authorization required: admin
    """
    company = company_crud.create(db, request)
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    name: Optional[str] = None,
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=INT_MIN, le=INT_MAX),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=INT_MIN, le=INT_MAX),
    db: Session = Depends(get_db)
):
    """
    List companies ordered by name.

    Optional filters:
    - name: case-insensitive substring of the company name
    - minEmployees / maxEmployees: inclusive employee count bounds
    """
    filters = CompanySearch(
        name=name,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    companies = company_crud.find_all(db, filters)
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company and its jobs."""
    company = company_crud.get(db, handle)
    return {"company": company}


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(ensure_admin)],
)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Partially update a company: any of name, description, numEmployees, logoUrl.

    Authorization required: admin
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    company = company_crud.update(db, handle, data)
    return {"company": company}


@router.delete(
    "/{handle}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_admin)],
)
def delete_company(handle: str, db: Session = Depends(get_db)):
    """
    Delete a company and its jobs.

    Authorization required: admin
    """
    company_crud.remove(db, handle)
    return {"deleted": handle}
