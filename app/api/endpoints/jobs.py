from typing import Optional
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin
from app.crud import job as job_crud
from app.schemas.common import INT_MAX, INT_MIN, DeletedResponse
from app.schemas.job import (
    JobCreateRequest,
    JobListResponse,
    JobResponse,
    JobSearch,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post(
    "",
    status_code=201,
    response_model=JobResponse,
    dependencies=[Depends(ensure_admin)],
)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a job posting for an existing company.

    Authorization required: admin
    """
    job = job_crud.create(db, request)
    return {"job": job}


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = None,
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=INT_MIN, le=INT_MAX),
    has_equity: bool = Query(False, alias="hasEquity"),
    db: Session = Depends(get_db)
):
    """
    List jobs ordered by id.

    Optional filters:
    - title: case-insensitive substring of the job title
    - minSalary: only jobs paying at least this much
    - hasEquity: when true, only jobs offering non-zero equity
    """
    filters = JobSearch(title=title, min_salary=min_salary, has_equity=has_equity)
    jobs = job_crud.find_all(db, filters)
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int = Path(..., ge=INT_MIN, le=INT_MAX), db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    job = job_crud.get(db, job_id)
    return {"job": job}


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(ensure_admin)],
)
def update_job(
    request: JobUpdateRequest,
    job_id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    db: Session = Depends(get_db)
):
    """
    Partially update a job: any of title, salary, equity, companyHandle.

    Authorization required: admin
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    job = job_crud.update(db, job_id, data)
    return {"job": job}


@router.delete(
    "/{job_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(ensure_admin)],
)
def delete_job(job_id: int = Path(..., ge=INT_MIN, le=INT_MAX), db: Session = Depends(get_db)):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    return {"deleted": job_id}
