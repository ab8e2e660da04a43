"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.errors import BadRequestError, NotFoundError
from app.crud.base import update_row
from app.crud.filters import job_filters
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobSearch

logger = logging.getLogger(__name__)

# JSON attribute name -> column name, for partial updates
COLUMN_MAP = {
    "companyHandle": "company_handle",
}


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id

    Raises:
        BadRequestError: If the company does not exist or a column
            constraint (salary >= 0, 0 <= equity <= 1) is violated
    """
    db_job = Job(
        title=job_data.title,
        salary=job_data.salary,
        equity=job_data.equity,
        company_handle=job_data.company_handle,
    )

    db.add(db_job)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected job for company {job_data.company_handle}: {e.orig}")
        raise BadRequestError("Invalid job data")
    db.refresh(db_job)

    logger.info(f"Created job {db_job.id}: {db_job.title} ({db_job.company_handle})")
    return db_job


def find_all(db: Session, filters: Optional[JobSearch] = None) -> List[Job]:
    """
    Retrieve all jobs matching the optional filters, ordered by id.

    Raises:
        BadRequestError: If minSalary is negative
    """
    query = select(Job)

    clauses = job_filters(filters)
    if clauses:
        query = query.where(*clauses)

    return list(db.scalars(query.order_by(Job.id)))


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no job has this id
    """
    job = db.get(Job, job_id)

    if not job:
        raise NotFoundError(f"No job with id: {job_id}")

    return job


def update(db: Session, job_id: int, data: Dict[str, Any]) -> Job:
    """
    Partially update a job.

    Salary and equity ranges are left to the column constraints.

    Args:
        db: Database session
        job_id: Job ID to update
        data: Any of {title, salary, equity, companyHandle}

    Returns:
        Updated Job instance

    Raises:
        BadRequestError: If data is empty or violates a constraint
        NotFoundError: If no job has this id
    """
    try:
        updated = update_row(db, Job.__table__, "id", job_id, data, COLUMN_MAP)
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected update for job {job_id}: {e.orig}")
        raise BadRequestError("Invalid job data")

    if not updated:
        db.rollback()
        raise NotFoundError(f"No job with id: {job_id}")

    db.commit()
    logger.info(f"Updated job {job_id}: {', '.join(data)}")

    return db.get(Job, job_id)


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this id
    """
    job = db.get(Job, job_id)
    if not job:
        raise NotFoundError(f"No job with id: {job_id}")

    db.delete(job)
    db.commit()

    logger.info(f"Deleted job {job_id}")
