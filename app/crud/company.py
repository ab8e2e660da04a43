"""
CRUD operations for Company model.

Functions take a Session and either return Company instances or raise
BadRequestError / NotFoundError for the API layer to translate.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, contains_eager
from app.core.errors import BadRequestError, NotFoundError
from app.crud.base import update_row
from app.crud.filters import company_filters
from app.models.company import Company
from app.models.job import Job
from app.schemas.company import CompanyCreateRequest, CompanySearch

logger = logging.getLogger(__name__)

# JSON attribute name -> column name, for partial updates
COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, company_data: CompanyCreateRequest) -> Company:
    """
    Create a new company in the database.

    Args:
        db: Database session
        company_data: Validated company creation data

    Returns:
        Created Company instance

    Raises:
        BadRequestError: If a company with the same handle (or name) exists
    """
    _check_unique(db, company_data)

    db_company = Company(
        handle=company_data.handle,
        name=company_data.name,
        description=company_data.description,
        num_employees=company_data.num_employees,
        logo_url=company_data.logo_url,
    )

    db.add(db_company)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent insert
        db.rollback()
        _check_unique(db, company_data)
        logger.warning(f"Rejected company {company_data.handle}: {e.orig}")
        raise BadRequestError("Invalid company data")
    db.refresh(db_company)

    logger.info(f"Created company {db_company.handle}")
    return db_company


def _check_unique(db: Session, company_data: CompanyCreateRequest) -> None:
    """Raise BadRequestError naming the handle or name that is already taken."""
    if db.get(Company, company_data.handle):
        raise BadRequestError(f"Duplicate company: {company_data.handle}")

    taken = db.scalar(select(Company.handle).where(Company.name == company_data.name))
    if taken:
        raise BadRequestError(f"Duplicate company name: {company_data.name}")


def find_all(db: Session, filters: Optional[CompanySearch] = None) -> List[Company]:
    """
    Retrieve all companies matching the optional filters, ordered by name.

    Raises:
        BadRequestError: If the filters are inconsistent
    """
    query = select(Company)

    clauses = company_filters(filters)
    if clauses:
        query = query.where(*clauses)

    return list(db.scalars(query.order_by(Company.name)))


def get(db: Session, handle: str) -> Company:
    """
    Retrieve a company and its jobs by handle.

    Jobs are loaded with a single LEFT OUTER JOIN, so a company without
    jobs still comes back with an empty jobs list.

    Raises:
        NotFoundError: If no company has this handle
    """
    query = (
        select(Company)
        .outerjoin(Company.jobs)
        .options(contains_eager(Company.jobs))
        .where(Company.handle == handle)
        .order_by(Job.id)
        .execution_options(populate_existing=True)
    )
    company = db.scalars(query).unique().first()

    if not company:
        raise NotFoundError(f"No company: {handle}")

    return company


def update(db: Session, handle: str, data: Dict[str, Any]) -> Company:
    """
    Partially update a company.

    Args:
        db: Database session
        handle: Handle of the company to update
        data: Any of {name, description, numEmployees, logoUrl}

    Returns:
        Updated Company instance

    Raises:
        BadRequestError: If data is empty or violates a constraint
        NotFoundError: If no company has this handle
    """
    try:
        updated = update_row(db, Company.__table__, "handle", handle, data, COLUMN_MAP)
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected update for company {handle}: {e.orig}")
        raise BadRequestError("Invalid company data")

    if not updated:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Updated company {handle}: {', '.join(data)}")

    return db.get(Company, handle)


def remove(db: Session, handle: str) -> None:
    """
    Delete a company and, by cascade, its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    company = db.get(Company, handle)
    if not company:
        raise NotFoundError(f"No company: {handle}")

    db.delete(company)
    db.commit()

    logger.info(f"Deleted company {handle}")
