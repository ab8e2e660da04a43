"""
WHERE-clause builders for the listing queries.

Each function turns a search object into a list of SQLAlchemy predicates,
always in the same field order, with every value sent as a bound
parameter. Validation errors are raised before any predicate is built.
"""

from typing import List, Optional

from sqlalchemy.sql.elements import ColumnElement

from app.core.errors import BadRequestError
from app.models.company import Company
from app.models.job import Job
from app.schemas.company import CompanySearch
from app.schemas.job import JobSearch


def company_filters(search: Optional[CompanySearch] = None) -> List[ColumnElement]:
    """
    Build predicates for GET /companies.

    - name: case-insensitive substring match
    - minEmployees / maxEmployees: inclusive bounds on num_employees

    Raises:
        BadRequestError: If minEmployees is greater than maxEmployees
    """
    if search is None:
        return []

    min_employees = search.min_employees
    max_employees = search.max_employees

    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    clauses = []

    if search.name:
        clauses.append(Company.name.ilike(f"%{search.name}%"))

    if min_employees is not None:
        clauses.append(Company.num_employees >= min_employees)

    if max_employees is not None:
        clauses.append(Company.num_employees <= max_employees)

    return clauses


def job_filters(search: Optional[JobSearch] = None) -> List[ColumnElement]:
    """
    Build predicates for GET /jobs.

    - title: case-insensitive substring match
    - minSalary: inclusive lower bound on salary
    - hasEquity: when true, only jobs with equity > 0; otherwise no filter

    Raises:
        BadRequestError: If minSalary is negative
    """
    if search is None:
        return []

    if search.min_salary is not None and search.min_salary < 0:
        raise BadRequestError("minSalary must be greater than or equal to 0")

    clauses = []

    if search.title:
        clauses.append(Job.title.ilike(f"%{search.title}%"))

    if search.min_salary is not None:
        clauses.append(Job.salary >= search.min_salary)

    if search.has_equity:
        clauses.append(Job.equity > 0)

    return clauses
