"""
Shared helpers for the CRUD modules.
"""

from typing import Any, Mapping

from sqlalchemy import Table, bindparam, text
from sqlalchemy.orm import Session

from app.core.sql import sql_for_partial_update


def update_row(
    db: Session,
    table: Table,
    key_column: str,
    key: Any,
    data: Mapping[str, Any],
    column_map: Mapping[str, str],
) -> bool:
    """
    Run a partial UPDATE on a single row identified by key_column.

    Bind parameters are typed from the table's columns so values such as
    Decimal are converted the same way the ORM converts them.

    Args:
        db: Database session
        table: Target table
        key_column: Primary key column name
        key: Primary key value
        data: Attribute name -> new value (sparse)
        column_map: Attribute name -> column name where they differ

    Returns:
        True if a row was updated, False if no row has that key

    Raises:
        BadRequestError: If data is empty
    """
    update = sql_for_partial_update(data, column_map)
    key_idx = len(update.values) + 1

    stmt = text(
        f'UPDATE {table.name} SET {update.set_clause} WHERE "{key_column}" = :{key_idx}'
    ).bindparams(
        *(
            bindparam(str(idx), type_=table.c[column].type)
            for idx, column in enumerate(update.columns, start=1)
        ),
        bindparam(str(key_idx), type_=table.c[key_column].type),
    )

    params = update.bind_params()
    params[str(key_idx)] = key

    result = db.execute(stmt, params)
    return result.rowcount > 0
