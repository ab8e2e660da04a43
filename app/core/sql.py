"""
Helpers for building SQL fragments.
"""

from typing import Any, Dict, List, Mapping, NamedTuple

from app.core.errors import BadRequestError


class PartialUpdate(NamedTuple):
    """SET clause pieces for a partial update, in input order."""
    fragments: List[str]
    values: List[Any]
    columns: List[str]

    @property
    def set_clause(self) -> str:
        return ", ".join(self.fragments)

    def bind_params(self) -> Dict[str, Any]:
        """Bind parameters keyed by position, matching the fragments."""
        return {str(idx): value for idx, value in enumerate(self.values, start=1)}


def sql_for_partial_update(data: Mapping[str, Any], column_map: Mapping[str, str]) -> PartialUpdate:
    """
    Map a sparse update into positional SET fragments.

    Args:
        data: Attribute name -> new value, only the attributes being changed
        column_map: Attribute name -> column name for attributes whose column
            differs, e.g. {"numEmployees": "num_employees"}

    Returns:
        PartialUpdate, e.g. for {"firstName": "Aliya", "age": 32}:
        fragments ['"first_name"=:1', '"age"=:2'], values ["Aliya", 32]

    Raises:
        BadRequestError: If data is empty

    Column names are not validated: never pass user-supplied keys here
    without whitelisting them first.
    """
    keys = list(data.keys())
    if not keys:
        raise BadRequestError("No data")

    columns = [column_map.get(key, key) for key in keys]
    fragments = [f'"{column}"=:{idx}' for idx, column in enumerate(columns, start=1)]

    return PartialUpdate(
        fragments=fragments,
        values=[data[key] for key in keys],
        columns=columns,
    )
