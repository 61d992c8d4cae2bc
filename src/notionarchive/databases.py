"""Known Notion databases and name resolution."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from notionarchive.errors import UnknownDatabaseError
from notionarchive.models import DatabaseRef

# Logical name -> Notion database id, in processing order.
NOTION_DATABASES: dict[str, str] = {
    "QBO_PROJECTS": "6bf327c6c1454c71a797baca43635424",
    "BUYER_INFORMATION": "0fb39294c1c04b9dbe436fdf9dc77d7c",
    "SKU_INFORMATION": "7c50b7c96b004b71bacc271941240ff3",
    "SUPPLIER_INFORMATION": "0ea639b92bc4469c95d96c4731293d40",
    "PROJECT_TRANSACTIONS": "2e913dfc17cf4e27a42487d316b3a18b",
}


def resolve_databases(
    names: Optional[Sequence[str]] = None,
    *,
    table: Optional[Mapping[str, str]] = None,
) -> list[DatabaseRef]:
    """
    Map database names to DatabaseRef objects.

    No names (None or empty) selects every database in table order. Otherwise
    one ref per distinct name in caller order; repeats are dropped.

    Raises:
        UnknownDatabaseError: if any name is not in the table. Raised before
            any ref is returned, so no remote call happens for a bad request.
    """
    use_table = NOTION_DATABASES if table is None else table

    if not names:
        return [DatabaseRef(name=name, id=db_id) for name, db_id in use_table.items()]

    unknown = [name for name in names if name not in use_table]
    if unknown:
        raise UnknownDatabaseError(
            f"Unknown database name(s): {', '.join(unknown)}",
            details={"unknown": unknown, "known": list(use_table)},
        )

    return [DatabaseRef(name=name, id=use_table[name]) for name in dict.fromkeys(names)]
