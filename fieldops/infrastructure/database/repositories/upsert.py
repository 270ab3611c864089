"""
Dialect-aware INSERT ... ON CONFLICT DO NOTHING.
"""

from typing import Any, Dict, List, Sequence

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def insert_ignoring_conflicts(
    session: AsyncSession,
    model,
    rows: List[Dict[str, Any]],
    index_elements: Sequence[str],
) -> int:
    """Insert rows, silently skipping those that hit the unique index.

    Returns the number of rows actually inserted.
    """
    if not rows:
        return 0

    dialect = session.get_bind().dialect.name
    try:
        insert = _INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f"Conflict-ignoring insert not supported on {dialect}")

    inserted = 0
    for row in rows:
        stmt = insert(model).values(**row).on_conflict_do_nothing(
            index_elements=list(index_elements)
        )
        result = await session.execute(stmt)
        inserted += max(result.rowcount or 0, 0)
    return inserted
