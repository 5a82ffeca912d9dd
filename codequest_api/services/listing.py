"""
Whole-table listing shared by the list endpoints

Every list endpoint runs the same query shape, `SELECT * FROM <table> ORDER BY id`,
turns the rows into read schemas, and answers with an empty list when either
step fails for any reason. Callers cannot tell an empty table from an
unreachable database or a malformed row.
"""

import logging
from typing import TypeVar

from pydantic import TypeAdapter
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from codequest_api.core.logger import get_logger

logger = get_logger(__name__, logging.INFO)

ReadT = TypeVar("ReadT", bound=SQLModel)


async def list_all_ordered_by_id(
    db: AsyncSession,
    table_model: type[SQLModel],
    read_model: type[ReadT],
) -> list[ReadT]:
    """
    Return every row of `table_model`'s table as `read_model`, in ascending id order.

    Table models skip validation when loaded, so the rows are validated here;
    a bad row empties the whole result, same as a failed query.
    """
    try:
        result = await db.execute(select(table_model).order_by(table_model.id))  # type: ignore[attr-defined]
        rows = result.scalars().all()
        return TypeAdapter(list[read_model]).validate_python(rows, from_attributes=True)  # type: ignore[valid-type]
    except Exception as e:
        # Failure lists as empty; the cause only shows at DEBUG
        logger.debug(f"Listing {table_model.__tablename__} failed, returning []: {e!r}")
        return []
