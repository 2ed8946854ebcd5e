from typing import Any

from sqlalchemy import Executable
from sqlalchemy.engine import Result
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sampurnan.domain.shared.error import StoreError


def store_message(error: SQLAlchemyError) -> str:
    """The driver's own message when there is one, without SQLAlchemy's decoration."""
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig)
    return str(error)


async def execute(session: AsyncSession, stmt: Executable, params: Any = None) -> Result[Any]:
    """Execute a statement, turning driver failures into StoreError after rolling back."""
    try:
        if params is None:
            return await session.execute(stmt)
        return await session.execute(stmt, params)
    except SQLAlchemyError as e:
        await session.rollback()
        raise StoreError(store_message(e)) from e
    except OverflowError as e:
        # Raised by sqlite3 while binding a parameter, outside the DBAPI error tree.
        await session.rollback()
        raise StoreError(str(e)) from e
