import logging
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


async def toggle_relation(db: AsyncSession, model, **key) -> tuple[bool, object | None]:
    """
    Delete the relation row matching ``key`` or create it when absent

    The delete is a single conditional statement and the insert is guarded by
    the table's unique constraint, so concurrent toggles can never leave two
    rows for the same key.

    Returns:
        tuple: (True, row) when the relation now exists, (False, None) when removed
    """
    criteria = [getattr(model, column) == value for column, value in key.items()]

    result = await db.execute(
        delete(model).where(*criteria).execution_options(synchronize_session=False)
    )
    if result.rowcount:
        await db.commit()
        return False, None

    record = model(**key)
    db.add(record)
    try:
        await db.commit()
    except IntegrityError:
        # A concurrent request created the same relation first
        await db.rollback()
        logger.info(f"Concurrent toggle on {model.__tablename__} {key}")
        result = await db.execute(select(model).where(*criteria))
        return True, result.scalar_one_or_none()

    return True, record
