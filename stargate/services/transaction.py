"""Transaction Helpers: commit with rollback and error mapping.

Invariants:
    - A failed commit is ALWAYS rolled back before raising (nothing partially committed)
    - IntegrityError -> ConflictError (unique constraints are the authoritative guard)
    - Any other SQLAlchemyError -> PersistenceError, logged with exc_info
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stargate.core.errors import ConflictError, ErrorContext, PersistenceError

logger = logging.getLogger(__name__)


async def commit_or_raise(
    db: AsyncSession,
    operation: str,
    conflict_message: str,
    context: ErrorContext | None = None,
) -> None:
    """Commit the session. Rolls back and raises a core error on failure."""
    ctx = context or ErrorContext()
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(
            f"{operation}: integrity constraint rejected write: {e.orig}",
            extra={"person_name": ctx.person_name, "error_code": "CONFLICT"},
        )
        raise ConflictError(conflict_message, ctx) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"{operation}: commit failed",
            exc_info=True,
            extra={"person_name": ctx.person_name, "error_code": "PERSISTENCE_ERROR"},
        )
        raise PersistenceError("write rejected by the store", operation, ctx) from e
