"""Translation of SQLAlchemy faults into application exceptions."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from core.config import settings
from core.exceptions import ConcurrentUpdateError, StoreError

logger = structlog.get_logger()


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise database errors raised inside the block as StoreError.

    A version mismatch on flush means another request saved the profile
    after it was loaded, and surfaces as ConcurrentUpdateError instead.
    """
    try:
        yield
    except StaleDataError as e:
        logger.warning("profile_version_conflict", operation=operation)
        raise ConcurrentUpdateError() from e
    except SQLAlchemyError as e:
        logger.error(
            "store_error",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        raise StoreError(
            message=f"Failed to {operation}",
            details={"error": str(e)} if settings.is_development else None,
        ) from e
