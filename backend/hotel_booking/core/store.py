# hotel_booking/core/store.py
"""
Scoped access to the relational store.

Every service operation runs inside `store_session()`: one pooled connection
held in a transaction for the duration of the work, committed on success,
rolled back and released on any exception. Store faults leave this module as
InternalError so no driver exception reaches a client.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.exceptions import BaseORMException
from tortoise.transactions import in_transaction

from hotel_booking.errors import BookingServiceError, InternalError

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def store_session(action: str) -> AsyncIterator[BaseDBAsyncClient]:
    """
    Open a transactional session on the default connection.

    Args:
        action: Short description used in logs and in the client-facing
            message, e.g. "creating the booking"

    Yields:
        The transaction-bound client; pass it as `using_db` to every query.

    Raises:
        BookingServiceError: Domain errors raised inside the block, unchanged
        InternalError: Any ORM or connection fault
    """
    try:
        async with in_transaction() as conn:
            yield conn
    except BookingServiceError:
        raise
    except (BaseORMException, OSError) as exc:
        logger.exception("[store] fault while %s", action)
        raise InternalError(
            f"An error occurred while {action}",
            details={"details": type(exc).__name__},
        ) from exc
