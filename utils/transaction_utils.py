"""
Transaction Utilities for the Storefront Backend
================================================

Atomic transaction helpers with an explicit time budget and consistent
error translation for multi-table writes.

Usage Examples:
    # Context manager
    with atomic_with_timeout(5.0):
        product = Product.objects.create(...)
        ProductVariant.objects.bulk_create(...)
"""

import logging
import time
from contextlib import contextmanager
from typing import Optional

from django.db import DatabaseError, connections, transaction

logger = logging.getLogger(__name__)


class TransactionError(Exception):
    """Custom exception for transaction-related errors"""

    pass


class TransactionTimeoutError(TransactionError):
    """Exception raised when a transaction exceeds its time budget"""

    pass


def set_statement_timeout(timeout: float, using: str = "default") -> None:
    """
    Bound every statement in the current transaction by ``timeout`` seconds.

    Only PostgreSQL supports a transaction-scoped statement timeout
    (``SET LOCAL``); on other backends the deadline check in
    ``atomic_with_timeout`` is the only guard.

    Args:
        timeout (float): Budget in seconds
        using (str): Database alias to use
    """
    connection = connections[using]
    if connection.vendor != "postgresql":
        logger.debug(f"Statement timeout not supported on {connection.vendor}, relying on deadline check")
        return

    timeout_ms = max(int(timeout * 1000), 1)
    with connection.cursor() as cursor:
        cursor.execute(f"SET LOCAL statement_timeout = {timeout_ms}")
    logger.debug(f"Set statement_timeout to {timeout_ms}ms")


def reset_statement_timeout(using: str = "default") -> None:
    """
    Restore the session's statement timeout for the rest of the transaction.

    ``SET LOCAL`` lasts until the outermost transaction ends, so when
    ``atomic_with_timeout`` runs as a savepoint inside a caller's
    ``atomic`` the budget would otherwise keep applying to the caller's
    later statements.
    """
    connection = connections[using]
    if connection.vendor != "postgresql":
        return

    with connection.cursor() as cursor:
        cursor.execute("SET LOCAL statement_timeout = DEFAULT")
    logger.debug("Reset statement_timeout to session default")


@contextmanager
def atomic_with_timeout(timeout: Optional[float] = None, using: str = "default"):
    """
    Context manager for atomic transactions with a time budget.

    Anything raised inside the block rolls the whole transaction back. If the
    block finishes after the deadline, it is rolled back as well and
    ``TransactionTimeoutError`` is raised instead of committing late.

    The statement timeout is reset before a successful block exits, so a
    nested block does not leave its budget on the enclosing transaction.
    A failed nested block rolls back to its savepoint, which undoes the
    ``SET LOCAL`` as well.

    Args:
        timeout (float): Budget in seconds, None or 0 disables the limit
        using (str): Database alias

    Usage:
        with atomic_with_timeout(10):
            model.save()
            other_model.create(...)
    """
    start_time = time.monotonic()
    try:
        with transaction.atomic(using=using):
            if timeout:
                set_statement_timeout(timeout, using=using)
            logger.debug(f"Started atomic transaction (timeout={timeout})")
            yield
            elapsed = time.monotonic() - start_time
            if timeout and elapsed > timeout:
                raise TransactionTimeoutError(f"Transaction exceeded {timeout}s budget ({elapsed:.3f}s), rolled back")
            if timeout:
                reset_statement_timeout(using=using)
        logger.debug("Transaction committed successfully")
    except TransactionTimeoutError as e:
        logger.error(str(e))
        raise
    except DatabaseError as e:
        logger.error(f"Database error in transaction: {e}")
        raise TransactionError(f"Transaction failed: {e}") from e

