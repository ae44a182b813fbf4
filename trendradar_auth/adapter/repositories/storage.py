import asyncio
from typing import Awaitable, Optional, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from trendradar_auth.domain.exceptions import StorageError

T = TypeVar("T")


async def guarded(operation: Awaitable[T], timeout: Optional[float]) -> T:
    """
    Await a store operation under a deadline.

    Timeouts and driver failures surface as StorageError. Constraint
    violations propagate unchanged.
    """
    try:
        if timeout is None:
            return await operation
        return await asyncio.wait_for(operation, timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise StorageError(f"Store did not respond within {timeout}s") from exc
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        raise StorageError("Store unavailable") from exc
