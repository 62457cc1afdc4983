"""Retry helper for transient HTTP failures."""

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


def with_retry[T](
    fn: Callable[[], T],
    retries: int = 3,
    exceptions: tuple[type[Exception], ...] = (Exception,),
    backoff: float = 0.2,
) -> T:
    """Retry a function on transient errors with linear backoff.

    Args:
        fn: Zero-argument callable to retry.
        retries: Max retry attempts (total attempts = retries + 1).
        exceptions: Exception types to catch and retry on.
        backoff: Base delay in seconds; attempt n waits backoff * n.

    Returns:
        Result of fn() on success.

    Raises:
        The last exception if all retries fail.
    """
    last_error: Exception | None = None
    for attempt in range(retries + 1):
        try:
            return fn()
        except exceptions as e:
            last_error = e
            if attempt < retries:
                logger.debug("Attempt %d failed (%s), retrying", attempt + 1, e)
                time.sleep(backoff * (attempt + 1))
    raise last_error  # type: ignore[misc]
