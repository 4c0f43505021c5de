"""Retry logic for HTTP checks."""

import logging
import threading
import time
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import requests

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Transient failures: timeouts, resets, refused connections, DNS and TLS errors
TRANSIENT_EXCEPTIONS: tuple[type[BaseException], ...] = (requests.ConnectionError, requests.Timeout)


class RetryCancelled(Exception):
    """Raised when the run is cancelled while waiting to retry."""


def http_retry(
    max_attempts: int = 3,
    delay_secs: float = 0.5,
    backoff_multiplier: float = 2.0,
    exceptions: tuple[type[BaseException], ...] = TRANSIENT_EXCEPTIONS,
    cancel_event: threading.Event | None = None,
):
    """
    Decorator to retry an HTTP operation on transient failures.

    Only exceptions are retried; a response (whatever its status code) is a
    definitive answer and is returned as-is.

    Args:
        max_attempts: Maximum number of attempts (1 means no retry)
        delay_secs: Initial delay between retries in seconds
        backoff_multiplier: Multiplier for exponential backoff
        exceptions: Tuple of exception types to retry on
        cancel_event: Event that aborts the wait between attempts

    Example:
        @http_retry(max_attempts=3, delay_secs=0.5)
        def fetch(url):
            return session.head(url, timeout=5)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            attempt = 0
            current_delay = delay_secs

            while attempt < max_attempts:
                if cancel_event is not None and cancel_event.is_set():
                    raise RetryCancelled(f"cancelled before attempt {attempt + 1}")
                try:
                    return func(*args, **kwargs)
                except exceptions as exc:
                    attempt += 1
                    if attempt >= max_attempts:
                        logger.warning(
                            f"HTTP operation failed after {max_attempts} attempts: {func.__name__}: {exc}",
                            extra={"operation": func.__name__, "attempts": attempt},
                        )
                        raise

                    logger.warning(
                        f"HTTP operation failed (attempt {attempt}/{max_attempts}): {func.__name__}. "
                        f"Retrying in {current_delay}s...",
                        extra={"operation": func.__name__, "attempt": attempt, "delay": current_delay},
                    )

                    if cancel_event is not None:
                        if cancel_event.wait(current_delay):
                            raise RetryCancelled(f"cancelled after attempt {attempt}") from exc
                    else:
                        time.sleep(current_delay)
                    current_delay *= backoff_multiplier

            # Should never reach here, but for type safety
            raise RuntimeError(f"Unexpected exit from retry loop: {func.__name__}")

        return wrapper

    return decorator
