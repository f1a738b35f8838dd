"""
Retry logic with exponential backoff for fetching remote JSON documents.
"""
import logging
from typing import Any, Callable

import requests
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = (429, 500, 502, 503, 504)


def is_retryable_error(exception: BaseException) -> bool:
    """Check if an exception is worth retrying."""
    if isinstance(exception, requests.exceptions.HTTPError):
        response = exception.response
        status_code = response.status_code if response is not None else None
        # Retry on 429 (rate limit) and 5xx (server errors)
        return status_code in RETRYABLE_STATUS_CODES
    # Retry on connection errors, timeouts
    return isinstance(exception, (
        requests.exceptions.ConnectionError,
        requests.exceptions.Timeout,
        requests.exceptions.ChunkedEncodingError
    ))


def _log_retry(retry_state) -> None:
    exception = retry_state.outcome.exception()
    name = getattr(retry_state.fn, "__name__", "request")
    logger.warning(
        f"Retryable error in {name} "
        f"(attempt {retry_state.attempt_number}): {exception}. Retrying..."
    )


def retry_with_backoff(
    max_retries: int = 3,
    initial_delay: float = 1.0,
    max_delay: float = 30.0,
    exponential_base: float = 2.0
):
    """
    Decorator for retrying functions with exponential backoff.

    Only errors accepted by ``is_retryable_error`` are retried; anything
    else propagates on the first attempt.

    Args:
        max_retries: Maximum number of retry attempts
        initial_delay: Initial delay in seconds
        max_delay: Maximum delay in seconds
        exponential_base: Base for exponential backoff
    """
    def decorator(func: Callable) -> Callable:
        return retry(
            stop=stop_after_attempt(max_retries + 1),
            wait=wait_exponential(
                multiplier=initial_delay,
                max=max_delay,
                exp_base=exponential_base
            ),
            retry=retry_if_exception(is_retryable_error),
            before_sleep=_log_retry,
            reraise=True
        )(func)
    return decorator


def call_with_backoff(func: Callable[..., Any], *args, max_retries: int = 3,
                      initial_delay: float = 1.0, **kwargs) -> Any:
    """Call ``func`` once under ``retry_with_backoff`` with runtime settings."""
    wrapped = retry_with_backoff(max_retries=max_retries, initial_delay=initial_delay)(func)
    return wrapped(*args, **kwargs)
