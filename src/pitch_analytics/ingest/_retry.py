"""Retry policy for Baseball Savant HTTP calls."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx
from tenacity import RetryCallState, retry, retry_if_exception, stop_after_attempt, wait_exponential_jitter

logger = logging.getLogger(__name__)

_TOO_MANY_REQUESTS = 429


@dataclass(frozen=True)
class RetryPolicy:
    attempts: int = 3
    initial_wait: float = 1.0
    max_wait: float = 10.0


def is_retryable(error: BaseException) -> bool:
    """Connection failures, throttling and server errors; other client errors are final."""
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return status == _TOO_MANY_REQUESTS or status >= 500
    return False


def savant_retry(label: str, policy: RetryPolicy | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap a request function with jittered exponential backoff.

    The last error is re-raised once ``policy.attempts`` run out, so callers
    still see the ``httpx`` exception.
    """
    policy = policy or RetryPolicy()

    def _log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning("Retrying %s (attempt %d of %d): %s", label, retry_state.attempt_number, policy.attempts, error)

    return retry(
        stop=stop_after_attempt(policy.attempts),
        wait=wait_exponential_jitter(initial=policy.initial_wait, max=policy.max_wait),
        retry=retry_if_exception(is_retryable),
        before_sleep=_log_retry,
        reraise=True,
    )
