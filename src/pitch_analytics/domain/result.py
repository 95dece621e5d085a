import logging
from dataclasses import dataclass

from pitch_analytics.domain.errors import FeedFetchError


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E


type Result[T, E] = Ok[T] | Err[E]

type FeedResult[T] = Ok[T] | Err[FeedFetchError]


def value_or_warn[T](result: FeedResult[T], log: logging.Logger, msg: str, *args: object) -> T | None:
    """Unwrap a feed result, treating a failed fetch as absent data.

    On failure ``msg`` is logged as a warning with ``args`` followed by the
    error message, so ``msg`` carries one more placeholder than ``args``.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            log.warning(msg, *args, error.message)
            return None
