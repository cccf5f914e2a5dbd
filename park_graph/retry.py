"""
Retry utilities for Neo4j operations.

Provides a decorator for resilient reads and writes against the park graph.
"""

import logging
from typing import Callable, TypeVar

from neo4j.exceptions import ServiceUnavailable, SessionExpired, TransientError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Common transient exceptions
TRANSIENT_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
)

NEO4J_TRANSIENT = (ServiceUnavailable, SessionExpired, TransientError)

NEO4J_MAX_ATTEMPTS = 3


def retry_neo4j(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator for retrying Neo4j operations with exponential backoff.

    Retries on:
    - Service unavailable / expired sessions
    - Transient errors (deadlocks, leader switches)
    - Connection errors and timeouts

    Example:
        @retry_neo4j
        def write_batch(session, batch):
            return session.run(query, batch=batch).consume()
    """
    return retry(
        stop=stop_after_attempt(NEO4J_MAX_ATTEMPTS),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
        retry=retry_if_exception_type(TRANSIENT_EXCEPTIONS + NEO4J_TRANSIENT),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )(func)
