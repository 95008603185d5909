from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests
from requests import Response, Session

from backoff_policy.models.result import Ko, Ok
from backoff_policy.policy import BackoffPolicy

if TYPE_CHECKING:
    from backoff_policy.models.clock import Clock
    from backoff_policy.models.result import Result

logger = logging.getLogger(__name__)

RETRIABLE_STATUS_CODES = frozenset({408, 425, 429, 500, 502, 503, 504})


def retriable_response(result: Result[Response, requests.RequestException]) -> bool:
    match result:
        case Ok(res):
            return res.status_code in RETRIABLE_STATUS_CODES
        case Ko(requests.exceptions.Timeout() | requests.exceptions.ConnectionError()):
            return True
        case _:
            return False


def request(
    method: str,
    url: str,
    policy: BackoffPolicy[Response, requests.RequestException] | None = None,
    session: Session | None = None,
    clock: Clock | None = None,
    **kwargs: Any,
) -> Result[Response, requests.RequestException]:
    """Send an http request, retrying transient failures.

    Network errors are returned as ``Ko`` rather than raised. Responses are
    returned as ``Ok`` whatever their status code; only the status codes in
    ``RETRIABLE_STATUS_CODES`` are retried by the default policy.
    """
    policy = policy or BackoffPolicy.default(retriable_response)

    def send(s: Session) -> Result[Response, requests.RequestException]:
        try:
            return Ok(s.request(method, url, **kwargs))
        except requests.exceptions.RequestException as e:
            logger.debug("Request %s %s failed: %s", method, url, e)
            return Ko(e)

    if session is not None:
        return policy.retry(lambda: send(session), clock)

    with Session() as s:
        return policy.retry(lambda: send(s), clock)
