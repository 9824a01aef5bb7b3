"""Classification of endpoint call outcomes.

Every facade call ends here. ``unpack`` turns the (decoded body, response,
transport error) triple of an endpoint call into either the decoded payload
or one exception from ``depscian.exceptions``.
"""

from __future__ import annotations

from typing import TypeVar

import httpx

from depscian.api.endpoints import ApiResponse
from depscian.exceptions import ClientExecutionError, NotFoundError, StatusError

T = TypeVar("T")


def unpack(
    parsed: T | None,
    response: ApiResponse | httpx.Response | None,
    error: BaseException | None = None,
) -> T:
    """Return the decoded payload of an endpoint call or raise.

    First match wins:
    1. transport error -> ClientExecutionError chained from ``error``
    2. HTTP 404 -> NotFoundError, whatever the body
    3. any other status outside [200, 300) -> StatusError
    4. no decoded body -> NotFoundError
    5. otherwise the decoded body

    Note that rule 4 also covers a success body that failed to decode, so a
    schema mismatch looks like a missing resource to the caller.

    Args:
        parsed: Decoded response body, or None if absent or undecodable.
        response: Response envelope or raw httpx response, or None if no
            response was obtained.
        error: Exception raised while executing the request, if any.

    Returns:
        The decoded payload.

    Raises:
        ClientExecutionError: If the request failed before a status was obtained.
        NotFoundError: If the resource is missing or the body is unusable.
        StatusError: If the API answered with any other non-2xx status.
    """
    if error is not None:
        raise ClientExecutionError(f"client execution error: {error}") from error
    if response is None:
        raise ClientExecutionError("client execution error: no response received")

    status_code = response.status_code
    if status_code == 404:
        raise NotFoundError(status_code=status_code)
    if not 200 <= status_code < 300:
        status_text = getattr(response, "status_text", None) or getattr(
            response, "reason_phrase", ""
        )
        raise StatusError(
            f"unexpected status: {status_code} {status_text}",
            status_code=status_code,
            status_text=status_text,
        )
    if parsed is None:
        raise NotFoundError(status_code=status_code)
    return parsed
