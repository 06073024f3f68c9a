from __future__ import annotations

import math
import time
from typing import Any, Callable

import requests

from maskgen.errors import RequestExhausted

DEFAULT_MAX_ATTEMPTS = 4
BACKOFF_BASE_MS = 500
BACKOFF_CAP_MS = 10_000
MAX_RETRY_AFTER_SECONDS = 3600.0


def is_retryable_status(status: int) -> bool:
    return status == 429 or status >= 500


def _parse_retry_after(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        seconds = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return min(seconds, MAX_RETRY_AFTER_SECONDS)


def compute_wait_ms(attempt: int, retry_after: str | None = None) -> int:
    """
    Wait before the attempt after `attempt` (1-based).

    A usable Retry-After header (seconds) wins over exponential backoff.
    """
    seconds = _parse_retry_after(retry_after)
    if seconds is not None:
        return int(math.ceil(seconds * 1000))
    return min(BACKOFF_CAP_MS, BACKOFF_BASE_MS * 2 ** (max(1, attempt) - 1))


def _body_text(response: requests.Response) -> str:
    try:
        return response.text or ""
    except Exception:
        return ""


def request_with_retry(
    session: requests.Session,
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
    json_body: Any | None = None,
    timeout: float | tuple[float, float] | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    is_retryable: Callable[[int], bool] = is_retryable_status,
    sleep: Callable[[float], None] = time.sleep,
) -> requests.Response:
    attempts = max(1, int(max_attempts))
    last_status = 0
    last_body = ""
    for attempt in range(1, attempts + 1):
        response = session.request(
            method,
            url,
            headers=headers,
            params=params,
            json=json_body,
            timeout=timeout,
        )
        if response.ok or not is_retryable(response.status_code):
            return response

        last_status = response.status_code
        last_body = _body_text(response)
        if attempt >= attempts:
            break
        wait_ms = compute_wait_ms(attempt, response.headers.get("retry-after"))
        print(
            f"[http_retry] retry status={last_status} attempt={attempt}/{attempts} "
            f"wait_ms={wait_ms} url={url}"
        )
        sleep(wait_ms / 1000.0)

    raise RequestExhausted(url=url, status=last_status, body=last_body, attempts=attempts)
