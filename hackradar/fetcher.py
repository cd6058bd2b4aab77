"""
Text fetcher shared by feed, article and project page fetches.

Every outbound GET goes through fetch_text so timeouts, the User-Agent and
error wrapping are applied in one place.

requests applies its timeout to the connect and to each socket read, so a
server trickling bytes could hold a fetch open indefinitely. The body is
therefore streamed and the timeout is also enforced as a total deadline.
"""

import logging
import time
from typing import Optional

import requests

from hackradar.config import REQUEST_TIMEOUT, USER_AGENT
from hackradar.errors import FetchError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def fetch_text(url: str, timeout: Optional[float] = None) -> str:
    """
    Fetch a URL and return its body as text.

    Args:
        url: Absolute http(s) URL.
        timeout: Seconds before the request is abandoned, covering connect,
            headers and the whole body. Defaults to REQUEST_TIMEOUT.

    Returns:
        Response body decoded as text.

    Raises:
        FetchError: On connection errors, timeouts and non-2xx responses.
    """
    if timeout is None:
        timeout = REQUEST_TIMEOUT
    deadline = time.monotonic() + timeout

    try:
        response = requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
            stream=True,
        )
    except requests.Timeout:
        raise FetchError(url, f"timed out after {timeout}s")
    except requests.RequestException as e:
        raise FetchError(url, str(e))

    try:
        response.raise_for_status()

        chunks = []
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            chunks.append(chunk)
            if time.monotonic() > deadline:
                raise FetchError(url, f"timed out after {timeout}s")
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        raise FetchError(url, f"HTTP {status}")
    except requests.Timeout:
        raise FetchError(url, f"timed out after {timeout}s")
    except requests.RequestException as e:
        raise FetchError(url, str(e))
    finally:
        response.close()

    body = b"".join(chunks)
    logger.debug("[fetch] GET %s -> %s (%d bytes)", url, response.status_code, len(body))
    try:
        return body.decode(response.encoding or "utf-8", errors="replace")
    except LookupError:
        # Unknown charset in the Content-Type header
        return body.decode("utf-8", errors="replace")
