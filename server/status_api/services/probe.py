"""Outbound liveness probe."""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "navigator-status"


@dataclass(frozen=True)
class ProbeResult:
    reachable: bool
    status_code: int
    elapsed_ms: int


def normalize_url(url: str) -> str:
    """Prefix ``https://`` unless the URL already names http or https."""
    if url.startswith("http://") or url.startswith("https://"):
        return url
    return f"https://{url}"


def classify(status_code: int) -> bool:
    """Any answering server counts as online, including 401/403.

    404 and 5xx count as down, as does no response at all (code 0).
    """
    return 200 <= status_code < 500 and status_code != 404


class ProbeExecutor:
    """Performs a single GET against a URL and classifies the answer.

    TLS certificates are not verified by default. This is an intentional
    insecure default for monitoring trusted home-network services that
    commonly run with self-signed certificates.
    """

    def __init__(
        self,
        connect_timeout: float = 2.0,
        timeout: float = 3.0,
        verify_tls: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.connect_timeout = connect_timeout
        self.timeout = timeout
        self.verify_tls = verify_tls
        self._transport = transport

    async def _fetch_status(self, url: str) -> int:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout, connect=self.connect_timeout),
            verify=self.verify_tls,
            follow_redirects=False,
            transport=self._transport,
        ) as client:
            # Only the status line matters; the body is never read
            async with client.stream("GET", url, headers={"User-Agent": USER_AGENT}) as response:
                return response.status_code

    async def probe(self, url: str) -> ProbeResult:
        """Probe ``url`` once. Never raises on network failure."""
        full_url = normalize_url(url)
        start = time.perf_counter()
        try:
            code = await asyncio.wait_for(self._fetch_status(full_url), timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError, ValueError) as e:
            elapsed = int((time.perf_counter() - start) * 1000)
            logger.info("Probe failed for %s: %s", full_url, e.__class__.__name__)
            return ProbeResult(reachable=False, status_code=0, elapsed_ms=elapsed)

        elapsed = int((time.perf_counter() - start) * 1000)
        return ProbeResult(reachable=classify(code), status_code=code, elapsed_ms=elapsed)
