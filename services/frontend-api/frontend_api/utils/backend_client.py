"""
Backend API HTTP Client
Client for calling the Backend API from the Frontend API

Every call resolves to one of three outcomes instead of raising:
- OriginSuccess: the Backend API answered with a 2xx status
- OriginError: the Backend API answered with any other status
- TransportFailure: no answer (timeout, connection refused, DNS failure, ...)
"""

from dataclasses import dataclass
from typing import Optional, Union

import httpx
import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OriginSuccess:
    status_code: int
    body: str


@dataclass(frozen=True)
class OriginError:
    status_code: int
    body: str


@dataclass(frozen=True)
class TransportFailure:
    message: str


BackendResult = Union[OriginSuccess, OriginError, TransportFailure]


def describe_exception(exc: BaseException) -> str:
    """Non-empty, human readable description of a transport exception"""
    return str(exc) or exc.__class__.__name__


class BackendServiceClient:
    """
    HTTP client for Backend API calls.

    Uses a shared AsyncClient bound to the Backend API base URL.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not initialized, falls back to per-request client
    """

    # Timeout settings
    REQUEST_TIMEOUT = 30.0        # Whole request, no retries

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = self.REQUEST_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True
        )

    async def start(self):
        """
        Initialize the shared HTTP client.
        Call this during FastAPI app startup via lifespan.
        """
        if self._client is not None:
            logger.warning("BackendServiceClient already started")
            return

        self._client = self._build_client()
        logger.info("BackendServiceClient started", base_url=self.base_url, timeout=self.timeout)

    async def stop(self):
        """
        Close the HTTP client and release resources.
        Call this during FastAPI app shutdown via lifespan.
        """
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("BackendServiceClient stopped")

    async def _send(self, path: str) -> httpx.Response:
        if self._client:
            return await self._client.get(path)

        logger.warning("BackendServiceClient not initialized, using per-request client")
        async with self._build_client() as client:
            return await client.get(path)

    async def get(self, path: str) -> BackendResult:
        """GET a Backend API path and classify the outcome"""
        try:
            response = await self._send(path)
        except httpx.TimeoutException as e:
            logger.error("Timed out calling backend API", path=path, timeout=self.timeout, error=describe_exception(e))
            return TransportFailure(message=describe_exception(e))
        except Exception as e:
            logger.error("Error calling backend API", path=path, error=describe_exception(e), exc_info=e)
            return TransportFailure(message=describe_exception(e))

        if response.is_success:
            return OriginSuccess(status_code=response.status_code, body=response.text)

        logger.warning("Backend API returned an error", path=path, status_code=response.status_code)
        return OriginError(status_code=response.status_code, body=response.text)
