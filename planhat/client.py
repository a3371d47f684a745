"""
Planhat Client Implementation

Provides the client object and the single request path every resource
service goes through: auth headers, rate limiting, status mapping and
response decoding.
"""

import json
import logging
import threading
import time
from typing import Any, Callable, Mapping

import httpx

from .core.config import (
    DEFAULT_TIMEOUT_SECONDS,
    METRICS_URL,
    base_url_for_region,
    load_config,
)
from .core.errors import (
    ConfigError,
    DecodeError,
    RequestCancelledError,
    error_for_status,
)
from .core.ratelimit import DEFAULT_BURST, DEFAULT_RATE, RateLimiter
from .resources.assets import AssetService
from .resources.companies import CompanyService
from .resources.metrics import MetricsService
from .resources.users import UserService

logger = logging.getLogger(__name__)

# How often an in-flight request checks its cancel event
CANCEL_POLL_SECONDS = 0.01


class Client:
    """
    Client for the Planhat API.

    Features:
    - Bearer token authentication on every request
    - Client-side token bucket rate limiting shared by all calls
    - HTTP status mapping to typed errors
    - Per-call cancellation and deadlines
    """

    def __init__(
        self,
        api_key: str,
        region: str = "",
        http_client: httpx.Client | None = None,
        tenant_uuid: str | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        rate: float = DEFAULT_RATE,
        burst: int = DEFAULT_BURST,
        strict_not_found: bool = False,
    ):
        """
        Initialize the Planhat client.

        Args:
            api_key: Planhat API key (service account token)
            region: Cluster suffix, e.g. "eu3"; empty for the default cluster
            http_client: Optional httpx client (created if None)
            tenant_uuid: Tenant token, only needed to push metrics
            timeout_seconds: Request timeout for the default HTTP client
            rate: Sustained requests per second
            burst: Rate limiter bucket size
            strict_not_found: Raise NotFoundError for 404 instead of UnknownError

        Raises:
            ConfigError: If api_key is empty
        """
        if not api_key:
            raise ConfigError("apikey required")

        self.base_url = base_url_for_region(region)
        self.metrics_url = METRICS_URL
        self.api_key = api_key
        self.tenant_uuid = tenant_uuid
        self.timeout_seconds = timeout_seconds
        self.strict_not_found = strict_not_found

        self._limiter = RateLimiter(rate=rate, burst=burst)

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(timeout=timeout_seconds)
        else:
            self.http_client = http_client

        self.companies = CompanyService(self)
        self.assets = AssetService(self)
        self.users = UserService(self)
        self.metrics = MetricsService(self)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **kwargs) -> "Client":
        """
        Build a client from PLANHAT_* environment variables.

        Keyword arguments override or extend the loaded settings.
        """
        config = load_config(environ)
        options = {
            "region": config.region,
            "tenant_uuid": config.tenant_uuid,
            "timeout_seconds": config.timeout_seconds,
            "rate": config.rate,
            "burst": config.burst,
        }
        options.update(kwargs)
        return cls(config.api_key, **options)

    @property
    def limiter(self) -> RateLimiter:
        """The rate limiter shared by every call on this client."""
        return self._limiter

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
        return False

    def build_url(self, *segments: str) -> str:
        """
        Join path segments onto the base URL.

        Args:
            *segments: Path segments (e.g. "companies", "extid-abc")

        Returns:
            Full URL
        """
        base_url = self.base_url.rstrip("/")
        path = "/".join(segment.strip("/") for segment in segments)
        return f"{base_url}/{path}"

    def build_request(self, method: str, url: str, payload: Any = None) -> httpx.Request:
        """
        Build a request with its body already serialized.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            url: Full URL including any query string
            payload: JSON-ready body, or None for no body

        Returns:
            An unsent httpx.Request
        """
        content = None
        if payload is not None:
            content = json.dumps(payload).encode("utf-8")
        return self.http_client.build_request(method, url, content=content)

    def execute(
        self,
        request: httpx.Request,
        decode: Callable[[Any], Any] | None = None,
        *,
        cancel: threading.Event | None = None,
        timeout: float | None = None,
    ) -> Any:
        """
        Send a request through the shared rate limiter and decode the response.

        Args:
            request: Fully built request
            decode: Converts the parsed JSON body into the caller's record;
                None returns the parsed JSON as-is
            cancel: Event that aborts the call, whether waiting or in flight
            timeout: Deadline in seconds for the whole call

        Returns:
            The decoded body, or None when the API answers 201 Created

        Raises:
            APIError: On a status outside [200, 399]
            RequestCancelledError: If cancelled, or if the deadline passes
                before the request is sent
            DecodeError: If the body is not the expected JSON
            httpx.HTTPError: On transport failures, unchanged
        """
        request.headers["Authorization"] = f"Bearer {self.api_key}"
        request.headers["Accept"] = "application/json"
        request.headers["Content-Type"] = "application/json"

        started = time.monotonic()
        if not self._limiter.try_acquire():
            self._limiter.acquire(cancel=cancel, timeout=timeout)

        if cancel is not None and cancel.is_set():
            raise RequestCancelledError("request cancelled before sending")

        if timeout is not None:
            remaining = timeout - (time.monotonic() - started)
            if remaining <= 0:
                raise RequestCancelledError("call deadline passed before sending")
            request.extensions["timeout"] = httpx.Timeout(remaining).as_dict()

        logger.debug(f"{request.method} {request.url}")
        if cancel is None:
            response = self.http_client.send(request)
        else:
            response = self._send_cancellable(request, cancel)
        try:
            logger.debug(f"{request.method} {request.url} -> {response.status_code}")

            error = error_for_status(response.status_code, self.strict_not_found)
            if error is not None:
                raise error

            # Some creation endpoints return no usable body
            if response.status_code == httpx.codes.CREATED:
                return None

            try:
                data = json.loads(response.content)
            except ValueError as e:
                raise DecodeError(f"invalid JSON in response: {e}") from e

            if decode is None:
                return data
            return decode(data)
        finally:
            response.close()

    def _send_cancellable(self, request: httpx.Request, cancel: threading.Event) -> httpx.Response:
        """
        Send on a worker thread so that cancel can abandon an in-flight request.

        A sync httpx send cannot be interrupted, so on cancel the caller gets
        RequestCancelledError straight away and the worker closes the response
        whenever it eventually arrives.
        """
        lock = threading.Lock()
        done = threading.Event()
        outcome: dict[str, Any] = {}

        def run():
            try:
                response = self.http_client.send(request)
            except Exception as e:
                with lock:
                    outcome["error"] = e
            else:
                with lock:
                    if outcome.get("abandoned"):
                        response.close()
                    else:
                        outcome["response"] = response
            finally:
                done.set()

        worker = threading.Thread(target=run, name="planhat-send", daemon=True)
        worker.start()

        while not done.wait(CANCEL_POLL_SECONDS):
            if cancel.is_set():
                with lock:
                    if "response" not in outcome and "error" not in outcome:
                        outcome["abandoned"] = True
                        logger.debug(f"{request.method} {request.url} cancelled in flight")
                        raise RequestCancelledError("request cancelled while in flight")
                break

        if "error" in outcome:
            raise outcome["error"]
        return outcome["response"]
