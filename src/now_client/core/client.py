import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx

from .errors import NowAPIError, NowHTTPError, NowParseError, normalize_error

DEFAULT_BASE_URL = "https://api.zeit.co"
DEFAULT_TIMEOUT_SECONDS = 30.0

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


@dataclass(frozen=True)
class RequestDescription:
    path: str
    method: str = "GET"
    body: Optional[Any] = None

    def __post_init__(self) -> None:
        method = (self.method or "").upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method!r}")
        object.__setattr__(self, "method", method)


class NowClient:
    """
    Shared HTTP client for the Now API.
    - Holds the bearer token, base URL and timeout for its lifetime
    - One request per call; no retries
    - Every failure surfaces as NowAPIError with a normalized ``error``
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        token = token or ""

        if not base_url:
            raise ValueError("base_url must be provided.")
        if not token:
            raise ValueError("token must be provided.")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("now_client.client")

        # Sent per request so an injected http client is authenticated too
        self._auth_headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._auth_headers,
            timeout=timeout_seconds,
        )

    @classmethod
    def from_env(cls, token: Optional[str] = None, **kwargs) -> "NowClient":
        from .config import create_client_from_env

        return create_client_from_env(token, **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "NowClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def execute(
        self,
        description: RequestDescription,
        selector: Optional[str] = None,
        *,
        tool: Optional[str] = None,
    ) -> Any:
        """
        Issue the described request.
        - Returns ``body[selector]`` when a selector is given, else the decoded body
        - Raises NowAPIError on unencodable bodies, transport errors, non-2xx
          responses and responses the selector cannot be applied to
        """
        method = description.method
        start = time.perf_counter()

        try:
            try:
                request = self.http.build_request(
                    method,
                    description.path,
                    json=description.body,
                    headers=self._auth_headers,
                )
            except (TypeError, ValueError) as exc:
                raise NowParseError(
                    f"Cannot encode body for {method} {description.path}: {exc}"
                ) from exc

            resp = await self.http.send(request)
            duration_ms = int((time.perf_counter() - start) * 1000)

            self.log.debug(
                "now.request",
                extra={
                    "tool": tool,
                    "method": method,
                    "path": description.path,
                    "status": resp.status_code,
                    "duration_ms": duration_ms,
                    "selector": selector,
                },
            )

            if resp.status_code < 200 or resp.status_code >= 300:
                raise self._to_http_error(resp, method=method)

            payload = self._decode(resp)
            return self._select(payload, selector, description)

        except (httpx.HTTPError, NowHTTPError, NowParseError) as exc:
            error = normalize_error(exc)
            self.log.debug(
                "now.request_failed",
                extra={
                    "tool": tool,
                    "method": method,
                    "path": description.path,
                    "status": getattr(exc, "status_code", None),
                },
            )
            raise NowAPIError(error, cause=exc) from exc

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        # 204 No Content and friends
        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError:
            return resp.text

    @staticmethod
    def _select(
        payload: Any, selector: Optional[str], description: RequestDescription
    ) -> Any:
        if not selector:
            return payload
        if not isinstance(payload, Mapping):
            raise NowParseError(
                f"Expected a JSON object from {description.method} "
                f"{description.path} to select {selector!r}, "
                f"got {type(payload).__name__}"
            )
        return payload.get(selector)

    @staticmethod
    def _to_http_error(resp: httpx.Response, *, method: str) -> NowHTTPError:
        url = str(resp.request.url)
        # Try JSON first; fall back to the text body.
        data: Any = None
        if resp.content:
            try:
                data = resp.json()
            except ValueError:
                data = resp.text or None

        return NowHTTPError(
            status_code=resp.status_code,
            method=method,
            url=url,
            data=data,
        )

    async def get(
        self,
        path: str,
        *,
        selector: Optional[str] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.execute(
            RequestDescription(path, "GET"), selector, tool=tool
        )

    async def post(
        self,
        path: str,
        *,
        body: Any = None,
        selector: Optional[str] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.execute(
            RequestDescription(path, "POST", body), selector, tool=tool
        )

    async def put(
        self,
        path: str,
        *,
        body: Any = None,
        selector: Optional[str] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.execute(
            RequestDescription(path, "PUT", body), selector, tool=tool
        )

    async def patch(
        self,
        path: str,
        *,
        body: Any = None,
        selector: Optional[str] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.execute(
            RequestDescription(path, "PATCH", body), selector, tool=tool
        )

    async def delete(
        self,
        path: str,
        *,
        selector: Optional[str] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.execute(
            RequestDescription(path, "DELETE"), selector, tool=tool
        )
