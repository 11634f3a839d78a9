# bssreport/rpc.py
"""
Unary RPC client for the business-support services.

Calls are plain JSON POSTs to `<endpoint>/<package.Service>/<Method>`.
Every request carries the caller's AuthContext; there is no shared or
global auth state.
"""
import logging
from typing import Any, Optional

import httpx

from bssreport.config import AuthContext, DEFAULT_TIMEOUT
from bssreport.exceptions import FetchError

LOG = logging.getLogger("bssreport.rpc")


class RpcClient:
    """One client per service endpoint. Use as a context manager."""

    def __init__(
        self,
        base_url: str,
        auth: AuthContext,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self.base_url,
            headers=auth.headers(),
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self._http.close()

    def call(self, service: str, method: str, payload: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Invoke `service/method` and return the decoded response message."""
        path = f"/{service}/{method}"
        LOG.debug("RPC %s%s %s", self.base_url, path, payload)
        try:
            r = self._http.post(path, json=payload or {})
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"{service}/{method} failed with HTTP {e.response.status_code}: {_error_message(e.response)}",
                service=service,
                method=method,
                status_code=e.response.status_code,
                body=e.response.text,
            ) from e
        except httpx.RequestError as e:
            raise FetchError(
                f"{service}/{method} request to {self.base_url} failed: {e}",
                service=service,
                method=method,
            ) from e

        try:
            data = r.json()
        except ValueError as e:
            raise FetchError(
                f"{service}/{method} returned a non-JSON body",
                service=service,
                method=method,
                status_code=r.status_code,
                body=r.text,
            ) from e
        if not isinstance(data, dict):
            raise FetchError(
                f"{service}/{method} returned {type(data).__name__}, expected an object",
                service=service,
                method=method,
                status_code=r.status_code,
                body=r.text,
            )
        return data


def _error_message(response: httpx.Response) -> str:
    # Error bodies look like {"code": "not_found", "message": "..."}
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(body, dict):
        code = body.get("code")
        message = body.get("message")
        if code and message:
            return f"{code}: {message}"
        if message or code:
            return str(message or code)
    return response.text.strip()
