from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from ..errors import (
    MissingCredentialError,
    NetworkError,
    UpstreamPayloadError,
    UpstreamRequestError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: float = 10

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is configured to serve requests"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class BearerTokenProvider(Provider):
    """Provider that authenticates every call with a bearer token.

    Subclasses set ``credential_name`` (the environment variable operators must
    set) and ``label`` (used in error messages).
    """

    credential_name: str = "API key"
    label: str = "upstream API"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        timeout_s: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport

    async def ready(self) -> bool:
        return bool(self.api_key)

    def require_credential(self) -> None:
        """Raise ``MissingCredentialError`` when no key is configured."""

        if not self.api_key:
            raise MissingCredentialError(self.credential_name, f"{self.label} key not configured")

    def _headers(self) -> Dict[str, str]:
        self.require_credential()
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        headers = self._headers()
        timeout_s = timeout or self.timeout_s

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=timeout_s,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, params=params, json=json, headers=headers)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise UpstreamTimeoutError(f"Timed out after {timeout_s}s waiting for {self.label}") from exc
        except httpx.HTTPStatusError as exc:
            body = _response_body(exc.response)
            detail = body.get("message") if isinstance(body, dict) else None
            raise UpstreamStatusError(
                f"{self.label} error: {exc.response.status_code} - {detail or exc.response.reason_phrase}",
                status=exc.response.status_code,
                body=body,
            ) from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"Network error: Unable to reach {self.label}") from exc
        except httpx.HTTPError as exc:
            raise UpstreamRequestError(f"Request error: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamPayloadError(
                f"{self.label} returned a non-JSON body",
                status=response.status_code,
            ) from exc

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        return await self._request("GET", path, params=params, timeout=timeout)

    async def post(
        self,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        return await self._request("POST", path, json=json, timeout=timeout)


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
