"""JSON-RPC over HTTP provider."""

import asyncio
from itertools import count
from typing import Any

import aiohttp
from loguru import logger

from zilkit.config import get_settings
from zilkit.exceptions import (
    ProviderConnectionError,
    ProviderTimeoutError,
    RPCError,
    TransportError,
)
from zilkit.interfaces.provider import BaseProvider


class HTTPProvider(BaseProvider):
    """Async JSON-RPC 2.0 client for a node's HTTP endpoint.

    Each call is a single attempt; retry policy is left to the caller.

    Usage:
        async with HTTPProvider("http://127.0.0.1:5555") as provider:
            balance = await provider.get_balance(address)
    """

    JSONRPC_VERSION = "2.0"

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            url: Node RPC endpoint. Defaults to ProviderConfig.rpc_url.
            timeout: Request timeout in seconds. Defaults to ProviderConfig.timeout.
        """
        config = get_settings().provider
        self._url = url or config.rpc_url
        self._timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else config.timeout
        )
        self._session: aiohttp.ClientSession | None = None
        self._ids = count(1)

    @property
    def url(self) -> str:
        """Get the node endpoint."""
        return self._url

    async def __aenter__(self) -> "HTTPProvider":
        """Async context manager entry."""
        self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session exists, creating if needed."""
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    def _build_request(self, method: str, params: list[Any]) -> dict[str, Any]:
        """Build a JSON-RPC request envelope."""
        return {
            "id": str(next(self._ids)),
            "jsonrpc": self.JSONRPC_VERSION,
            "method": method,
            "params": params,
        }

    async def send(self, method: str, params: list[Any]) -> Any:
        """Send a JSON-RPC request and return its ``result`` member.

        Raises:
            RPCError: If the node answers with an error object.
            ProviderConnectionError: If the node cannot be reached.
            ProviderTimeoutError: If the request times out.
            TransportError: On non-200 status or a malformed response body.
        """
        session = await self._ensure_session()
        payload = self._build_request(method, params)
        logger.debug("RPC {} -> {} params={}", method, self._url, params)

        try:
            async with session.post(self._url, json=payload) as response:
                if response.status != 200:
                    text = await response.text()
                    raise TransportError(
                        f"HTTP error {response.status}: {text[:200]}",
                        status_code=response.status,
                    )
                body = await response.json(content_type=None)

        except asyncio.TimeoutError as e:
            logger.warning("RPC {} timed out", method)
            raise ProviderTimeoutError() from e

        except aiohttp.ClientError as e:
            logger.warning("RPC {} connection error: {}", method, e)
            raise ProviderConnectionError(f"Connection error: {e}") from e

        except ValueError as e:
            raise TransportError(f"Invalid JSON in response to {method}: {e}") from e

        return self._parse_response(method, body)

    @staticmethod
    def _parse_response(method: str, body: Any) -> Any:
        """Extract ``result`` from a JSON-RPC response body."""
        if not isinstance(body, dict):
            raise TransportError(f"Malformed response to {method}: {body!r}")

        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                message = str(error.get("message", "Unknown RPC error"))
                code = error.get("code")
            else:
                message, code = str(error), None
            logger.warning("RPC {} failed: {} (code={})", method, message, code)
            raise RPCError(message, code=code)

        if "result" not in body:
            raise TransportError(f"Response to {method} has no result")

        return body["result"]
