"""Base gateway with common HTTP plumbing for the records API."""

from typing import Any

import httpx

from src.workflow_sync.core.logging import get_logger

logger = get_logger(__name__)


class GatewayError(Exception):
    """A remote call failed (transport error, timeout or non-2xx status).

    Not-found lookups are not errors: gateways return None for them.
    """

    def __init__(self, message: str, *, status_code: int | None = None, path: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.path = path


def unwrap(payload: Any) -> Any:
    """Strip the {"data": ...} envelope some endpoints wrap their results in."""
    if isinstance(payload, dict) and payload.get("data") is not None:
        return payload["data"]
    return payload


class BaseGateway:
    """Base gateway providing authenticated JSON calls.

    Gateways handle transport only. Deciding whether a failure is fatal
    or isolated is done in the service layer.
    """

    def __init__(self, client: httpx.AsyncClient, authorization: str | None = None):
        self.client = client
        self.authorization = authorization

    def _headers(self) -> dict[str, str]:
        if self.authorization:
            return {"Authorization": self.authorization}
        return {}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        allow_not_found: bool = False,
        **kwargs: Any,
    ) -> Any:
        """Send a request and return the unwrapped JSON body.

        Args:
            method: HTTP method
            path: Path relative to the records API base URL
            allow_not_found: Return None on 404 instead of raising
            **kwargs: Passed to httpx (json, params, data, files)

        Returns:
            The decoded body with any data envelope removed, or None for
            empty bodies and tolerated 404s.

        Raises:
            GatewayError: On transport failure, timeout or non-2xx status
        """
        try:
            response = await self.client.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            raise GatewayError(f"{method} {path} failed: {e}", path=path) from e

        if response.status_code == httpx.codes.NOT_FOUND and allow_not_found:
            logger.debug("Record not found", method=method, path=path)
            return None

        if response.is_error:
            raise GatewayError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                path=path,
            )

        if not response.content:
            return None
        try:
            return unwrap(response.json())
        except ValueError as e:
            raise GatewayError(f"{method} {path} returned invalid JSON", path=path) from e
