import logging
from typing import Optional

import httpx

from link_cards.errors import UpstreamError
from link_cards.schemas import PreviewRecord

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Failed to fetch link preview"


class GatewayClient:
    """Calls ``POST /api/link-preview`` on the gateway."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_preview(self, url: str) -> PreviewRecord:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post("/api/link-preview", json={"url": url})
        except httpx.HTTPError as exc:
            raise UpstreamError(DEFAULT_ERROR) from exc

        if response.is_error:
            raise UpstreamError(_error_message(response))

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(DEFAULT_ERROR) from exc
        if not isinstance(payload, dict):
            raise UpstreamError(DEFAULT_ERROR)
        return PreviewRecord.model_validate(payload)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_ERROR
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return DEFAULT_ERROR
