import logging
from typing import Optional

import httpx

from link_cards.errors import UpstreamError, ValidationError
from link_cards.schemas import PreviewRecord, ProviderPreview

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Linkpreview-Api-Key"


class LinkPreviewService:
    """Fetches link metadata from the external link preview provider.

    The API key stays on the server. Provider failures are logged here and
    surface to callers only as ``UpstreamError`` with no detail attached.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = "https://api.linkpreview.net",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    async def extract(self, url: Optional[str]) -> PreviewRecord:
        if not url:
            raise ValidationError("URL is required")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.endpoint,
                    headers={API_KEY_HEADER: self.api_key},
                    json={"q": url},
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Link preview provider returned %s for %s",
                exc.response.status_code,
                url,
            )
            raise UpstreamError("Failed to fetch link preview") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.exception("Error fetching link preview for %s", url)
            raise UpstreamError("Failed to fetch link preview") from exc

        if not isinstance(payload, dict):
            logger.warning("Link preview provider sent a non-object body for %s", url)
            raise UpstreamError("Failed to fetch link preview")

        preview = ProviderPreview.model_validate(payload)
        return PreviewRecord(
            title=preview.title,
            description=preview.description,
            image=preview.image,
            url=preview.url or url,
        )
