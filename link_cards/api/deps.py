from fastapi import Depends

from link_cards.config import Settings, get_settings
from link_cards.services import LinkPreviewService


async def get_preview_service(
    settings: Settings = Depends(get_settings),
) -> LinkPreviewService:
    return LinkPreviewService(
        api_key=settings.linkpreview_api_key,
        endpoint=settings.linkpreview_endpoint,
        timeout=settings.request_timeout,
    )
