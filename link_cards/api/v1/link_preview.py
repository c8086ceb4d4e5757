from typing import Annotated

from fastapi import APIRouter, Depends

from link_cards.api.deps import get_preview_service
from link_cards.schemas import ErrorResponse, LinkPreviewRequest, PreviewRecord
from link_cards.services import LinkPreviewService

router = APIRouter(prefix="/link-preview", tags=["link-preview"])


@router.post(
    "",
    response_model=PreviewRecord,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def fetch_link_preview(
    payload: LinkPreviewRequest,
    service: Annotated[LinkPreviewService, Depends(get_preview_service)],
) -> PreviewRecord:
    """Fetch title, description and image for a URL from the provider."""
    return await service.extract(payload.url)
