from link_cards.schemas.preview import (
    PREVIEW_FIELDS,
    ErrorResponse,
    LinkPreviewRequest,
    PreviewList,
    PreviewRecord,
    ProviderPreview,
)

__all__ = [
    "PREVIEW_FIELDS",
    "ErrorResponse",
    "LinkPreviewRequest",
    "PreviewList",
    "PreviewRecord",
    "ProviderPreview",
]
