from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

PREVIEW_FIELDS = ("title", "description", "image", "url")


class PreviewRecord(BaseModel):
    """One stored link card. Every field is always a string."""

    title: str = ""
    description: str = ""
    image: str = ""
    url: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator(*PREVIEW_FIELDS, mode="before")
    @classmethod
    def _coerce_to_str(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class ProviderPreview(PreviewRecord):
    """Payload returned by the link preview provider."""


class LinkPreviewRequest(BaseModel):
    url: Optional[str] = Field(default=None)

    model_config = ConfigDict(extra="ignore")


class ErrorResponse(BaseModel):
    error: str


PreviewList = TypeAdapter(list[PreviewRecord])
