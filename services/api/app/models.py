from dataclasses import dataclass
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal, Union, get_args

ContentType = Literal["url", "youtube", "text"]

CONTENT_TYPES: tuple[str, ...] = get_args(ContentType)


class SummarizeRequest(BaseModel):
    # Checked field by field in the handler so errors come back in a fixed order.
    model_config = ConfigDict(populate_by_name=True)

    content: str | None = None
    content_type: str | None = Field(None, alias="contentType")
    output_format: str | None = Field(None, alias="outputFormat")


class SummarizeResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str
    format: str
    content_length: int = Field(..., alias="contentLength")
    truncated: bool
    hashtags: str | None = None


class Draft(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    content: str
    output_format: str = Field(..., alias="outputFormat")
    summary: str | None = None
    updated_at: int = Field(..., alias="updatedAt")


class DraftView(Draft):
    updated_label: str = Field(..., alias="updatedLabel")


class CreateDraftRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str
    output_format: str = Field(..., alias="outputFormat")
    summary: str | None = None


class UpdateDraftRequest(BaseModel):
    # Only fields present in the body are applied; "summary": null clears it.
    model_config = ConfigDict(populate_by_name=True)

    content: str | None = None
    output_format: str | None = Field(None, alias="outputFormat")
    summary: str | None = None

    @field_validator("content", "output_format")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


@dataclass(frozen=True)
class TextSource:
    text: str


@dataclass(frozen=True)
class WebSource:
    url: str


@dataclass(frozen=True)
class YoutubeSource:
    url: str
    video_id: str


Source = Union[TextSource, WebSource, YoutubeSource]
