"""Module C: Content block schemas."""
from pydantic import field_validator

from sitecms.schemas.common import CamelModel


class ContentBlockCreate(CamelModel):
    page: str = ""
    text: str = ""
    image_url: str | None = None
    alt_text: str | None = None
    position: int | None = None


class ContentBlockUpdate(CamelModel):
    page: str | None = None
    text: str | None = None
    image_url: str | None = None
    alt_text: str | None = None
    position: int | None = None

    @field_validator("page", "text", "position")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v
