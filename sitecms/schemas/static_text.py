"""Module F: Static text schemas."""
from pydantic import BaseModel


class StaticTextUpdate(BaseModel):
    value: str


class StaticTextResponse(BaseModel):
    key: str
    value: str
