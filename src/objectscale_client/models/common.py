"""Small records shared by several resource payloads."""

from typing import List, Optional

from pydantic import Field

from .base import APIModel


class Link(APIModel):
    """Hyperlink to a related management resource."""

    href: Optional[str] = None
    rel: Optional[str] = None


class Tag(APIModel):
    key: str = Field(alias="Key")
    value: str = Field(alias="Value")


class TagSet(APIModel):
    tags: List[Tag] = Field(default_factory=list, alias="Tag")
