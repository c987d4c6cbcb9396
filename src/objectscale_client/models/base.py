"""Base class for management API payload models."""

from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo


class APIModel(BaseModel):
    """Payload record exchanged with the management API.

    Field aliases carry the JSON name. The XML element name is the alias too,
    unless ``json_schema_extra={"xml": ...}`` overrides it; an XML name may be
    a ``parent>child`` path when the server wraps values in an extra element.
    Models sent or received as XML documents set ``xml_tag`` to their root
    element name.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    xml_tag: ClassVar[Optional[str]] = None


def xml_name(name: str, field: FieldInfo) -> str:
    """Return the XML element name (or ``a>b`` path) for a model field."""
    extra = field.json_schema_extra
    if isinstance(extra, dict) and isinstance(extra.get("xml"), str):
        return str(extra["xml"])
    return field.alias or name
