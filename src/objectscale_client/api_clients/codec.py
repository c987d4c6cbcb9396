"""XML and JSON payload codec for management API calls.

The wire format is always chosen explicitly by the caller through
ContentType; response headers are never consulted.
"""

import json
import logging
import types
import typing
import xml.etree.ElementTree as ET
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..models.base import xml_name
from .exceptions import DecodeError, EncodeError
from .request import ContentType

logger = logging.getLogger(__name__)

_MISSING = object()


def encode(value: Any, content_type: ContentType) -> bytes:
    """Serialize a request body.

    Args:
        value: Model instance, raw ``str``/``bytes`` document, or for JSON any
            JSON-serializable value
        content_type: Wire format

    Returns:
        Encoded body

    Raises:
        EncodeError: If the value cannot be represented in the format
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")

    if content_type == ContentType.JSON:
        try:
            if isinstance(value, BaseModel):
                return value.model_dump_json(by_alias=True, exclude_none=True).encode(
                    "utf-8"
                )
            return json.dumps(value).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodeError(f"Cannot encode {type(value).__name__} as JSON: {e}")

    if content_type == ContentType.XML:
        if not isinstance(value, BaseModel):
            raise EncodeError(
                f"Cannot encode {type(value).__name__} as XML: expected a model"
            )
        tag = getattr(type(value), "xml_tag", None)
        if not tag:
            raise EncodeError(
                f"Cannot encode {type(value).__name__} as XML: no root element name"
            )
        return ET.tostring(_model_to_element(value, tag), encoding="utf-8")

    raise EncodeError(f"Unsupported content type: {content_type}")


def decode(
    data: bytes,
    content_type: ContentType,
    target: Any,
    allow_empty: bool = False,
) -> Any:
    """Deserialize a response body into ``target``.

    Args:
        data: Raw response body
        content_type: Wire format
        target: Model class, ``str``/``bytes`` for the raw body, or for JSON
            any type pydantic can validate
        allow_empty: Return None for an empty body instead of failing

    Returns:
        Decoded value

    Raises:
        DecodeError: If the body is empty, malformed, or does not match target
    """
    if not data or not data.strip():
        if allow_empty:
            return None
        raise DecodeError("Empty response body")

    if target is bytes:
        return data
    if target is str:
        return data.decode("utf-8", errors="replace")

    if content_type == ContentType.JSON:
        try:
            if isinstance(target, type) and issubclass(target, BaseModel):
                return target.model_validate_json(data)
            return TypeAdapter(target).validate_json(data)
        except ValidationError as e:
            raise DecodeError(f"Response does not match {_type_name(target)}: {e}")

    if content_type == ContentType.XML:
        if not (isinstance(target, type) and issubclass(target, BaseModel)):
            raise DecodeError(f"Cannot decode XML into {_type_name(target)}")
        root = _parse_xml(data)
        expected = getattr(target, "xml_tag", None)
        if expected and root.tag != expected:
            raise DecodeError(
                f"Unexpected root element <{root.tag}>, expected <{expected}>"
            )
        try:
            return target.model_validate(_element_to_dict(root, target))
        except ValidationError as e:
            raise DecodeError(f"Response does not match {_type_name(target)}: {e}")

    raise DecodeError(f"Unsupported content type: {content_type}")


def decode_error_payload(
    data: bytes, content_type: ContentType
) -> Optional[Dict[str, Any]]:
    """Extract a structured error document from a failure response body.

    The requested format is tried first, then the other one, since some
    endpoints answer errors in a format different from the request.

    Returns:
        Mapping of error fields, or None if the body holds no structured error
    """
    if not data or not data.strip():
        return None
    order = (
        (_json_error, _xml_error)
        if content_type == ContentType.JSON
        else (_xml_error, _json_error)
    )
    for parser in order:
        payload = parser(data)
        if payload:
            return payload
    return None


def _json_error(data: bytes) -> Optional[Dict[str, Any]]:
    try:
        payload = json.loads(data)
    except (ValueError, UnicodeDecodeError):
        return None
    if isinstance(payload, dict) and payload:
        return payload
    return None


def _xml_error(data: bytes) -> Optional[Dict[str, Any]]:
    try:
        root = ET.fromstring(data)
    except ET.ParseError:
        return None
    if root.tag != "error":
        return None
    return {child.tag: (child.text or "") for child in root}


def _parse_xml(data: bytes) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise DecodeError(f"Malformed XML response: {e}")


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


def _unwrap(annotation: Any) -> Tuple[Any, bool]:
    """Strip Optional from an annotation and report whether it is a list."""
    origin = typing.get_origin(annotation)
    union_types: Tuple[Any, ...] = (Union,)
    if hasattr(types, "UnionType"):
        union_types += (types.UnionType,)
    if origin in union_types:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _unwrap(args[0])
        return annotation, False
    if origin in (list, List):
        args = typing.get_args(annotation)
        return (args[0] if args else Any), True
    return annotation, False


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _element_value(element: ET.Element, annotation: Any) -> Any:
    if _is_model(annotation):
        return _element_to_dict(element, annotation)
    text = element.text or ""
    if annotation is str:
        return text
    text = text.strip()
    if not text:
        return _MISSING
    return text


def _element_to_dict(element: ET.Element, model: Type[BaseModel]) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for name, field in model.model_fields.items():
        path = xml_name(name, field).replace(">", "/")
        annotation, is_list = _unwrap(field.annotation)
        nodes = element.findall(path)
        if not nodes:
            continue
        if is_list:
            values = [_element_value(node, annotation) for node in nodes]
            data[name] = [value for value in values if value is not _MISSING]
        else:
            value = _element_value(nodes[0], annotation)
            if value is not _MISSING:
                data[name] = value
    return data


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _model_to_element(model: BaseModel, tag: str) -> ET.Element:
    element = ET.Element(tag)
    for name, field in type(model).model_fields.items():
        value = getattr(model, name)
        if value is None:
            continue
        path = xml_name(name, field).split(">")
        parent = element
        for part in path[:-1]:
            child = parent.find(part)
            if child is None:
                child = ET.SubElement(parent, part)
            parent = child
        items = value if isinstance(value, list) else [value]
        for item in items:
            if isinstance(item, BaseModel):
                parent.append(_model_to_element(item, path[-1]))
            else:
                ET.SubElement(parent, path[-1]).text = _scalar_text(item)
    return element
