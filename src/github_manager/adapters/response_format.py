# src/github_manager/adapters/response_format.py
"""
Turns a raw response body into the representation the caller asked for.

Every manager method takes a ReturnFormat and funnels the body through
one of the functions below, so this is the only place where response
text is parsed.
"""

import json
from enum import Enum
from typing import Any, List, Optional, Type, Union

from github_manager.models.base import DecodingError, FieldReader, decode_items
from github_manager.models.collections import GitHubList


class ReturnFormat(Enum):
    STRING = 'string'
    JSON = 'json'
    LIBRARY_OBJECT = 'library_object'


def _check_format(fmt: Any) -> ReturnFormat:
    if not isinstance(fmt, ReturnFormat):
        raise ValueError(f"Unsupported return format: {fmt!r}")
    return fmt


def parse_json(raw_text: str) -> Any:
    """
    Parse a response body into plain dicts and lists.

    Raises:
        DecodingError: If the body is not valid JSON
    """
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise DecodingError(f"Response body is not valid JSON: {e}") from e


def materialize(raw_text: str, fmt: ReturnFormat, factory: Any) -> Any:
    """
    Materialize a single-entity response.

    Args:
        raw_text: Response body
        fmt: Requested representation
        factory: Entity class exposing from_json

    Returns:
        The body unchanged for STRING, the parsed JSON for JSON, or a
        factory instance for LIBRARY_OBJECT

    Raises:
        DecodingError: If the body cannot be decoded
        ValueError: If fmt is not a ReturnFormat
    """
    fmt = _check_format(fmt)
    if fmt is ReturnFormat.STRING:
        return raw_text
    data = parse_json(raw_text)
    if fmt is ReturnFormat.JSON:
        return data
    return factory.from_json(data)


def materialize_list(
    raw_text: str,
    fmt: ReturnFormat,
    factory: Any,
    items_key: Optional[str] = None
) -> Union[str, Any, List[Any]]:
    """
    Materialize a list response, keeping GitHub's order.

    The entities are either the top-level array or, when items_key is
    given, the array stored under that key of a top-level object. Only
    LIBRARY_OBJECT unwraps items_key; JSON returns the payload as parsed.
    """
    fmt = _check_format(fmt)
    if fmt is ReturnFormat.STRING:
        return raw_text
    data = parse_json(raw_text)
    if fmt is ReturnFormat.JSON:
        return data
    if items_key is not None:
        data = FieldReader(data).get_array(items_key)
    if not isinstance(data, list):
        raise DecodingError(f"Expected a JSON array, got {type(data).__name__}")
    return decode_items(data, factory)


def materialize_collection(
    raw_text: str,
    fmt: ReturnFormat,
    factory: Any,
    items_key: str = 'items',
    collection_cls: Type[GitHubList] = GitHubList
) -> Union[str, Any, GitHubList]:
    """Materialize a ``{"total_count": N, "<items_key>": [...]}`` response."""
    fmt = _check_format(fmt)
    if fmt is ReturnFormat.STRING:
        return raw_text
    data = parse_json(raw_text)
    if fmt is ReturnFormat.JSON:
        return data
    return collection_cls.from_json(data, factory, items_key)
