"""
================================================================================
JSON Helpers
================================================================================

Serialization and parsing utilities used by the API clients and tests.

Features:
    - Typed deserialization through pydantic TypeAdapter
    - Model-aware serialization (camelCase aliases, JSON-safe values)
    - Dot/index path lookup ("topProducts[0].name")
    - JSON file loading with error logging

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from loguru import logger
from pydantic import BaseModel, TypeAdapter


T = TypeVar("T")

_PATH_TOKEN = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def to_jsonable(payload: Any) -> Any:
    """
    Convert a payload into JSON-compatible primitives.

    Pydantic models are dumped by alias with None fields omitted;
    lists and dicts are converted element by element.
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, dict):
        return {key: to_jsonable(value) for key, value in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [to_jsonable(item) for item in payload]
    return payload


def serialize(payload: Any, indented: bool = True) -> str:
    """Serialize a model or plain structure to a JSON string."""
    return json.dumps(
        to_jsonable(payload),
        indent=2 if indented else None,
        ensure_ascii=False,
        default=str,
    )


def deserialize(json_text: Union[str, bytes], target: Type[T]) -> T:
    """
    Deserialize a JSON string into ``target``.

    Raises:
        TypeError: When json_text is None
        ValueError: When json_text is blank
        pydantic.ValidationError: When the JSON does not match target
    """
    if json_text is None:
        raise TypeError("JSON text must not be None")
    if not json_text.strip():
        raise ValueError("JSON text cannot be empty or whitespace")

    return TypeAdapter(target).validate_json(json_text)


def is_valid_json(json_text: Optional[str]) -> bool:
    """Return True when json_text holds well-formed JSON."""
    if not json_text or not json_text.strip():
        return False
    try:
        json.loads(json_text)
    except ValueError:
        return False
    return True


def parse_object(json_text: str) -> Dict[str, Any]:
    """Parse a JSON string that must hold an object."""
    value = _parse(json_text)
    if not isinstance(value, dict):
        raise ValueError(f"Expected a JSON object, got {type(value).__name__}")
    return value


def parse_array(json_text: str) -> List[Any]:
    """Parse a JSON string that must hold an array."""
    value = _parse(json_text)
    if not isinstance(value, list):
        raise ValueError(f"Expected a JSON array, got {type(value).__name__}")
    return value


def _parse(json_text: str) -> Any:
    if json_text is None:
        raise TypeError("JSON text must not be None")
    if not json_text.strip():
        raise ValueError("JSON text cannot be empty or whitespace")
    return json.loads(json_text)


def get_value(data: Any, path: str, default: Any = None) -> Any:
    """
    Extract a value using a dot/index path.

    Examples:
        >>> get_value({"topProducts": [{"name": "Mouse"}]}, "topProducts[0].name")
        'Mouse'
        >>> get_value({"a": 1}, "b.c", default=0)
        0
    """
    if not path or not path.strip():
        raise ValueError("Path cannot be empty or whitespace")

    current = data
    for key, index in _PATH_TOKEN.findall(path.lstrip("$.")):
        if key:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        else:
            position = int(index)
            if not isinstance(current, list) or position >= len(current):
                return default
            current = current[position]
    return current


def load_json_file(filename: Union[str, Path], base_dir: Optional[Path] = None) -> Optional[Any]:
    """
    Read and parse a JSON file relative to base_dir (cwd by default).

    Returns None and logs an error when the file is missing, empty or
    not valid JSON.
    """
    path = Path(base_dir or Path.cwd()) / filename
    if not path.exists():
        logger.error(f"File '{filename}' does not exist.")
        return None

    content = path.read_text(encoding="utf-8")
    if not content.strip():
        logger.error(f"File '{filename}' is empty.")
        return None

    try:
        return json.loads(content)
    except ValueError as e:
        logger.error(f"Failed to parse JSON from file '{filename}': {e}")
        return None


__all__ = [
    "deserialize",
    "get_value",
    "is_valid_json",
    "load_json_file",
    "parse_array",
    "parse_object",
    "serialize",
    "to_jsonable",
]
