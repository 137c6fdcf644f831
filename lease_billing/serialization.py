"""Serialization of billing records to plain dicts and JSON."""

import json
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert a billing record to a JSON-ready dictionary.

    Optional fields left at ``None`` are omitted, so a charge without
    discount has no ``discount``/``base_amount`` keys and an unsettled
    payment has no ``settled`` key.
    """
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass, dropping ``None`` fields."""
    result = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[f.name] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {serialize_value(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def to_json(obj: Any, pretty: bool = False) -> str:
    """Dump a billing record (or a list of them) as JSON."""
    if isinstance(obj, (list, tuple)):
        payload: Any = [to_dict(item) for item in obj]
    else:
        payload = to_dict(obj)
    return json.dumps(payload, indent=2 if pretty else None, ensure_ascii=False)
