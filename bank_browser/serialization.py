"""JSON-friendly conversion of records and views."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass to a dict, serializing nested values.

    Walks ``fields()`` directly instead of ``asdict()`` so nested records
    (a detail view's client, accounts and branch) are serialized by
    :func:`serialize_value` as well.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Amounts become strings to keep their exact digits; a NaN amount
    becomes None.
    """
    if isinstance(value, Decimal):
        return None if value.is_nan() else str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
