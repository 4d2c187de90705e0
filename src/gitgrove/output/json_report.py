"""JSON reporter — model values to plain dicts and JSON text."""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any

from gitgrove.git.models import WorktreeStatus


def to_dict(value: Any) -> Any:
    """Convert models (and lists of them) to JSON-serialisable data."""
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        data = {f.name: to_dict(getattr(value, f.name)) for f in dataclasses.fields(value)}
        if isinstance(value, WorktreeStatus):
            data["is_clean"] = value.is_clean
        return data
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return dict(value._asdict())
    if isinstance(value, (list, tuple)):
        return [to_dict(v) for v in value]
    if isinstance(value, dict):
        return {k: to_dict(v) for k, v in value.items()}
    return value


def render(value: Any) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(value), indent=2, ensure_ascii=False)
