"""YAML reporter."""

from __future__ import annotations

from typing import Any

import yaml

from gitgrove.output.json_report import to_dict


def render(value: Any) -> str:
    return yaml.safe_dump(to_dict(value), sort_keys=False, allow_unicode=True)
