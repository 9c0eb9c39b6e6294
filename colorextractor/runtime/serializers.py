# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Output serializers for extracted colors.

Serializers format the hex list exactly as extracted; they never reorder
or filter colors.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    TEXT = "text"


def serialize_colors(
    colors: Sequence[str],
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    image_id: str | None = None,
) -> str:
    """Serialize extracted hex colors.

    Args:
        colors: Hex strings, most representative first.
        format: Output format.
        image_id: Optional image identifier, included in JSON output and
            as a header line in text output.

    Returns:
        Serialized string.

    Example (JSON_PRETTY)::

        {
          "image_id": "hero_banner.png",
          "colors": ["#F3EC18", "#F49225", "#E82E31"],
          "count": 3
        }
    """
    if format is SerializerFormat.TEXT:
        lines = [f"{image_id}:"] if image_id is not None else []
        lines.extend(colors)
        return "\n".join(lines)

    data: dict = {}
    if image_id is not None:
        data["image_id"] = image_id
    data["colors"] = list(colors)
    data["count"] = len(colors)

    if format is SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
