from __future__ import annotations

import json
from typing import Any


class JsonFieldExtractor:
    """Read string fields out of a JSON response body.

    ``path`` is dot separated (``"user.emails.0"``); numeric segments index
    into arrays. Missing fields, non-string values and unparseable bodies all
    read as ``""``.
    """

    def get(self, body: bytes, path: str) -> str:
        if not body:
            return ""
        try:
            node: Any = json.loads(body)
        except ValueError:
            return ""

        for segment in path.split("."):
            if isinstance(node, dict):
                if segment not in node:
                    return ""
                node = node[segment]
            elif isinstance(node, list) and segment.isascii() and segment.isdigit():
                index = int(segment)
                if index >= len(node):
                    return ""
                node = node[index]
            else:
                return ""

        return node if isinstance(node, str) else ""
