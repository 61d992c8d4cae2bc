from __future__ import annotations

import re
import uuid

_HEX32 = re.compile(r"^[0-9a-fA-F]{32}$")


def is_notion_id(value: object) -> bool:
    """Return True for 32 hex digits, with or without UUID hyphens."""
    if not isinstance(value, str):
        return False
    return bool(_HEX32.match(value.strip().replace("-", "")))


def normalize_notion_id(value: str) -> str:
    """
    Return the canonical hyphenated form of a Notion id.

    Notion accepts both `6bf327c6c1454c71a797baca43635424` and
    `6bf327c6-c145-4c71-a797-baca43635424`; the API always answers with the
    hyphenated form.
    """
    if not is_notion_id(value):
        raise ValueError(f"Not a Notion id: {value!r}")
    return str(uuid.UUID(hex=value.strip().replace("-", "")))
