"""Authentication information for notionarchive (integration token only)."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_NOTION_VERSION: str = "2022-06-28"


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information for the Notion API.

    Only internal integration tokens are supported. `notion_version` is
    pinned because the database query endpoint changed shape in later API
    versions.
    """

    token: str
    notion_version: str = DEFAULT_NOTION_VERSION

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token.strip():
            raise ValueError("AuthInfo.token must be a non-empty string")

        if not isinstance(self.notion_version, str) or not self.notion_version.strip():
            raise ValueError("AuthInfo.notion_version must be a non-empty string")

    def __repr__(self) -> str:
        return f"AuthInfo(token='***', notion_version={self.notion_version!r})"
