"""Notion SDK client construction for notionarchive."""

from __future__ import annotations

import logging
from typing import Any, Optional

from notion_client import Client

from notionarchive.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

DEFAULT_TIMEOUT_MS: int = 60_000


class NotionClientFactory:
    """Create Notion SDK clients from AuthInfo."""

    def __init__(self, auth_info: AuthInfo) -> None:
        if not isinstance(auth_info, AuthInfo):
            raise InvalidArgumentError("NotionClientFactory requires an AuthInfo")
        self._auth_info = auth_info

    def build_client(
        self,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        logger: Optional[logging.Logger] = None,
    ) -> Client:
        """
        Build a synchronous Notion SDK client.

        Raises:
            InvalidArgumentError: if timeout_ms is not positive.
            AuthError: if the SDK rejects the options.
        """
        if not isinstance(timeout_ms, int) or timeout_ms <= 0:
            raise InvalidArgumentError(
                "timeout_ms must be a positive integer",
                details={"timeout_ms": timeout_ms},
            )

        options: dict[str, Any] = {
            "auth": self._auth_info.token,
            "notion_version": self._auth_info.notion_version,
            "timeout_ms": timeout_ms,
        }
        if logger is not None:
            options["logger"] = logger

        try:
            return Client(**options)
        except (TypeError, ValueError) as exc:
            raise AuthError("Failed to build Notion client", cause=exc) from exc
