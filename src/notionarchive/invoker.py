"""Request boundary: turns a wire request into a task run and a status code."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from notionarchive.errors import ConfigurationError, InvalidPayloadError
from notionarchive.models import ArchivePayload
from notionarchive.task import ArchiveTask

log = logging.getLogger(__name__)


@dataclass(slots=True)
class InvocationResponse:
    """Status code plus JSON-ready body, as relayed to the caller."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def invoke(
    request: Mapping[str, Any],
    *,
    default_token: Optional[str] = None,
    task: Optional[ArchiveTask] = None,
) -> InvocationResponse:
    """
    Run one archive request.

    `default_token` is injected only when the request has no `notionToken`.
    Configuration problems answer 400 without touching Notion; any other
    failure answers 500.
    """
    try:
        if not isinstance(request, Mapping):
            raise InvalidPayloadError("request body must be an object")

        body = dict(request)
        if not body.get("notionToken") and default_token:
            body["notionToken"] = default_token

        payload = ArchivePayload.from_dict(body)
        result = (task or ArchiveTask()).run(payload)
    except ConfigurationError as exc:
        log.warning("Rejected archive request: %s", exc)
        return InvocationResponse(status_code=400, body={"error": str(exc)})
    except Exception as exc:
        log.exception("Archive task failed")
        return InvocationResponse(
            status_code=500,
            body={"error": str(exc) or "Internal server error"},
        )

    verb = "archiving" if payload.archive_instead else "deleting"
    mode = "dry run" if payload.dry_run else "executed"
    return InvocationResponse(
        status_code=200,
        body={
            "message": f"Task completed ({verb} pages, {mode})",
            "dryRun": payload.dry_run,
            "databases": list(result.per_database),
            "action": payload.action,
            "result": result.to_dict(),
        },
    )
