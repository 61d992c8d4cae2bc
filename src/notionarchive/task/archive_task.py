"""ArchiveTask: archives (or trashes) every page of selected Notion databases."""

from __future__ import annotations

import logging
import time
from typing import Mapping, Optional

from notionarchive.auth import AuthInfo
from notionarchive.config import TaskSettings
from notionarchive.controller import NotionController
from notionarchive.databases import resolve_databases
from notionarchive.errors import NotionArchiveError
from notionarchive.models import (
    ArchivePayload,
    DatabaseRef,
    MutationOutcome,
    NotionRecord,
    TaskResult,
)

from .aggregator import ResultAggregator

log = logging.getLogger(__name__)


class ArchiveTask:
    """
    Batch archival over Notion databases.

    One `run` call processes databases, result pages and records strictly one
    at a time. Mutations are paced by `TaskSettings.pacing_delay_sec`;
    rate-limit retries happen inside the controller.
    """

    def __init__(
        self,
        settings: Optional[TaskSettings] = None,
        *,
        database_table: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._settings = settings or TaskSettings()
        self._database_table = database_table
        self._controller: Optional[NotionController] = None

    @classmethod
    def from_controller(
        cls,
        controller: NotionController,
        *,
        settings: Optional[TaskSettings] = None,
        database_table: Optional[Mapping[str, str]] = None,
    ) -> "ArchiveTask":
        """Create a task with an injected controller (useful for tests)."""
        obj = cls(settings, database_table=database_table)
        obj._controller = controller
        return obj

    def run(self, payload: ArchivePayload) -> TaskResult:
        """
        Run the task to completion.

        Policy:
            - Failed page mutations are counted and reported; processing goes on.
            - A failed result-page fetch aborts that database only.
            - Only configuration errors raise (before any remote call).
        """
        payload.validate()
        databases = resolve_databases(payload.databases, table=self._database_table)

        log.info(
            "Starting task: databases=%s dry_run=%s action=%s",
            [ref.name for ref in databases],
            payload.dry_run,
            payload.action,
        )

        controller = self._controller_for(payload)
        aggregator = ResultAggregator(error_limit=self._settings.error_limit)
        for ref in databases:
            aggregator.register(ref.name)

        for ref in databases:
            self._process_database(controller, ref, payload, aggregator)

        result = aggregator.finalize()
        log.info("Task completed: %s", result.to_dict())
        return result

    # ----------------------------
    # Internals
    # ----------------------------
    def _controller_for(self, payload: ArchivePayload) -> NotionController:
        if self._controller is not None:
            return self._controller
        return NotionController(
            AuthInfo(token=payload.auth_token),
            retry_policy=self._settings.retry,
            page_size=self._settings.page_size,
            timeout_ms=self._settings.timeout_ms,
        )

    def _process_database(
        self,
        controller: NotionController,
        ref: DatabaseRef,
        payload: ArchivePayload,
        aggregator: ResultAggregator,
    ) -> None:
        log.info("Processing database: %s", ref.name)
        outcome = aggregator.begin(ref.name)

        try:
            for page in controller.iter_pages(ref.id, payload.filter):
                for record in page.records:
                    aggregator.record(ref.name, self._apply_one(controller, record, ref, payload))
        except NotionArchiveError as exc:
            message = f"Failed to process database {ref.name}: {exc}"
            log.error(message)
            aggregator.abort(ref.name, message)
            return

        aggregator.complete(ref.name)
        log.info("Completed database %s: %s", ref.name, outcome.to_dict())

    def _apply_one(
        self,
        controller: NotionController,
        record: NotionRecord,
        ref: DatabaseRef,
        payload: ArchivePayload,
    ) -> MutationOutcome:
        if payload.dry_run:
            log.debug("Dry run: would %s page %s from %s", payload.action, record.id, ref.name)
            return MutationOutcome(record_id=record.id, status="skipped")

        try:
            controller.archive_page(record.id, archive_instead=payload.archive_instead)
        except NotionArchiveError as exc:
            message = f"Failed to archive record {record.id} from {ref.name}: {exc}"
            log.error(message)
            outcome = MutationOutcome(record_id=record.id, status="failed", error_message=message)
        else:
            log.info("Archived page %s from %s", record.id, ref.name)
            outcome = MutationOutcome(record_id=record.id, status="success")

        # Paces every mutation attempt, whatever its result.
        time.sleep(self._settings.pacing_delay_sec)
        return outcome
