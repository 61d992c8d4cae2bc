"""Folds per-page outcomes into the task result."""

from __future__ import annotations

import logging

from notionarchive.config import DEFAULT_ERROR_LIMIT
from notionarchive.models import DatabaseOutcome, MutationOutcome, TaskResult

log = logging.getLogger(__name__)


class ResultAggregator:
    """
    Accumulates counters and error messages for one task run.

    Pure bookkeeping: no remote calls, and no method raises on a failed page
    or database. Failures are data here.

    Per-database status moves pending -> paginating -> completed | aborted.
    """

    def __init__(self, *, error_limit: int = DEFAULT_ERROR_LIMIT) -> None:
        self._error_limit = error_limit
        self._result = TaskResult()

    def register(self, name: str) -> DatabaseOutcome:
        """Add a database in `pending` state (idempotent)."""
        outcome = self._result.per_database.get(name)
        if outcome is None:
            outcome = DatabaseOutcome(name=name)
            self._result.per_database[name] = outcome
        return outcome

    def begin(self, name: str) -> DatabaseOutcome:
        outcome = self.register(name)
        outcome.status = "paginating"
        return outcome

    def record(self, name: str, outcome: MutationOutcome) -> None:
        db = self.register(name)
        db.processed += 1
        self._result.total_processed += 1

        if outcome.status == "success":
            db.successful += 1
            self._result.successful += 1
        elif outcome.status == "failed":
            db.failed += 1
            self._result.failed += 1
            self.add_error(
                outcome.error_message or f"Failed to archive record {outcome.record_id} from {name}"
            )

    def complete(self, name: str) -> DatabaseOutcome:
        outcome = self.register(name)
        outcome.status = "completed"
        return outcome

    def abort(self, name: str, message: str) -> DatabaseOutcome:
        """Close a database whose traversal failed; already counted pages stay counted."""
        outcome = self.register(name)
        outcome.status = "aborted"
        self.add_error(message)
        return outcome

    def add_error(self, message: str) -> None:
        if len(self._result.errors) < self._error_limit:
            self._result.errors.append(message)
            return

        if self._result.errors_dropped == 0:
            log.warning("Error list is full (%d); further messages are only logged", self._error_limit)
        self._result.errors_dropped += 1

    def finalize(self) -> TaskResult:
        return self._result
