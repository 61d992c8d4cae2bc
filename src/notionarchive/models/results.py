"""Result models for the archive task."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional


MutationStatus = Literal["success", "failed", "skipped"]
DatabaseStatus = Literal["pending", "paginating", "completed", "aborted"]


@dataclass(slots=True)
class MutationOutcome:
    """Result for a single page (success, failure, or skipped in dry run)."""

    record_id: str
    status: MutationStatus
    error_message: Optional[str] = None


@dataclass(slots=True)
class DatabaseOutcome:
    """Per-database counters, updated in place while the database is processed."""

    name: str
    processed: int = 0
    successful: int = 0
    failed: int = 0
    status: DatabaseStatus = "pending"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "processed": self.processed,
            "successful": self.successful,
            "failed": self.failed,
            "status": self.status,
        }


@dataclass(slots=True)
class TaskResult:
    """Aggregate result returned by ArchiveTask.run."""

    total_processed: int = 0
    successful: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)
    per_database: dict[str, DatabaseOutcome] = field(default_factory=dict)
    errors_dropped: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Render the result with the keys used by the task's log stream and invoker."""
        return {
            "totalProcessed": self.total_processed,
            "successful": self.successful,
            "failed": self.failed,
            "errors": list(self.errors),
            "errorsDropped": self.errors_dropped,
            "databaseResults": {
                name: outcome.to_dict() for name, outcome in self.per_database.items()
            },
        }
