"""Task payload model and its wire (JSON) form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from notionarchive.errors import InvalidPayloadError, MissingConfigurationError


@dataclass(slots=True, frozen=True)
class ArchivePayload:
    """
    Input of one archive task run.

    Defaults are the safe ones: nothing is mutated unless `dry_run` is False,
    and mutated pages go to the trash (recoverable) unless `archive_instead`
    is False.
    """

    auth_token: str
    databases: Optional[tuple[str, ...]] = None
    filter: Optional[dict[str, Any]] = None
    dry_run: bool = True
    archive_instead: bool = True

    def validate(self) -> None:
        """Raise a ConfigurationError subclass if the payload cannot run."""
        if not isinstance(self.auth_token, str) or not self.auth_token.strip():
            raise MissingConfigurationError("notionToken is required")

        if self.databases is not None:
            if not all(isinstance(n, str) and n.strip() for n in self.databases):
                raise InvalidPayloadError(
                    "databases must be a list of non-empty strings",
                    details={"databases": list(self.databases)},
                )

        if self.filter is not None and not isinstance(self.filter, dict):
            raise InvalidPayloadError("filter must be an object")

    @property
    def action(self) -> str:
        """
        Wire label of the mutation: `archive` (archived and moved to the trash)
        or `delete` (archived only). Neither removes a page permanently.
        """
        return "archive" if self.archive_instead else "delete"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ArchivePayload":
        """
        Build a payload from its wire form.

        Keys: notionToken, databases, filter, dryRun, archiveInstead.
        Missing booleans take the safe defaults.
        """
        if not isinstance(data, Mapping):
            raise InvalidPayloadError("payload must be an object")

        databases = data.get("databases")
        if databases is not None:
            if isinstance(databases, str) or not isinstance(databases, (list, tuple)):
                raise InvalidPayloadError(
                    "databases must be a list",
                    details={"databases": databases},
                )
            databases = tuple(databases)

        payload = cls(
            auth_token=data.get("notionToken") or "",
            databases=databases,
            filter=data.get("filter"),
            dry_run=_bool_field(data, "dryRun", True),
            archive_instead=_bool_field(data, "archiveInstead", True),
        )
        payload.validate()
        return payload


def _bool_field(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidPayloadError(f"{key} must be a boolean", details={key: value})
    return value
