"""Project aggregate — a client engagement that owns a pull list."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pim.domain.exceptions import ValidationError


class ProjectStatus(Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"

    @staticmethod
    def parse(raw: str | ProjectStatus) -> ProjectStatus:
        if isinstance(raw, ProjectStatus):
            return raw
        try:
            return ProjectStatus(str(raw).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in ProjectStatus)
            raise ValidationError(
                f"Invalid project status '{raw}' (expected one of: {allowed})",
                "status",
            ) from exc


@dataclass
class Project:
    """Aggregate root for client projects.

    Projects carry no stock logic of their own; their pull-list lines are
    separate ``ProjectItem`` records that reference the project by id.
    """

    id: int | None
    name: str
    client_name: str
    status: ProjectStatus = ProjectStatus.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        client_name: str,
        status: str | ProjectStatus = ProjectStatus.ACTIVE,
    ) -> Project:
        return Project(
            id=None,
            name=_required(name, "name"),
            client_name=_required(client_name, "client_name"),
            status=ProjectStatus.parse(status),
        )

    def apply_changes(self, changes: dict) -> None:
        """Apply a partial edit of name, client name or status."""
        for key, value in changes.items():
            if key in ("name", "client_name"):
                setattr(self, key, _required(value, key))
            elif key == "status":
                self.status = ProjectStatus.parse(value)
            else:
                raise ValidationError(f"Unknown project field '{key}'", key)

    def archive(self) -> None:
        if self.status == ProjectStatus.ARCHIVED:
            raise ValidationError(f"Project '{self.name}' is already archived", "status")
        self.status = ProjectStatus.ARCHIVED


def _required(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        label = field_name.replace("_", " ").capitalize()
        raise ValidationError(f"{label} is required", field_name)
    return str(value).strip()
