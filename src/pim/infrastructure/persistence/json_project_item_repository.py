"""JSON-document-backed implementation of ProjectItemRepository."""

from __future__ import annotations

from datetime import datetime

from pim.domain.model.project_item import ProjectItem, PullStatus
from pim.domain.model.value_objects import Quantity
from pim.domain.repository.project_item_repository import ProjectItemRepository


class JsonProjectItemRepository(ProjectItemRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- ProjectItemRepository interface --------------------------------------

    def get_by_id(self, line_id: int) -> ProjectItem | None:
        for raw in self._records:
            if raw["id"] == line_id:
                return self._to_domain(raw)
        return None

    def list_for_project(self, project_id: int) -> list[ProjectItem]:
        return [
            self._to_domain(raw)
            for raw in self._records
            if raw["project_id"] == project_id
        ]

    def list_for_item(self, item_id: int) -> list[ProjectItem]:
        return [
            self._to_domain(raw)
            for raw in self._records
            if raw["item_id"] == item_id
        ]

    def save(self, line: ProjectItem) -> None:
        if line.id is None:
            line.id = max((r["id"] for r in self._records), default=0) + 1

        for i, raw in enumerate(self._records):
            if raw["id"] == line.id:
                self._records[i] = self._to_raw(line)
                return
        self._records.append(self._to_raw(line))

    def delete(self, line_id: int) -> None:
        self._records[:] = [r for r in self._records if r["id"] != line_id]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: ProjectItem) -> dict:
        return {
            "id": line.id,
            "project_id": line.project_id,
            "item_id": line.item_id,
            "quantity": line.quantity.value,
            "status": line.status.value,
            "notes": line.notes,
            "added_at": line.added_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProjectItem:
        return ProjectItem(
            id=raw["id"],
            project_id=raw["project_id"],
            item_id=raw["item_id"],
            quantity=Quantity(raw["quantity"]),
            status=PullStatus(raw["status"]),
            notes=raw.get("notes"),
            added_at=datetime.fromisoformat(raw["added_at"]),
        )
