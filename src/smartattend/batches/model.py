from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Batch:
    """A roster grouping of students. Immutable once created."""

    id: str
    name: str
    created_at: str
    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "createdAt": self.created_at}
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Batch":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            created_at=str(data.get("createdAt", "")),
            description=data.get("description"),
        )
