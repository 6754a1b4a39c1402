from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Student:
    """A student owned by exactly one batch. Only ``photo_url`` ever changes."""

    id: str
    name: str
    batch_id: str
    email: Optional[str] = None
    photo_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "batchId": self.batch_id}
        if self.email is not None:
            data["email"] = self.email
        if self.photo_url is not None:
            data["photoUrl"] = self.photo_url
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Student":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            batch_id=str(data.get("batchId", "")),
            email=data.get("email"),
            photo_url=data.get("photoUrl"),
        )
