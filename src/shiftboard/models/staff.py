"""Staff member model."""
from dataclasses import dataclass


@dataclass
class StaffMember:
    """A roster entry. ``id`` is stable across renames and never reused."""

    id: str
    name: str

    def __post_init__(self):
        self.id = str(self.id).strip()
        self.name = str(self.name).strip()
        if not self.id:
            raise ValueError("StaffMember.id must not be empty")

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, d: dict) -> "StaffMember":
        return cls(id=d["id"], name=d.get("name", ""))
