from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Guest:
    """Misafir kaydı. Oluşturulduktan sonra değişmez."""

    guest_id: str
    name: str
    email: str
    phone: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guest_id": self.guest_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Guest:
        field_names = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in field_names}
        return cls(**filtered_data)

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.guest_id}) | {self.email} | {self.phone}"
