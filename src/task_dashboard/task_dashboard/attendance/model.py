from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Attendance:
    """Satu baris jadwal shift. Read-only; no key besides its row position."""

    staff_name: str
    jabatan: str
    shift: str
    description: str

    @property
    def is_off(self) -> bool:
        return "off" in self.shift.lower()

    def to_dict(self) -> dict:
        return {
            "staff_name": self.staff_name,
            "jabatan": self.jabatan,
            "shift": self.shift,
            "description": self.description,
        }
