from __future__ import annotations

from typing import Sequence

from ..core.constants import ATTENDANCE_COLUMNS
from ..sheets.schema import RowSchema
from .model import Attendance

ATTENDANCE_SCHEMA = RowSchema.from_mapping(ATTENDANCE_COLUMNS, required=("staff_name",))


def map_attendance(rows: Sequence[Sequence[str]]) -> list[Attendance]:
    return [Attendance(**values) for values in ATTENDANCE_SCHEMA.read_all(rows)]
