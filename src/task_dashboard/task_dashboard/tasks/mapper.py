from __future__ import annotations

import logging
from typing import Sequence

from ..common.cells import optional_text, parse_int_or_zero
from ..core.constants import TASK_COLUMNS
from ..sheets.schema import RowSchema
from .model import Task

log = logging.getLogger(__name__)

TASK_SCHEMA = RowSchema.from_mapping(
    TASK_COLUMNS,
    required=("task_id", "courier_id"),
    converters={"package_count": parse_int_or_zero, "operator_name": optional_text},
)


def map_tasks(rows: Sequence[Sequence[str]]) -> list[Task]:
    tasks = [Task(**values) for values in TASK_SCHEMA.read_all(rows)]
    log.info("Total tasks loaded from sheet: %d", len(tasks))
    return tasks
