"""Constants and defaults.

Note: Column positions of the spreadsheet live here so that a reordered sheet
only needs a change in this file, never in the mappers.
"""

SESSION_KEY = "yt_user"
DEFAULT_SESSION_DAYS = 7
DEFAULT_FETCH_TIMEOUT_SECONDS = 15.0

NO_FMS_GROUP = "TANPA-FMS"
FILTER_ALL = "all"

CSV_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={gid}"

# 0-indexed column positions per sheet (A=0, B=1, ...).
COURIER_LOGIN_COLUMNS = {
    "name": 1,  # B
    "username": 5,  # F
}

OPS_LOGIN_COLUMNS = {
    "name": 1,  # B
    "username": 4,  # E
}

TASK_COLUMNS = {
    "task_id": 0,  # A
    "fms_id": 2,  # C
    "package_count": 9,  # J
    "operator_name": 11,  # L
    "hub": 19,  # T
    "name": 20,  # U
    "courier_id": 21,  # V
}

ATTENDANCE_COLUMNS = {
    "staff_name": 1,
    "jabatan": 2,
    "shift": 5,
    "description": 6,
}
