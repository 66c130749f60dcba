SECRET_KEY = "test-secret"

SHEET_ID = "test-sheet"

SHEET_GIDS = {
    "KURIR_LOGIN": "1",
    "OPS_LOGIN": "2",
    "TASKS": "3",
    "ATTENDANCE": "4",
}

FETCH_TIMEOUT_SECONDS = 1.0

SESSION_KEY = "yt_user"
SESSION_DAYS = 7
MAX_BROWSER_STATES = 50

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
