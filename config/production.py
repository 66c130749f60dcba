import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SHEET_ID = os.getenv("SHEET_ID", "1NSFmEGm3i1RgLCt1tSIaP9lYlfe8fnMMrsHeke_ZCiI")

SHEET_GIDS = {
    "KURIR_LOGIN": os.getenv("GID_KURIR_LOGIN", "1904625355"),
    "OPS_LOGIN": os.getenv("GID_OPS_LOGIN", "1000003188"),
    "TASKS": os.getenv("GID_TASKS", "1818009061"),
    "ATTENDANCE": os.getenv("GID_ATTENDANCE", "961433836"),
}

FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "15"))

SESSION_KEY = os.getenv("SESSION_KEY", "yt_user")
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

# Dashboard states kept in memory; the least recently used browser is dropped first
MAX_BROWSER_STATES = int(os.getenv("MAX_BROWSER_STATES", "1000"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
