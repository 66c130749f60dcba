"""Task Dashboard package.

Feature modules (accounts, tasks, attendance, dashboard, ...) read their data
from a published spreadsheet and expose it through thin Flask controllers.
"""
