from __future__ import annotations

import logging
from typing import Mapping

import requests

from ..core.constants import CSV_EXPORT_URL, DEFAULT_FETCH_TIMEOUT_SECONDS
from ..core.enums import SheetName
from ..core.exceptions import SheetFetchError
from .parser import split_csv_text
from .repository import SheetRepository

log = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Gagal mengambil data dari spreadsheet cloud."


class CsvExportSheetRepository(SheetRepository):
    """Reads sheets through the public "export as CSV" endpoint.

    No auth headers are sent: the spreadsheet must be shared as
    "anyone with the link".
    """

    def __init__(
        self,
        *,
        sheet_id: str,
        gids: Mapping[str, str],
        timeout_s: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        http: requests.Session | None = None,
    ):
        self._sheet_id = sheet_id
        self._gids = dict(gids)
        self._timeout_s = float(timeout_s)
        self._http = http or requests.Session()

    def url_for(self, sheet: SheetName) -> str:
        try:
            gid = self._gids[sheet.value]
        except KeyError:
            raise SheetFetchError(f"Sheet {sheet.value} belum dikonfigurasi") from None
        return CSV_EXPORT_URL.format(sheet_id=self._sheet_id, gid=gid)

    def fetch_rows(self, sheet: SheetName) -> list[list[str]]:
        url = self.url_for(sheet)
        try:
            resp = self._http.get(url, timeout=self._timeout_s)
        except requests.RequestException as e:
            log.warning("Fetching sheet %s failed: %s", sheet.value, e)
            raise SheetFetchError(FETCH_ERROR_MESSAGE) from e

        if resp.status_code // 100 != 2:
            log.warning("Fetching sheet %s returned HTTP %s", sheet.value, resp.status_code)
            raise SheetFetchError(FETCH_ERROR_MESSAGE)

        rows = split_csv_text(resp.text)
        log.debug("Sheet %s: %d rows", sheet.value, len(rows))
        return rows
