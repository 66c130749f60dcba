from __future__ import annotations

from typing import Mapping, Sequence

from ..core.constants import COURIER_LOGIN_COLUMNS, OPS_LOGIN_COLUMNS
from ..sheets.schema import RowSchema
from .model import Account

COURIER_LOGIN_SCHEMA = RowSchema.from_mapping(COURIER_LOGIN_COLUMNS, required=("username",))
OPS_LOGIN_SCHEMA = RowSchema.from_mapping(OPS_LOGIN_COLUMNS, required=("username",))


def _to_account(values: Mapping[str, str]) -> Account:
    username = values["username"]
    return Account(username=username, name=values["name"] or username)


def map_courier_accounts(rows: Sequence[Sequence[str]]) -> list[Account]:
    return [_to_account(v) for v in COURIER_LOGIN_SCHEMA.read_all(rows)]


def map_ops_accounts(rows: Sequence[Sequence[str]]) -> list[Account]:
    return [_to_account(v) for v in OPS_LOGIN_SCHEMA.read_all(rows)]
