from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Branch
from .repository import BranchRepository


def _to_branch(r: dict) -> Branch:
    return Branch(
        branch_id=int(r["id"]),
        name=r["name"],
        ot_rate=float(r["ot_rate"]) if r.get("ot_rate") is not None else None,
        driver_rate=float(r["driver_rate"]) if r.get("driver_rate") is not None else None,
    )


class MySQLBranchRepository(BranchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, branch_id: int) -> Optional[Branch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, ot_rate, driver_rate FROM branches WHERE id=%s", (branch_id,))
            r = fetchone(cur)
            return _to_branch(r) if r else None

    def list_all(self) -> Sequence[Branch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, ot_rate, driver_rate FROM branches ORDER BY name")
            return [_to_branch(r) for r in fetchall(cur)]
