# Databases/PgSource.py
# =====================================================================
# Crosswalk stored in PostgreSQL, one row per (index, scale) cell:
#
#   CREATE TABLE grade_crosswalk (
#       idx     integer NOT NULL,
#       system  text    NOT NULL,
#       cell    text,
#       PRIMARY KEY (idx, system)
#   );
# =====================================================================

from __future__ import annotations

import logging
from typing import Any, Callable

from psycopg2 import sql

from Databases.ConnectDB import ConnectDB
from Databases.DbParams import postgresql_config
from Grades.values import canonical_system
from Parameters.scales import DEFAULT_TABLE

logger = logging.getLogger(__name__)


def _default_connect() -> Any:
    return ConnectDB(**postgresql_config()).connect()


class PostgresGradeScaleDataSource:
    """
    ``connect`` is any zero-argument callable returning a DB-API
    connection; by default one is opened from HNAME/HUSER/… settings.
    """

    def __init__(
        self,
        connect: Callable[[], Any] | None = None,
        table: str = DEFAULT_TABLE,
    ) -> None:
        self._connect = connect or _default_connect
        self.table = table

    def __repr__(self) -> str:
        return f"PostgresGradeScaleDataSource(table={self.table!r})"

    def index_to_grade_map(self, system: str) -> dict[int, str]:
        key = canonical_system(system)
        query = sql.SQL(
            "SELECT idx, cell FROM {} WHERE upper(system) = %s ORDER BY idx"
        ).format(sql.Identifier(self.table))

        conn = self._connect()
        try:
            with conn.cursor() as cur:
                cur.execute(query, (key,))
                rows = cur.fetchall()
        finally:
            conn.close()

        out: dict[int, str] = {}
        for idx, cell in rows:
            if cell is None or not str(cell).strip():
                continue
            out[int(idx)] = str(cell).strip()

        logger.info("[PgSource] %s → %d indexes from %s", key, len(out), self.table)
        return out
