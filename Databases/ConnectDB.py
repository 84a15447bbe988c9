# Databases/ConnectDB.py

from __future__ import annotations

import psycopg2


class ConnectDB:
    def __init__(self, **params) -> None:
        # drop unset values so libpq falls back to its own defaults
        self.params = {k: v for k, v in params.items() if v not in (None, "")}

    def connect(self):
        return psycopg2.connect(**self.params)
