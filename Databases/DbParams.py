# Databases/DbParams.py
# =====================================================================
# PostgreSQL connection settings, read from the environment (or .env).
# =====================================================================

from __future__ import annotations

import os

from dotenv import load_dotenv


def postgresql_config() -> dict[str, str | None]:
    """psycopg2.connect() keyword arguments built from HNAME/HUSER/…"""
    load_dotenv()
    return {
        "host":     os.getenv("HNAME"),
        "user":     os.getenv("HUSER"),
        "password": os.getenv("HPASSWORD"),
        "dbname":   os.getenv("HDATABASE"),
        "port":     os.getenv("HPORT"),
    }
