from __future__ import annotations

import pytest

from Databases.CacheSource import CachedGradeScaleDataSource
from Databases.CsvSource import CsvGradeScaleDataSource
from Databases.DataSource import GradeScaleDataSource
from Databases.PgSource import PostgresGradeScaleDataSource
from Grades.errors import InvalidScaleData, ScaleDataUnavailable
from Grades.scale import GradeScale
from Parameters.scales import DEFAULT_GRADES_CSV, SCALES

CSV_TEXT = """INDEX,FR,BR
2,5b,IVsup
1,5a,IV
3,6a/6a+,
"""


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "grades.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


class TestCsvSource:
    def test_reads_sorted_map_for_requested_column(self, csv_file):
        source = CsvGradeScaleDataSource(csv_file)
        assert source.index_to_grade_map("fr") == {1: "5a", 2: "5b", 3: "6a/6a+"}

    def test_blank_cells_are_skipped(self, csv_file):
        assert CsvGradeScaleDataSource(csv_file).index_to_grade_map("BR") == {1: "IV", 2: "IVsup"}

    def test_systems_lists_scale_columns(self, csv_file):
        assert CsvGradeScaleDataSource(csv_file).systems() == ["FR", "BR"]

    def test_custom_delimiter(self, tmp_path):
        path = tmp_path / "semi.csv"
        path.write_text("INDEX;FR\n1;4a\n2;4b\n", encoding="utf-8")
        assert CsvGradeScaleDataSource(path, delimiter=";").index_to_grade_map("FR") == {
            1: "4a",
            2: "4b",
        }

    def test_missing_file(self, tmp_path):
        with pytest.raises(ScaleDataUnavailable):
            CsvGradeScaleDataSource(tmp_path / "nope.csv").index_to_grade_map("FR")

    def test_missing_column(self, csv_file):
        with pytest.raises(ScaleDataUnavailable):
            CsvGradeScaleDataSource(csv_file).index_to_grade_map("YDS")

    def test_non_integer_index(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("INDEX,FR\none,4a\n", encoding="utf-8")
        with pytest.raises(InvalidScaleData):
            CsvGradeScaleDataSource(path).index_to_grade_map("FR")

    def test_gap_in_file_surfaces_when_scale_is_built(self, tmp_path):
        path = tmp_path / "gap.csv"
        path.write_text("INDEX,FR,YDS\n1,4a,5.5\n2,,5.6\n3,4c,5.7\n", encoding="utf-8")
        cells = CsvGradeScaleDataSource(path).index_to_grade_map("FR")
        with pytest.raises(InvalidScaleData):
            GradeScale("FR", cells)

    def test_bundled_file_has_every_scale(self):
        source = CsvGradeScaleDataSource(DEFAULT_GRADES_CSV)
        assert source.systems() == list(SCALES)
        assert isinstance(source, GradeScaleDataSource)


class TestCacheSource:
    def test_inner_source_read_once_per_scale(self, dict_source):
        cache = CachedGradeScaleDataSource(dict_source)
        first = cache.index_to_grade_map("AA")
        second = cache.index_to_grade_map("aa")
        assert first == second == dict_source.data["AA"]
        assert dict_source.calls == {"AA": 1}

    def test_returned_map_is_a_copy(self, dict_source):
        cache = CachedGradeScaleDataSource(dict_source)
        cache.index_to_grade_map("AA")[1] = "changed"
        assert cache.index_to_grade_map("AA")[1] == "1"

    def test_clear_one_or_all(self, dict_source):
        cache = CachedGradeScaleDataSource(dict_source)
        cache.index_to_grade_map("AA")
        cache.index_to_grade_map("BB")

        cache.clear("aa")
        cache.index_to_grade_map("AA")
        cache.index_to_grade_map("BB")
        assert dict_source.calls == {"AA": 2, "BB": 1}

        cache.clear()
        cache.index_to_grade_map("BB")
        assert dict_source.calls["BB"] == 2


# ── PostgreSQL, through a fake DB-API connection ─────────────────────
class FakeCursor:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params):
        self.executed.append((query, params))

    def fetchall(self):
        return list(self.rows)


class FakeConnection:
    def __init__(self, rows):
        self.cur = FakeCursor(rows)
        self.closed = False

    def cursor(self):
        return self.cur

    def close(self):
        self.closed = True


class TestPostgresSource:
    def test_reads_rows_for_canonical_system(self):
        conn = FakeConnection([(1, "5a"), (2, " 5b/5b+ "), (3, None), (4, "  ")])
        source = PostgresGradeScaleDataSource(connect=lambda: conn)

        assert source.index_to_grade_map(" fr") == {1: "5a", 2: "5b/5b+"}
        (_, params), = conn.cur.executed
        assert params == ("FR",)
        assert conn.closed

    def test_connection_closed_on_error(self):
        conn = FakeConnection([])

        def boom(query, params):
            raise RuntimeError("db down")

        conn.cur.execute = boom
        source = PostgresGradeScaleDataSource(connect=lambda: conn)
        with pytest.raises(RuntimeError):
            source.index_to_grade_map("FR")
        assert conn.closed

    def test_default_connection_uses_env(self, monkeypatch):
        seen = {}

        def fake_connect(**params):
            seen.update(params)
            return FakeConnection([(1, "I")])

        monkeypatch.setenv("HNAME", "db.local")
        monkeypatch.setenv("HUSER", "climber")
        monkeypatch.setenv("HDATABASE", "grades")
        monkeypatch.delenv("HPASSWORD", raising=False)
        monkeypatch.delenv("HPORT", raising=False)
        monkeypatch.setattr("Databases.ConnectDB.psycopg2.connect", fake_connect)
        monkeypatch.setattr("Databases.DbParams.load_dotenv", lambda: False)

        assert PostgresGradeScaleDataSource().index_to_grade_map("UIAA") == {1: "I"}
        assert seen == {"host": "db.local", "user": "climber", "dbname": "grades"}
