from __future__ import annotations

import json
import sqlite3
import sys
from typing import List

import pytest

from models.search_result import SearchResultItem


def _run_cli_with_args(args_list: List[str]) -> None:
    """Run cli.py main() with provided argv in-process (no subprocess)."""
    argv_backup = sys.argv[:]
    try:
        sys.argv = ["cli.py"] + args_list
        # Import fresh to ensure clean parser each time
        if "cli" in sys.modules:
            del sys.modules["cli"]
        from config.settings import get_settings
        get_settings.cache_clear()
        import cli  # type: ignore
        try:
            cli.main()  # type: ignore[attr-defined]
        except SystemExit as e:
            code = int(getattr(e, "code", 0) or 0)
            if code not in (0, None):
                raise
    finally:
        sys.argv = argv_backup


def _rows(db_path):
    conn = sqlite3.connect(str(db_path))
    try:
        return conn.execute("SELECT councillor, council_name, council_website, email FROM data ORDER BY rowid").fetchall()
    finally:
        conn.close()


@pytest.fixture
def env(tmp_path, monkeypatch):
    datasets = tmp_path / "datasets"
    datasets.mkdir()
    (datasets / "nsw.json").write_text(json.dumps([
        {"name": "Jane Smith", "council": "Ryde City Council", "council_url": "http://www.ryde.nsw.gov.au/"},
    ]), encoding="utf-8")
    monkeypatch.setenv("DATASET_SOURCE", "json_dir")
    monkeypatch.setenv("DATASET_DIR", str(datasets))
    monkeypatch.setenv("MORPH_STATE_DATABASES", "nsw,missing")
    monkeypatch.setenv("GOOGLE_API_KEY", "dummy")
    monkeypatch.setenv("GOOGLE_CSE_ID", "dummy")

    import google_searcher
    import services.page_fetcher as pf
    queries = []

    def _search(self, query):
        queries.append(query)
        return [SearchResultItem(url="https://www.ryde.nsw.gov.au/councillors", snippet="Councillors")]

    monkeypatch.setattr(google_searcher.GoogleSearcher, "search", _search)
    monkeypatch.setattr(pf.PageFetcher, "fetch", lambda self, url: "<p>Cr Smith: jane.smith@ryde.nsw.gov.au</p>")
    return tmp_path / "data.sqlite", queries


def test_runs_converge_without_duplicates(env):
    db_path, queries = env

    # Run 1: empty store, nothing to search, so datasets are pulled
    _run_cli_with_args(["--db", str(db_path), "run"])
    assert _rows(db_path) == [("Jane Smith", "Ryde City Council", "http://www.ryde.nsw.gov.au/", "")]
    assert queries == []

    # Run 2: the new row is searched and resolved
    _run_cli_with_args(["--db", str(db_path), "run"])
    assert queries == ["Jane Smith site:www.ryde.nsw.gov.au"]
    assert _rows(db_path)[0][3] == "jane.smith@ryde.nsw.gov.au"

    # Run 3: nothing pending, the dataset is pulled again but adds nothing
    _run_cli_with_args(["--db", str(db_path), "run"])
    assert len(_rows(db_path)) == 1
    assert len(queries) == 1


def test_none_sentinel_is_never_searched_again(env, monkeypatch):
    db_path, queries = env
    import services.page_fetcher as pf
    monkeypatch.setattr(pf.PageFetcher, "fetch", lambda self, url: "no addresses")

    _run_cli_with_args(["--db", str(db_path), "run"])
    _run_cli_with_args(["--db", str(db_path), "run"])
    assert _rows(db_path)[0][3] == "none"
    _run_cli_with_args(["--db", str(db_path), "run"])
    assert len(queries) == 1


def test_search_budget_flag(env):
    db_path, queries = env
    conn = sqlite3.connect(str(db_path))
    try:
        conn.execute("CREATE TABLE data (councillor TEXT, position TEXT, council_name TEXT, ward TEXT, council_website TEXT, email TEXT)")
        conn.executemany(
            "INSERT INTO data VALUES (?, NULL, 'Ryde', NULL, 'https://ryde.nsw.gov.au', '')",
            [("A Smith",), ("B Smith",), ("C Smith",)],
        )
        conn.commit()
    finally:
        conn.close()

    _run_cli_with_args(["--db", str(db_path), "run", "--max-searches", "2"])
    assert len(queries) == 2
    assert [r[3] for r in _rows(db_path)] == ["jane.smith@ryde.nsw.gov.au", "jane.smith@ryde.nsw.gov.au", ""]


def test_reconcile_and_report_commands(env, capsys):
    db_path, _queries = env
    _run_cli_with_args(["--db", str(db_path), "reconcile"])
    assert len(_rows(db_path)) == 1
    capsys.readouterr()
    _run_cli_with_args(["--db", str(db_path), "report"])
    counts = json.loads(capsys.readouterr().out)
    assert counts == {"total": 1, "resolved": 0, "none": 0, "pending": 1}


def _record_closes(monkeypatch):
    import db.connection
    closed = []

    class _Conn(sqlite3.Connection):
        def close(self):
            closed.append(True)
            super().close()

    def _get_connection(db_path, timeout=30.0):
        return sqlite3.connect(db_path, timeout=timeout, factory=_Conn)

    monkeypatch.setattr(db.connection, "get_connection", _get_connection)
    return closed


def test_failing_run_persists_nothing_and_closes_db(env, monkeypatch):
    db_path, queries = env
    _run_cli_with_args(["--db", str(db_path), "run"])
    assert _rows(db_path)[0][3] == ""

    closed = _record_closes(monkeypatch)
    monkeypatch.setenv("GOOGLE_API_KEY", "")
    with pytest.raises(ValueError):
        _run_cli_with_args(["--db", str(db_path), "run"])

    assert closed == [True]
    assert queries == []
    assert _rows(db_path) == [("Jane Smith", "Ryde City Council", "http://www.ryde.nsw.gov.au/", "")]


def test_search_error_mid_run_persists_nothing(env, monkeypatch):
    db_path, _queries = env
    _run_cli_with_args(["--db", str(db_path), "run"])

    import google_searcher

    def _boom(self, query):
        raise RuntimeError("search backend crashed")

    monkeypatch.setattr(google_searcher.GoogleSearcher, "search", _boom)
    closed = _record_closes(monkeypatch)
    with pytest.raises(RuntimeError):
        _run_cli_with_args(["--db", str(db_path), "run"])

    assert closed == [True]
    assert _rows(db_path)[0][3] == ""


def test_zero_budget_leaves_pending_rows_and_skips_datasets(env, tmp_path):
    db_path, queries = env
    _run_cli_with_args(["--db", str(db_path), "run"])
    (tmp_path / "datasets" / "nsw.json").write_text(json.dumps([
        {"name": "Jane Smith", "council": "Ryde City Council", "council_url": "http://www.ryde.nsw.gov.au/"},
        {"name": "Tom Lee", "council": "Ryde City Council", "council_url": "http://www.ryde.nsw.gov.au/"},
    ]), encoding="utf-8")

    _run_cli_with_args(["--db", str(db_path), "run", "--max-searches", "0"])

    assert queries == []
    assert _rows(db_path) == [("Jane Smith", "Ryde City Council", "http://www.ryde.nsw.gov.au/", "")]
