"""Tests for the run_import command-line entry point."""

from datetime import date

import pytest
from sqlalchemy.orm import Session

from metrics_kernel.db.engine import build_engine, reset_engine
from metrics_kernel.services.kpi_service import KpiService
from metrics_kernel.services.staff_service import StaffService
from scripts.run_import import main


@pytest.fixture
def db_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'metrics.db'}"
    yield url
    reset_engine()


def _write_csv(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def _read_kpis(url):
    engine = build_engine(url)
    try:
        with Session(engine) as session:
            return KpiService(session).get_kpi_data()
    finally:
        engine.dispose()


class TestRunImport:
    def test_imports_kpis(self, tmp_path, db_url, capsys):
        path = _write_csv(
            tmp_path,
            "kpi.csv",
            "week_date,efficiency,production_rate,defects_ppm\n2024-01-01,85.5,150.75,25.5\n",
        )

        code = main(["--kind", "kpi", "--file", str(path), "--db-url", db_url, "--create-tables"])

        assert code == 0
        assert "Records processed: 1" in capsys.readouterr().out
        kpis = _read_kpis(db_url)
        assert [(k.week_date, k.efficiency) for k in kpis] == [(date(2024, 1, 1), 85.5)]

    def test_partial_failure_commits_good_rows(self, tmp_path, db_url, capsys):
        path = _write_csv(
            tmp_path,
            "kpi.csv",
            "week_date,efficiency,production_rate,defects_ppm\n2024-01-01,85.5,1,1\n2024-01-08,120,1,1\n",
        )

        code = main(["--kind", "kpi", "--file", str(path), "--db-url", db_url, "--create-tables"])

        out = capsys.readouterr().out
        assert code == 1
        assert "Errors: 1" in out
        assert "Row 3: efficiency Number must be less than or equal to 100" in out
        assert len(_read_kpis(db_url)) == 1

    def test_imports_staff(self, tmp_path, db_url):
        path = _write_csv(tmp_path, "staff.csv", "name,position,department,status\nAnn,Lead,QA,active\n")

        assert main(["--kind", "staff", "--file", str(path), "--db-url", db_url, "--create-tables"]) == 0

        engine = build_engine(db_url)
        try:
            with Session(engine) as session:
                members = StaffService(session).get_staff_members()
        finally:
            engine.dispose()
        assert [(m.name, m.department) for m in members] == [("Ann", "QA")]

    def test_probe_only_skips_database(self, tmp_path, capsys):
        path = _write_csv(tmp_path, "staff.csv", "name,position,department,status\nAnn,Lead,QA,active\n")

        code = main(["--kind", "staff", "--file", str(path), "--probe-only"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Rows: 1" in out
        assert "['name', 'position', 'department', 'status']" in out

    def test_missing_file(self, tmp_path, capsys):
        code = main(["--kind", "kpi", "--file", str(tmp_path / "nope.csv")])
        assert code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unknown_kind_rejected_by_argparse(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--kind", "orders", "--file", str(tmp_path / "x.csv")])
