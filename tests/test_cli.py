"""Tests for the goal_export command line."""

import logging

import pytest

import goal_export


CATEGORIES = """Row Type,Name,Target Behavior,Target By Date,Current Balance
Group,Bills,,,
Category,Rent,"Spend 1,000.00 Each Month",,0
Category,Phone,Spend 50.00 Each Month,,0
Group,Credit Card Payments,,,
Category,Visa,Spend 100.00 Each Month,,0
Group,Savings,,,
Category,Vacation,"Have a Balance of 2,400.00",By January 2027,"1,200.00"
"""


@pytest.fixture(autouse=True)
def drop_run_handlers():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    for h in list(root.handlers):
        if h.get_name() in (goal_export.LOG_FILE_HANDLER, goal_export.LOG_STREAM_HANDLER):
            root.removeHandler(h)
            h.close()


@pytest.fixture
def input_csv(tmp_path):
    path = tmp_path / "categories.csv"
    path.write_text(CATEGORIES, encoding="utf-8")
    return path


def run(tmp_path, input_csv, *args):
    return goal_export.main(["--in", str(input_csv), "--outdir", str(tmp_path / "out"), "--now", "2026-01", *args])


class TestCommands:
    def test_csv(self, tmp_path, input_csv):
        assert run(tmp_path, input_csv, "csv", "--out", "report.csv") == 0
        text = (tmp_path / "out" / "csv" / "report.csv").read_text(encoding="utf-8")
        assert '"Bills","TOTAL","","","","","12,600.00"' in text
        assert '"GRAND TOTAL","","","","","","13,800.00"' in text
        assert "Visa" not in text

    def test_csv_default_name_is_stamped(self, tmp_path, input_csv):
        assert run(tmp_path, input_csv, "csv") == 0
        assert (tmp_path / "out" / "csv" / "goal_export_2026-01-01T00-00-00.csv").exists()

    def test_quick(self, tmp_path, input_csv, capsys):
        assert run(tmp_path, input_csv, "quick") == 0
        out = capsys.readouterr().out
        assert "Bills: $12,600.00" in out
        assert "GRAND TOTAL: $13,800.00" in out

    def test_all(self, tmp_path, input_csv):
        assert run(tmp_path, input_csv, "--totals", "formula", "all") == 0
        for kind in ("csv", "xlsx", "pdf"):
            assert list((tmp_path / "out" / kind).glob(f"*.{kind}"))

    def test_exclude_and_no_info_row(self, tmp_path, input_csv):
        assert run(tmp_path, input_csv, "--exclude", "Savings", "--no-info-row", "csv", "--out", "r.csv") == 0
        lines = (tmp_path / "out" / "csv" / "r.csv").read_text(encoding="utf-8").splitlines()
        assert lines[1] == '"Bills","","","","","",""'
        assert lines[-1] == '"GRAND TOTAL","","","","","","12,600.00"'


class TestErrors:
    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            goal_export.main(["--in", str(tmp_path / "nope.csv"), "--outdir", str(tmp_path / "out"), "quick"])

    def test_duplicate_category_exits_1(self, tmp_path):
        path = tmp_path / "dup.csv"
        path.write_text(CATEGORIES + "Category,Vacation,Spend 1.00 Each Month,,0\n", encoding="utf-8")
        assert run(tmp_path, path, "quick") == 1

    def test_dedupe_keeps_first(self, tmp_path, capsys):
        path = tmp_path / "dup.csv"
        path.write_text(CATEGORIES + "Category,Vacation,Spend 1.00 Each Month,,0\n", encoding="utf-8")
        assert run(tmp_path, path, "--dedupe", "quick") == 0
        assert "Savings: $1,200.00" in capsys.readouterr().out

    def test_bad_balance_exits_1(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text(CATEGORIES + "Category,Gym,Spend 30.00 Each Month,,lots\n", encoding="utf-8")
        assert run(tmp_path, path, "quick") == 1

    def test_bad_now_rejected(self, tmp_path, input_csv):
        with pytest.raises(SystemExit):
            goal_export.main(["--in", str(input_csv), "--now", "soon", "quick"])


class TestParseNow:
    def test_month_and_day_forms(self):
        assert goal_export.parse_now("2026-03").month == 3
        assert goal_export.parse_now("2026-03-09").day == 9


class TestSetupLogging:
    def run_handlers(self):
        names = (goal_export.LOG_FILE_HANDLER, goal_export.LOG_STREAM_HANDLER)
        return [h for h in logging.getLogger().handlers if h.get_name() in names]

    def test_second_run_gets_its_own_file_and_level(self, tmp_path):
        first = goal_export.setup_logging(tmp_path / "one")
        second = goal_export.setup_logging(tmp_path / "two", verbose=True)
        handlers = self.run_handlers()
        assert len(handlers) == 2
        assert all(h.level == logging.DEBUG for h in handlers)
        files = [h for h in handlers if isinstance(h, logging.FileHandler)]
        assert [h.baseFilename for h in files] == [str(second)]
        logging.debug("verbose detail")
        assert "verbose detail" in second.read_text(encoding="utf-8")
        assert "verbose detail" not in first.read_text(encoding="utf-8")
