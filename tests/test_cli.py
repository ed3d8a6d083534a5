import re

from sp_importer import __version__
from sp_importer.cli import main


def test_missing_arguments_print_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "usage: sp-importer" in out
    assert re.search(rf"sp-importer {re.escape(__version__)} \(\d{{4}}-\d{{2}}-\d{{2}}\)", out)


def test_only_one_argument(capsys, tmp_path):
    assert main([str(tmp_path)]) == 1
    assert "usage" in capsys.readouterr().out


def test_not_a_directory(tmp_path):
    assert main([str(tmp_path / "nope"), str(tmp_path)]) == 1


def test_run_writes_report(workspace, tmp_path):
    scripts, work = workspace
    report = tmp_path / "report.txt"

    assert main([str(scripts), str(work), "--report", str(report), "--workers", "2"]) == 0

    lines = sorted(report.read_text(encoding="utf-8").splitlines())
    assert lines == [
        f"Matched 1 strings in {work / 'nested' / 'scene2.CSV'}",
        f"Matched 2 strings in {work / 'scene1.csv'}",
    ]


def test_default_report_in_working_directory(workspace, tmp_path, monkeypatch):
    scripts, work = workspace
    monkeypatch.chdir(tmp_path)

    assert main([str(scripts), str(work)]) == 0
    assert (tmp_path / "import_report.txt").exists()


def test_no_matches_no_report(tmp_path, monkeypatch):
    scripts = tmp_path / "scripts"
    work = tmp_path / "work"
    scripts.mkdir()
    work.mkdir()
    (work / "a.csv").write_text("header\nHello;;;\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main([str(scripts), str(work)]) == 0
    assert not (tmp_path / "import_report.txt").exists()
