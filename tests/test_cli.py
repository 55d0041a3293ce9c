import pytest

import cli
import loggen
from insights import DISABLED_MESSAGE


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)


def test_log_report(sample_file, capsys):
    path = sample_file(loggen.generate_alc(30), "alc.log")

    assert cli.main(["--format", "ALC", "--file", str(path), "--recent", "5"]) == 0

    out = capsys.readouterr().out
    assert "Log entries   : 30" in out
    assert "=== EVENTS BY DEVICE ===" in out
    assert "=== RECENT LOG ENTRIES (5) ===" in out
    assert "Total Log Entries: 30" in out
    assert "AI RECOMMENDATIONS" not in out


def test_traffic_report(sample_file, capsys):
    path = sample_file(loggen.generate_ivdc(40), "ivdc.csv")

    assert cli.main(["--format", "IVDC", "--file", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Detection rows: 40" in out
    assert "=== CONGESTION BY HOUR ===" in out
    assert "Detected Peak Traffic Hour" in out


def test_insights_without_key(sample_file, capsys):
    path = sample_file(loggen.generate_tsmc(20), "tsmc.log")

    assert cli.main(["--format", "TSMC", "--file", str(path), "--insights"]) == 0

    out = capsys.readouterr().out
    assert "=== AI RECOMMENDATIONS ===" in out
    assert DISABLED_MESSAGE in out


def test_format_mismatch_fails(sample_file, capsys):
    path = sample_file(loggen.generate_passage(10), "passage.csv")

    assert cli.main(["--format", "McAfee", "--file", str(path)]) == 1

    assert "Analysis failed: File content could not be parsed" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    assert cli.main(["--format", "IVDC", "--file", str(tmp_path / "nope.csv")]) == 1
    assert "Analysis failed" in capsys.readouterr().err


def test_unknown_format_rejected_by_argparse():
    with pytest.raises(SystemExit):
        cli.parse_args(["--format", "XML", "--file", "x"])
