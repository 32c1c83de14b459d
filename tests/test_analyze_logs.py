import importlib.util
import io
from pathlib import Path

import pytest

from call_analyzer.services.report import NO_ENTRIES_MESSAGE

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "analyze_logs.py"
SAMPLE = "+919876543210 01/15/2024 9:30 AM, 00:05:30\n07447462059 01/15/2024 10:15 AM"


@pytest.fixture
def analyze_logs(monkeypatch):
    spec = importlib.util.spec_from_file_location("analyze_logs", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "API_BASE_URL", "")
    return module


def test_missing_file_returns_error(analyze_logs, tmp_path):
    assert analyze_logs.main([str(tmp_path / "missing.txt")]) == 1


def test_non_matching_file_prints_no_entries(analyze_logs, tmp_path, capsys):
    path = tmp_path / "calls.txt"
    path.write_text("nothing that looks like a call", encoding="utf-8")

    assert analyze_logs.main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == NO_ENTRIES_MESSAGE


def test_sample_file_prints_report(analyze_logs, tmp_path, capsys):
    path = tmp_path / "calls.txt"
    path.write_text(SAMPLE, encoding="utf-8")

    assert analyze_logs.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Total Calls:    2" in out
    assert "Call Details:" in out
    assert "919876543210" in out


def test_reads_stdin(analyze_logs, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))

    assert analyze_logs.main([]) == 0
    assert "Connected:      1" in capsys.readouterr().out


def test_blank_file_with_api_skips_request(analyze_logs, tmp_path, monkeypatch, capsys):
    path = tmp_path / "calls.txt"
    path.write_text("  \n\t\n", encoding="utf-8")

    def fail_post(*args, **kwargs):
        raise AssertionError("API should not be called for blank text")

    monkeypatch.setattr(analyze_logs.requests, "post", fail_post)

    assert analyze_logs.main([str(path), "--api", "http://localhost:8000"]) == 0
    assert capsys.readouterr().out.strip() == NO_ENTRIES_MESSAGE
