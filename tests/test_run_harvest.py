"""
Tests for the run_harvest CLI.
"""

import logging

import pytest

import run_harvest
from harvest_engine.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the console handler main() installs so later tests start clean."""
    yield
    pkg_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def install(tmp_path, write_file):
    write_file("harvester/files/granttemplate.csv", "title,amount\n")
    write_file("harvester/scripts/CSVtoRDFgrant.sh", "OUT=${HARVESTED_DATA_PATH}\n")
    return tmp_path / "harvester"


def test_valid_upload_writes_script(install, write_file, tmp_path, capsys):
    upload = write_file("grants.csv", "title,amount\nBig grant,100\n")
    out = tmp_path / "out" / "harvest.sh"

    code = run_harvest.main([
        "--job", "csvgrant", "--file", str(upload), "--session", "s1",
        "--harvester-root", str(install), "--out", str(out),
    ])

    assert code == run_harvest.EXIT_OK
    assert out.read_text(encoding="utf-8") == f"OUT={install.as_posix()}/harvested-data/csv/s1/\n"
    assert "Wrote Grant harvest script" in capsys.readouterr().out


def test_script_to_stdout(install, write_file, capsys):
    upload = write_file("grants.csv", "title,amount\n")

    code = run_harvest.main([
        "--job", "csvGrant", "--file", str(upload), "--session", "s1",
        "--harvester-root", str(install), "--file-harvest-root", "/data",
    ])

    assert code == run_harvest.EXIT_OK
    assert capsys.readouterr().out == "OUT=/data/harvested-data/csv/s1/\n"


def test_invalid_upload_exits_1(install, write_file, capsys):
    upload = write_file("grants.csv", "title,amount\nBig grant\n")

    code = run_harvest.main([
        "--job", "csvGrant", "--file", str(upload), "--session", "s1",
        "--harvester-root", str(install),
    ])

    assert code == run_harvest.EXIT_INVALID_FILE
    assert "row 1: expected 2, found 1" in capsys.readouterr().err


def test_unknown_job_exits_2(install, write_file, capsys):
    upload = write_file("grants.csv", "title,amount\n")

    code = run_harvest.main([
        "--job", "csvWidget", "--file", str(upload), "--session", "s1",
        "--harvester-root", str(install),
    ])

    assert code == run_harvest.EXIT_USAGE
    assert "Unknown job type: csvWidget" in capsys.readouterr().err


def test_blank_file_harvest_root_override_exits_2(install, write_file, monkeypatch, capsys):
    monkeypatch.setenv("HARVESTER_ROOT", str(install))
    upload = write_file("grants.csv", "title,amount\n")

    code = run_harvest.main([
        "--job", "csvGrant", "--file", str(upload), "--session", "s1",
        "--file-harvest-root", "   ",
    ])

    assert code == run_harvest.EXIT_USAGE
    assert "Configuration error" in capsys.readouterr().err


def test_load_settings_validates_env_override(monkeypatch):
    monkeypatch.setenv("HARVESTER_ROOT", "/opt/h")
    args = run_harvest.parse_args([
        "--job", "csvGrant", "--file", "x.csv", "--session", "s1", "--file-harvest-root", "/data",
    ])

    settings = run_harvest.load_settings(args)

    assert settings.harvester_root == "/opt/h"
    assert settings.output_root == "/data/harvested-data/csv/"


def test_unknown_log_level_exits_2(install, write_file, capsys):
    upload = write_file("grants.csv", "title,amount\n")

    code = run_harvest.main([
        "--job", "csvGrant", "--file", str(upload), "--session", "s1",
        "--harvester-root", str(install), "--log-level", "loud",
    ])

    assert code == run_harvest.EXIT_USAGE
    assert "Unknown log level: LOUD" in capsys.readouterr().err


def test_session_with_separator_exits_2(install, write_file, capsys):
    upload = write_file("grants.csv", "title,amount\n")

    code = run_harvest.main([
        "--job", "csvGrant", "--file", str(upload), "--session", "../etc",
        "--harvester-root", str(install),
    ])

    assert code == run_harvest.EXIT_USAGE
    assert "Invalid session" in capsys.readouterr().err
